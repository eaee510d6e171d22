"""Token types produced by the tokenizer.

Tokens are immutable once created; the converter reorders them but never
modifies them.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["Token", "TokenKind"]


class TokenKind(StrEnum):
    """Lexical category of a token."""

    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


@dataclass(frozen=True, slots=True)
class Token:
    """Single lexical element of an expression.

    Attributes:
        kind: Lexical category
        text: Source text; numbers keep their decimal string so no
            precision is lost before arithmetic
        position: 0-based offset in the whitespace-stripped expression
    """

    kind: TokenKind
    text: str
    position: int = 0

    @property
    def is_number(self) -> bool:
        """True for NUMBER tokens."""
        return self.kind is TokenKind.NUMBER

    @property
    def is_operator(self) -> bool:
        """True for OPERATOR tokens."""
        return self.kind is TokenKind.OPERATOR

    @property
    def is_paren(self) -> bool:
        """True for either parenthesis."""
        return self.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN)

    def __str__(self) -> str:
        return self.text
