"""Split a validated expression into tokens.

Whitespace is removed first, so "1 2" is the single number 12. Each
maximal run of digits and '.' becomes one NUMBER token; every operator
and parenthesis is a token of its own. A leading or doubled operator is
still a binary operator here: there is no unary minus, and such input
fails later for lack of operands.

Python 3.13+.
"""

import re

from .tokens import Token, TokenKind

__all__ = ["tokenize"]

_TOKEN_RE = re.compile(r"(?P<number>[0-9.]+)|(?P<operator>[-+*/^])|(?P<lparen>\()|(?P<rparen>\))")

_KIND_BY_GROUP: dict[str, TokenKind] = {
    "number": TokenKind.NUMBER,
    "operator": TokenKind.OPERATOR,
    "lparen": TokenKind.LEFT_PAREN,
    "rparen": TokenKind.RIGHT_PAREN,
}


def tokenize(expression: str) -> tuple[Token, ...]:
    """Tokenize an expression that passed validation.

    Characters outside the accepted alphabet are skipped; the validator
    has already rejected them.

    Args:
        expression: Validated expression text

    Returns:
        Tokens in source order

    Example:
        >>> [t.text for t in tokenize("2 + 3.5*(4-1)")]
        ['2', '+', '3.5', '*', '(', '4', '-', '1', ')']
    """
    compact = "".join(expression.split())
    tokens: list[Token] = []
    for match in _TOKEN_RE.finditer(compact):
        group = match.lastgroup
        assert group is not None  # every alternative is a named group
        tokens.append(Token(_KIND_BY_GROUP[group], match.group(), match.start()))
    return tuple(tokens)
