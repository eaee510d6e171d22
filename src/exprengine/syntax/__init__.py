"""Expression syntax package.

Provides validation, tokenization and infix-to-postfix conversion.
Separate from runtime so tooling can inspect the postfix form without
evaluating it.

Python 3.13+.
"""

from .shunting_yard import to_postfix
from .tokenizer import tokenize
from .tokens import Token, TokenKind
from .validator import validate_expression, validate_parentheses

__all__ = [
    "Token",
    "TokenKind",
    "to_postfix",
    "tokenize",
    "validate_expression",
    "validate_parentheses",
]
