"""Early rejection of malformed expressions.

Runs on the raw expression string before tokenization:
- Empty or whitespace-only input
- Characters outside the accepted alphabet
- Unbalanced parentheses (raw character scan, token boundaries ignored)

Python 3.13+.
"""

from exprengine.constants import ALLOWED_CHARACTERS
from exprengine.diagnostics import ExpressionSyntaxError
from exprengine.diagnostics.templates import ErrorTemplate

__all__ = ["validate_expression", "validate_parentheses"]


def validate_expression(expression: str) -> None:
    """Validate an expression for basic syntax errors.

    Args:
        expression: Raw expression text

    Raises:
        ExpressionSyntaxError: EMPTY_EXPRESSION, INVALID_CHARACTERS or
            MISMATCHED_PARENTHESES
    """
    if not expression.strip():
        raise ExpressionSyntaxError(ErrorTemplate.empty_expression())

    invalid = [
        (index, char)
        for index, char in enumerate(expression)
        if char not in ALLOWED_CHARACTERS and not char.isspace()
    ]
    if invalid:
        leftover = "".join(char for _, char in invalid)
        raise ExpressionSyntaxError(ErrorTemplate.invalid_characters(leftover, invalid[0][0]))

    validate_parentheses(expression)


def validate_parentheses(expression: str) -> None:
    """Check that parentheses balance.

    A running counter is incremented on '(' and decremented on ')'. Going
    negative fails immediately; a positive count after the scan fails too.

    Args:
        expression: Expression text

    Raises:
        ExpressionSyntaxError: MISMATCHED_PARENTHESES
    """
    depth = 0
    for index, char in enumerate(expression):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise ExpressionSyntaxError(ErrorTemplate.unexpected_close_paren(index))
    if depth > 0:
        raise ExpressionSyntaxError(ErrorTemplate.missing_close_paren(depth))
