"""Postfix (RPN) evaluation.

Numbers are pushed onto a value stack; each operator pops its right
operand first and its left operand second, so ``5 3 -`` computes
``5 - 3``. A well-formed postfix sequence leaves exactly one value.

Python 3.13+.
"""

import logging
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from exprengine.core.operators import get_operator
from exprengine.diagnostics import ExpressionEvaluationError
from exprengine.diagnostics.templates import ErrorTemplate
from exprengine.syntax.tokens import Token

__all__ = ["evaluate_postfix", "parse_number"]

logger = logging.getLogger(__name__)


def parse_number(token: Token) -> Decimal:
    """Convert a NUMBER token to an exact Decimal.

    Raises:
        ExpressionEvaluationError: EVALUATION_ERROR for malformed literals
            such as "1.2.3" or "."
    """
    try:
        return Decimal(token.text)
    except InvalidOperation:
        raise ExpressionEvaluationError(
            ErrorTemplate.invalid_number(token.text, token.position)
        ) from None


def evaluate_postfix(tokens: Iterable[Token], scale: int) -> Decimal:
    """Evaluate postfix tokens with fixed-scale decimal arithmetic.

    Args:
        tokens: Tokens in postfix order
        scale: Fractional digits retained by every operation

    Returns:
        The single value left on the stack

    Raises:
        ExpressionEvaluationError: UNKNOWN_OPERATOR, INSUFFICIENT_OPERANDS,
            DIVISION_BY_ZERO, INVALID_EXPRESSION or EVALUATION_ERROR
    """
    stack: list[Decimal] = []

    for token in tokens:
        if token.is_number:
            stack.append(parse_number(token))
            continue

        operator = get_operator(token.text)
        if operator is None:
            raise ExpressionEvaluationError(
                ErrorTemplate.unknown_operator(token.text, token.position)
            )

        if len(stack) < 2:
            raise ExpressionEvaluationError(
                ErrorTemplate.insufficient_operands(token.text, token.position)
            )

        right = stack.pop()
        left = stack.pop()

        if operator.symbol == "/" and right.is_zero():
            raise ExpressionEvaluationError(ErrorTemplate.division_by_zero(token.position))

        result = operator.function(left, right, scale)
        logger.debug("%s %s %s = %s", left, operator.symbol, right, result)
        stack.append(result)

    if len(stack) != 1:
        raise ExpressionEvaluationError(ErrorTemplate.too_many_operands(len(stack)))

    return stack[0]
