"""Infix to postfix conversion (Shunting-Yard).

Numbers go straight to the output queue; operators wait on a stack until
an operator that binds less tightly (or a closing parenthesis) arrives.
The resulting sequence needs no parentheses: its order is the
evaluation order.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from exprengine.core.operators import get_operator, should_pop
from exprengine.diagnostics import ExpressionSyntaxError
from exprengine.diagnostics.templates import ErrorTemplate

from .tokens import Token, TokenKind

__all__ = ["to_postfix"]

logger = logging.getLogger(__name__)


def to_postfix(tokens: Iterable[Token]) -> tuple[Token, ...]:
    """Convert infix tokens to postfix (RPN) order.

    Args:
        tokens: Tokens in infix (source) order

    Returns:
        Tokens in postfix order, parentheses removed

    Raises:
        ExpressionSyntaxError: MISMATCHED_PARENTHESES

    Example:
        >>> [t.text for t in to_postfix(tokenize("2 + 3 * 4"))]
        ['2', '3', '4', '*', '+']
        >>> [t.text for t in to_postfix(tokenize("2 ^ 3 ^ 2"))]
        ['2', '3', '2', '^', '^']
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        match token.kind:
            case TokenKind.NUMBER:
                output.append(token)
            case TokenKind.OPERATOR:
                _push_operator(token, stack, output)
            case TokenKind.LEFT_PAREN:
                stack.append(token)
            case TokenKind.RIGHT_PAREN:
                _close_paren(token, stack, output)

    while stack:
        token = stack.pop()
        if token.is_paren:
            raise ExpressionSyntaxError(ErrorTemplate.mismatched_parentheses(token.position))
        output.append(token)

    logger.debug("Postfix: %s", " ".join(t.text for t in output))
    return tuple(output)


def _push_operator(token: Token, stack: list[Token], output: list[Token]) -> None:
    """Pop operators that bind at least as tightly, then push *token*.

    An operator missing from the table never pops anything; the evaluator
    reports it as UNKNOWN_OPERATOR.
    """
    current = get_operator(token.text)
    while stack and stack[-1].is_operator and current is not None:
        top = get_operator(stack[-1].text)
        if top is None or not should_pop(current, top):
            break
        output.append(stack.pop())
    stack.append(token)


def _close_paren(token: Token, stack: list[Token], output: list[Token]) -> None:
    """Pop operators up to the matching '(' (which is discarded)."""
    while stack:
        top = stack.pop()
        if top.kind is TokenKind.LEFT_PAREN:
            return
        output.append(top)
    raise ExpressionSyntaxError(ErrorTemplate.mismatched_parentheses(token.position))
