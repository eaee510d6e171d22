"""Error sinks: how failures reach the caller.

The parser never decides between raising and returning. It hands every
Diagnostic to a sink and returns whatever the sink returns.

- RaisingErrorSink (default): raise the matching ExpressionError
- ReturningErrorSink: return the Diagnostic as the call's value, for
  hosts that expect error objects instead of exceptions

Python 3.13+.
"""

from typing import NoReturn, Protocol

from exprengine.diagnostics import (
    Diagnostic,
    ErrorCode,
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    InvalidScaleError,
)

__all__ = ["ErrorSink", "RaisingErrorSink", "ReturningErrorSink", "exception_for"]

_EXCEPTION_BY_CODE: dict[ErrorCode, type[ExpressionError]] = {
    ErrorCode.EMPTY_EXPRESSION: ExpressionSyntaxError,
    ErrorCode.INVALID_CHARACTERS: ExpressionSyntaxError,
    ErrorCode.MISMATCHED_PARENTHESES: ExpressionSyntaxError,
    ErrorCode.UNKNOWN_OPERATOR: ExpressionEvaluationError,
    ErrorCode.INSUFFICIENT_OPERANDS: ExpressionEvaluationError,
    ErrorCode.DIVISION_BY_ZERO: ExpressionEvaluationError,
    ErrorCode.INVALID_EXPRESSION: ExpressionEvaluationError,
    ErrorCode.EVALUATION_ERROR: ExpressionEvaluationError,
    ErrorCode.INVALID_SCALE: InvalidScaleError,
}


def exception_for(diagnostic: Diagnostic) -> ExpressionError:
    """Build the exception class matching a diagnostic's code."""
    return _EXCEPTION_BY_CODE.get(diagnostic.code, ExpressionError)(diagnostic)


class ErrorSink(Protocol):
    """Receives every failure the parser detects."""

    def report(self, diagnostic: Diagnostic) -> object:
        """Deliver *diagnostic*; the return value becomes the call's result."""
        ...  # pylint: disable=unnecessary-ellipsis


class RaisingErrorSink:
    """Raise an ExpressionError subclass carrying the diagnostic."""

    __slots__ = ()

    def report(self, diagnostic: Diagnostic) -> NoReturn:
        raise exception_for(diagnostic)

    def __repr__(self) -> str:
        return "RaisingErrorSink()"


class ReturningErrorSink:
    """Return the diagnostic itself as the result of the failing call.

    Example:
        >>> parser = ExpressionParser(sink=ReturningErrorSink())
        >>> result = parser.evaluate("10 / 0")
        >>> isinstance(result, Diagnostic) and result.code == "division_by_zero"
        True
    """

    __slots__ = ()

    def report(self, diagnostic: Diagnostic) -> Diagnostic:
        return diagnostic

    def __repr__(self) -> str:
        return "ReturningErrorSink()"
