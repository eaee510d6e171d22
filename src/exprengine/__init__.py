"""exprengine - Infix arithmetic with fixed-scale decimal precision.

Parses expressions made of numbers, the binary operators + - * / ^ and
parentheses, converts them to postfix with the Shunting-Yard algorithm
and evaluates them with exact decimal arithmetic truncated to a
configurable scale.

Public API:
    ExpressionParser - Stateful evaluator (scale, last error, error sink)
    evaluate - One-shot evaluation with a raising parser
    ErrorSink - Protocol deciding how failures reach the caller
    RaisingErrorSink - Raise ExpressionError subclasses (default)
    ReturningErrorSink - Return the Diagnostic as the call's value
    Diagnostic - Structured (code, message) failure record
    ErrorCode - Stable error codes ("division_by_zero", ...)

Exceptions:
    ExpressionError - Base exception class
    ExpressionSyntaxError - Validation and conversion errors
    ExpressionEvaluationError - Evaluation errors
    InvalidScaleError - Negative or non-integer scale

Submodules:
    exprengine.core - Operator table, fixed-scale arithmetic, Babel access
    exprengine.syntax - Validator, tokenizer, Shunting-Yard converter
    exprengine.runtime - RPN evaluator, formatting, error sinks
    exprengine.diagnostics - Error codes, templates, formatter
"""

from .constants import DEFAULT_SCALE
from .diagnostics import (
    Diagnostic,
    ErrorCode,
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    InvalidScaleError,
)
from .runtime import ErrorSink, ExpressionParser, RaisingErrorSink, ReturningErrorSink

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("exprengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


def evaluate(expression: str, scale: int = DEFAULT_SCALE) -> str | int:
    """Evaluate *expression* once with a fresh raising parser.

    Example:
        >>> evaluate("2 ^ 3 ^ 2")
        512
        >>> evaluate("10 / 3", scale=2)
        '3.33'

    Raises:
        ExpressionError: On any failure
    """
    result = ExpressionParser(scale).evaluate(expression)
    assert isinstance(result, (str, int))  # RaisingErrorSink never returns on failure
    return result


__all__ = [
    "DEFAULT_SCALE",
    "Diagnostic",
    "ErrorCode",
    "ErrorSink",
    "ExpressionError",
    "ExpressionEvaluationError",
    "ExpressionParser",
    "ExpressionSyntaxError",
    "InvalidScaleError",
    "RaisingErrorSink",
    "ReturningErrorSink",
    "__version__",
    "evaluate",
]
