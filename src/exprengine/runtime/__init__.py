"""Expression runtime package.

Provides postfix evaluation, result formatting, error sinks and the
ExpressionParser API. Depends on the syntax package for conversion.

Python 3.13+.
"""

from .evaluator import evaluate_postfix
from .formatting import format_result, localize_result
from .parser import ExpressionParser
from .sinks import ErrorSink, RaisingErrorSink, ReturningErrorSink

__all__ = [
    "ErrorSink",
    "ExpressionParser",
    "RaisingErrorSink",
    "ReturningErrorSink",
    "evaluate_postfix",
    "format_result",
    "localize_result",
]
