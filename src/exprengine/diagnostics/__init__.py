"""Diagnostic system for expression errors.

Provides structured error diagnostics with stable codes, positions and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCode
from .errors import (
    ExpressionError,
    ExpressionEvaluationError,
    ExpressionSyntaxError,
    InvalidScaleError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticFormatter",
    "ErrorCode",
    "ErrorTemplate",
    "ExpressionError",
    "ExpressionEvaluationError",
    "ExpressionSyntaxError",
    "InvalidScaleError",
    "OutputFormat",
]
