"""Diagnostic codes and data structures.

Defines the stable error codes and the structured diagnostic record
delivered to error sinks.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "Diagnostic",
    "ErrorCode",
]


class ErrorCode(StrEnum):
    """Stable, machine-checkable error codes.

    Inherits from ``StrEnum`` so that codes compare equal to their plain
    string form (``code == "division_by_zero"``) and serialize without
    the ``"ErrorCode.X"`` repr.

    Syntax errors (validator and converter):
        EMPTY_EXPRESSION, INVALID_CHARACTERS, MISMATCHED_PARENTHESES

    Evaluation errors (RPN evaluator and arithmetic):
        UNKNOWN_OPERATOR, INSUFFICIENT_OPERANDS, DIVISION_BY_ZERO,
        INVALID_EXPRESSION, EVALUATION_ERROR

    Configuration and display:
        INVALID_SCALE, UNKNOWN_LOCALE
    """

    EMPTY_EXPRESSION = "empty_expression"
    INVALID_CHARACTERS = "invalid_characters"
    MISMATCHED_PARENTHESES = "mismatched_parentheses"

    UNKNOWN_OPERATOR = "unknown_operator"
    INSUFFICIENT_OPERANDS = "insufficient_operands"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_EXPRESSION = "invalid_expression"
    EVALUATION_ERROR = "evaluation_error"

    INVALID_SCALE = "invalid_scale"
    UNKNOWN_LOCALE = "unknown_locale"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    The ``(code, message)`` pair is the contract with error sinks; the
    remaining fields are optional context for humans and tools.

    Attributes:
        code: Stable error code
        message: Human-readable error description
        position: 0-based character offset of the offending input, if known
        hint: Suggestion for fixing the error
    """

    code: ErrorCode
    message: str
    position: int | None = None
    hint: str | None = None

    def __post_init__(self) -> None:
        """Validate Diagnostic invariants.

        Raises:
            ValueError: If position is negative.
        """
        if self.position is not None and self.position < 0:
            msg = f"Diagnostic.position must be >= 0, got {self.position}"
            raise ValueError(msg)

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[division_by_zero]: Division by zero
              --> position 4
              = help: Make sure the divisor is not zero

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
