"""Expression exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects so that the ``(code, message)``
pair survives unmodified from the stage that detects a failure to the
error sink that reports it.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCode


class ExpressionError(Exception):
    """Base exception for all expression errors.

    Attributes:
        diagnostic: Structured diagnostic information
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ExpressionError.

        Args:
            message: Error message string OR Diagnostic object. A plain
                string is wrapped in an EVALUATION_ERROR diagnostic.
        """
        if isinstance(message, Diagnostic):
            self.diagnostic = message
        else:
            self.diagnostic = Diagnostic(code=ErrorCode.EVALUATION_ERROR, message=message)
        super().__init__(self.diagnostic.message)

    @property
    def code(self) -> ErrorCode:
        """Error code of the carried diagnostic."""
        return self.diagnostic.code


class ExpressionSyntaxError(ExpressionError):
    """Malformed expression detected before evaluation.

    Raised by the validator (empty input, invalid characters, unbalanced
    parentheses) and by the Shunting-Yard converter.
    """


class ExpressionEvaluationError(ExpressionError):
    """Failure while evaluating the postfix form.

    Examples:
    - Division by zero
    - Operator without enough operands
    - Operands left over after the last operator
    """


class InvalidScaleError(ExpressionError, ValueError):
    """Negative or non-integer scale passed to a parser.

    Also a ValueError so callers validating arguments generically still
    catch it.
    """
