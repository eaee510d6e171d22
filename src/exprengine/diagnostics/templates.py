"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from exprengine.constants import MAX_SCALE

from .codes import Diagnostic, ErrorCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Syntax errors ----------------------------------------------------------

    @staticmethod
    def empty_expression() -> Diagnostic:
        """Expression is empty or whitespace only.

        Returns:
            Diagnostic for EMPTY_EXPRESSION
        """
        return Diagnostic(
            code=ErrorCode.EMPTY_EXPRESSION,
            message="Expression cannot be empty.",
            hint="Provide an expression such as '2 + 3'",
        )

    @staticmethod
    def invalid_characters(invalid: str, position: int) -> Diagnostic:
        """Expression contains characters outside the accepted alphabet.

        Args:
            invalid: Every disallowed character, in input order
            position: Offset of the first disallowed character

        Returns:
            Diagnostic for INVALID_CHARACTERS
        """
        msg = f"Invalid characters in expression: {invalid}"
        return Diagnostic(
            code=ErrorCode.INVALID_CHARACTERS,
            message=msg,
            position=position,
            hint="Only digits, '.', whitespace, parentheses and + - * / ^ are allowed",
        )

    @staticmethod
    def unexpected_close_paren(position: int) -> Diagnostic:
        """Closing parenthesis without a matching opening one.

        Args:
            position: Offset of the unmatched ')'

        Returns:
            Diagnostic for MISMATCHED_PARENTHESES
        """
        return Diagnostic(
            code=ErrorCode.MISMATCHED_PARENTHESES,
            message="Mismatched parentheses: unexpected ')'",
            position=position,
            hint="Remove the extra ')' or add a matching '('",
        )

    @staticmethod
    def missing_close_paren(unclosed: int) -> Diagnostic:
        """Opening parentheses left unclosed at end of input.

        Args:
            unclosed: Number of '(' still open

        Returns:
            Diagnostic for MISMATCHED_PARENTHESES
        """
        return Diagnostic(
            code=ErrorCode.MISMATCHED_PARENTHESES,
            message="Mismatched parentheses: missing ')'",
            hint=f"Add {unclosed} closing parenthes{'is' if unclosed == 1 else 'es'}",
        )

    @staticmethod
    def mismatched_parentheses(position: int | None = None) -> Diagnostic:
        """Parenthesis imbalance found while building the postfix form.

        Args:
            position: Offset of the parenthesis token, if known

        Returns:
            Diagnostic for MISMATCHED_PARENTHESES
        """
        return Diagnostic(
            code=ErrorCode.MISMATCHED_PARENTHESES,
            message="Mismatched parentheses",
            position=position,
        )

    # Evaluation errors ------------------------------------------------------

    @staticmethod
    def unknown_operator(symbol: str, position: int | None = None) -> Diagnostic:
        """Postfix token is not a known operator.

        Args:
            symbol: The unrecognised operator text
            position: Offset of the token, if known

        Returns:
            Diagnostic for UNKNOWN_OPERATOR
        """
        msg = f"Unknown operator: {symbol}"
        return Diagnostic(code=ErrorCode.UNKNOWN_OPERATOR, message=msg, position=position)

    @staticmethod
    def insufficient_operands(symbol: str, position: int | None = None) -> Diagnostic:
        """Binary operator applied with fewer than two values available.

        Args:
            symbol: The operator being applied
            position: Offset of the operator, if known

        Returns:
            Diagnostic for INSUFFICIENT_OPERANDS
        """
        msg = f"Insufficient operands for operator: {symbol}"
        return Diagnostic(
            code=ErrorCode.INSUFFICIENT_OPERANDS,
            message=msg,
            position=position,
            hint="Unary minus is not supported; write '0 - x' instead of '-x'",
        )

    @staticmethod
    def division_by_zero(position: int | None = None) -> Diagnostic:
        """Division (or negative power) with a zero divisor.

        Args:
            position: Offset of the operator, if known

        Returns:
            Diagnostic for DIVISION_BY_ZERO
        """
        return Diagnostic(
            code=ErrorCode.DIVISION_BY_ZERO,
            message="Division by zero",
            position=position,
            hint="Make sure the divisor is not zero",
        )

    @staticmethod
    def too_many_operands(remaining: int) -> Diagnostic:
        """Evaluation finished with other than exactly one value.

        Args:
            remaining: Values left on the stack

        Returns:
            Diagnostic for INVALID_EXPRESSION
        """
        return Diagnostic(
            code=ErrorCode.INVALID_EXPRESSION,
            message="Invalid expression: too many operands",
            hint=f"Evaluation left {remaining} values; check for missing operators",
        )

    @staticmethod
    def invalid_number(literal: str, position: int | None = None) -> Diagnostic:
        """Number token that is not a valid decimal literal.

        Args:
            literal: The offending token text
            position: Offset of the token, if known

        Returns:
            Diagnostic for EVALUATION_ERROR
        """
        msg = f"Invalid number: {literal}"
        return Diagnostic(
            code=ErrorCode.EVALUATION_ERROR,
            message=msg,
            position=position,
            hint="Numbers may contain at most one decimal point",
        )

    @staticmethod
    def fractional_exponent(exponent: str) -> Diagnostic:
        """Power with a non-integral exponent.

        Args:
            exponent: The exponent as written

        Returns:
            Diagnostic for EVALUATION_ERROR
        """
        msg = f"Exponent cannot have a fractional part: {exponent}"
        return Diagnostic(code=ErrorCode.EVALUATION_ERROR, message=msg)

    @staticmethod
    def exponent_too_large(exponent: str, limit: int) -> Diagnostic:
        """Power whose exponent exceeds the evaluation limit.

        Args:
            exponent: The exponent as written
            limit: Largest accepted absolute exponent

        Returns:
            Diagnostic for EVALUATION_ERROR
        """
        msg = f"Exponent too large: {exponent} (limit {limit})"
        return Diagnostic(code=ErrorCode.EVALUATION_ERROR, message=msg)

    @staticmethod
    def power_too_large(base: str, exponent: str) -> Diagnostic:
        """Exact power whose result would be unreasonably large.

        Args:
            base: The base as computed
            exponent: The exponent as computed

        Returns:
            Diagnostic for EVALUATION_ERROR
        """
        msg = f"Power result too large: {base[:20]} ^ {exponent}"
        return Diagnostic(code=ErrorCode.EVALUATION_ERROR, message=msg)

    @staticmethod
    def evaluation_failed(reason: str) -> Diagnostic:
        """Unexpected failure surfaced while evaluating.

        Args:
            reason: Description of the underlying failure

        Returns:
            Diagnostic for EVALUATION_ERROR
        """
        msg = f"Evaluation failed: {reason}"
        return Diagnostic(code=ErrorCode.EVALUATION_ERROR, message=msg)

    # Configuration and display ----------------------------------------------

    @staticmethod
    def invalid_scale(scale: object) -> Diagnostic:
        """Scale is negative, too large or not an integer.

        Args:
            scale: The rejected value

        Returns:
            Diagnostic for INVALID_SCALE
        """
        return Diagnostic(
            code=ErrorCode.INVALID_SCALE,
            message="Scale must be a non-negative integer",
            hint=f"Got {scale!r}; the largest accepted scale is {MAX_SCALE}",
        )

    @staticmethod
    def unknown_locale(locale_code: str) -> Diagnostic:
        """Locale code not known to CLDR.

        Args:
            locale_code: The rejected locale identifier

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        msg = f"Unknown locale: '{locale_code}'"
        return Diagnostic(
            code=ErrorCode.UNKNOWN_LOCALE,
            message=msg,
            hint="Use a CLDR locale identifier such as 'en_US' or 'de_DE'",
        )
