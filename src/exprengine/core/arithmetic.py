"""Fixed-scale decimal arithmetic.

Every operation computes the exact result from the operands' integer
ratios and then truncates toward zero to ``scale`` fractional digits, the
behaviour of classic arbitrary-precision calculators (``bc``). Nothing
here depends on the thread's ``decimal`` context, so results are the same
whatever precision or rounding a caller has configured.

Python 3.13+. Zero external dependencies.
"""

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal

from exprengine.constants import MAX_EXPONENT, MAX_POWER_BITS
from exprengine.diagnostics import ExpressionEvaluationError
from exprengine.diagnostics.templates import ErrorTemplate

__all__ = [
    "add",
    "divide",
    "multiply",
    "power",
    "subtract",
    "truncate",
]

# Exponent shifts only; never rounds.
_EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _from_ratio(numerator: int, denominator: int, scale: int) -> Decimal:
    """Truncate numerator/denominator toward zero at ``scale`` digits."""
    negative = (numerator < 0) != (denominator < 0)
    quotient = abs(numerator) * 10**scale // abs(denominator)
    if negative:
        quotient = -quotient
    return Decimal(quotient).scaleb(-scale, context=_EXACT_CONTEXT)


def truncate(value: Decimal, scale: int) -> Decimal:
    """Drop fractional digits beyond ``scale`` (toward zero).

    Example:
        >>> truncate(Decimal("-3.14159"), 2)
        Decimal('-3.14')
    """
    numerator, denominator = value.as_integer_ratio()
    return _from_ratio(numerator, denominator, scale)


def add(left: Decimal, right: Decimal, scale: int) -> Decimal:
    """left + right, truncated to scale."""
    ln, ld = left.as_integer_ratio()
    rn, rd = right.as_integer_ratio()
    return _from_ratio(ln * rd + rn * ld, ld * rd, scale)


def subtract(left: Decimal, right: Decimal, scale: int) -> Decimal:
    """left - right, truncated to scale."""
    ln, ld = left.as_integer_ratio()
    rn, rd = right.as_integer_ratio()
    return _from_ratio(ln * rd - rn * ld, ld * rd, scale)


def multiply(left: Decimal, right: Decimal, scale: int) -> Decimal:
    """left * right, truncated to scale."""
    ln, ld = left.as_integer_ratio()
    rn, rd = right.as_integer_ratio()
    return _from_ratio(ln * rn, ld * rd, scale)


def divide(left: Decimal, right: Decimal, scale: int) -> Decimal:
    """left / right, truncated to scale.

    Raises:
        ExpressionEvaluationError: DIVISION_BY_ZERO if right is zero
    """
    if right.is_zero():
        raise ExpressionEvaluationError(ErrorTemplate.division_by_zero())
    ln, ld = left.as_integer_ratio()
    rn, rd = right.as_integer_ratio()
    return _from_ratio(ln * rd, ld * rn, scale)


def power(left: Decimal, right: Decimal, scale: int) -> Decimal:
    """left raised to the integral power right, truncated to scale.

    A negative exponent yields the truncated reciprocal, so
    ``power(2, -2, 4) == 0.25`` and ``power(3, -1, 4) == 0.3333``.

    Raises:
        ExpressionEvaluationError: EVALUATION_ERROR for a fractional or
            oversized exponent, DIVISION_BY_ZERO for zero to a negative power
    """
    exponent_numerator, exponent_denominator = right.as_integer_ratio()
    if exponent_denominator != 1:
        raise ExpressionEvaluationError(ErrorTemplate.fractional_exponent(str(right)))
    exponent = exponent_numerator
    if abs(exponent) > MAX_EXPONENT:
        raise ExpressionEvaluationError(ErrorTemplate.exponent_too_large(str(right), MAX_EXPONENT))

    numerator, denominator = left.as_integer_ratio()
    if numerator == 0:
        if exponent < 0:
            raise ExpressionEvaluationError(ErrorTemplate.division_by_zero())
        return truncate(Decimal(1 if exponent == 0 else 0), scale)

    size = max(numerator.bit_length(), denominator.bit_length()) * abs(exponent)
    if size > MAX_POWER_BITS:
        raise ExpressionEvaluationError(ErrorTemplate.power_too_large(str(left), str(right)))

    if exponent < 0:
        return _from_ratio(denominator ** -exponent, numerator ** -exponent, scale)
    return _from_ratio(numerator**exponent, denominator**exponent, scale)
