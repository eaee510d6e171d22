"""Tests for core/arithmetic.py.

Python 3.13+.
"""

from __future__ import annotations

import decimal
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from exprengine.constants import MAX_EXPONENT
from exprengine.core import arithmetic
from exprengine.diagnostics import ErrorCode, ExpressionEvaluationError

D = Decimal

decimals = st.decimals(
    min_value=-(10**6), max_value=10**6, allow_nan=False, allow_infinity=False, places=6
)
scales = st.integers(min_value=0, max_value=12)


class TestTruncate:
    """Truncation toward zero."""

    @pytest.mark.parametrize(
        ("value", "scale", "expected"),
        [
            ("3.14159", 2, "3.14"),
            ("-3.14159", 2, "-3.14"),
            ("2.999", 0, "2"),
            ("-2.999", 0, "-2"),
            ("5", 3, "5.000"),
        ],
    )
    def test_truncate(self, value: str, scale: int, expected: str) -> None:
        assert arithmetic.truncate(D(value), scale) == D(expected)

    @given(value=decimals, scale=scales)
    def test_never_increases_magnitude(self, value: Decimal, scale: int) -> None:
        result = arithmetic.truncate(value, scale)
        assert abs(result) <= abs(value)
        assert abs(value - result) < D(1).scaleb(-scale)


class TestBasicOperations:
    """Scale-aware add, subtract, multiply and divide."""

    def test_add(self) -> None:
        assert arithmetic.add(D("1.25"), D("2.5"), 4) == D("3.75")

    def test_subtract_can_go_negative(self) -> None:
        assert arithmetic.subtract(D("1"), D("2.5"), 4) == D("-1.5")

    def test_multiply_truncates(self) -> None:
        assert arithmetic.multiply(D("1.111"), D("1.111"), 2) == D("1.23")

    @pytest.mark.parametrize(
        ("scale", "expected"),
        [(0, "3"), (2, "3.33"), (4, "3.3333"), (10, "3.3333333333")],
    )
    def test_divide_truncates_to_scale(self, scale: int, expected: str) -> None:
        result = arithmetic.divide(D(10), D(3), scale)
        assert result == D(expected)
        assert str(result) == expected

    def test_divide_toward_zero_for_negatives(self) -> None:
        assert arithmetic.divide(D(-7), D(2), 0) == D(-3)
        assert arithmetic.divide(D(2), D(-3), 2) == D("-0.66")

    def test_divide_by_zero(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            arithmetic.divide(D(1), D("0.000"), 4)
        assert exc_info.value.code == ErrorCode.DIVISION_BY_ZERO

    def test_independent_of_decimal_context(self) -> None:
        """A tiny thread context precision does not leak into results."""
        with decimal.localcontext() as ctx:
            ctx.prec = 3
            ctx.rounding = decimal.ROUND_HALF_UP
            assert arithmetic.add(D("123456.789"), D("1"), 4) == D("123457.789")
            assert arithmetic.divide(D(2), D(3), 6) == D("0.666666")

    @given(left=decimals, right=decimals, scale=scales)
    def test_add_matches_exact_then_truncate(
        self, left: Decimal, right: Decimal, scale: int
    ) -> None:
        with decimal.localcontext() as ctx:
            ctx.prec = 50
            exact = left + right
        assert arithmetic.add(left, right, scale) == arithmetic.truncate(exact, scale)

    @given(left=decimals, right=decimals, scale=scales)
    def test_multiply_commutes(self, left: Decimal, right: Decimal, scale: int) -> None:
        assert arithmetic.multiply(left, right, scale) == arithmetic.multiply(right, left, scale)

    @given(left=decimals, right=decimals.filter(lambda d: not d.is_zero()), scale=scales)
    def test_divide_result_has_at_most_scale_digits(
        self, left: Decimal, right: Decimal, scale: int
    ) -> None:
        result = arithmetic.divide(left, right, scale)
        assert -result.as_tuple().exponent <= scale or result.is_zero()


class TestPower:
    """Integral powers with bounded size."""

    @pytest.mark.parametrize(
        ("base", "exponent", "scale", "expected"),
        [
            ("2", "10", 4, "1024"),
            ("2", "0", 4, "1"),
            ("0", "0", 4, "1"),
            ("0", "5", 4, "0"),
            ("1.5", "2", 4, "2.25"),
            ("1.1", "3", 2, "1.33"),
            ("-2", "3", 0, "-8"),
            ("2", "-2", 4, "0.25"),
            ("3", "-1", 4, "0.3333"),
            ("-2", "-1", 2, "-0.5"),
            ("2", "3.000", 0, "8"),
        ],
    )
    def test_power(self, base: str, exponent: str, scale: int, expected: str) -> None:
        assert arithmetic.power(D(base), D(exponent), scale) == D(expected)

    def test_large_integer_power_is_exact(self) -> None:
        assert arithmetic.power(D(2), D(200), 0) == D(2**200)

    def test_fractional_exponent(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            arithmetic.power(D(4), D("0.5"), 4)
        assert exc_info.value.code == ErrorCode.EVALUATION_ERROR
        assert "fractional" in str(exc_info.value)

    def test_zero_to_negative_power(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            arithmetic.power(D(0), D(-1), 4)
        assert exc_info.value.code == ErrorCode.DIVISION_BY_ZERO

    def test_exponent_limit(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            arithmetic.power(D(2), D(MAX_EXPONENT + 1), 0)
        assert exc_info.value.code == ErrorCode.EVALUATION_ERROR
        assert "Exponent too large" in str(exc_info.value)

    def test_result_size_limit(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            arithmetic.power(D(10**100), D(MAX_EXPONENT), 0)
        assert "Power result too large" in str(exc_info.value)

    def test_one_to_huge_power_within_limit(self) -> None:
        assert arithmetic.power(D(1), D(MAX_EXPONENT), 4) == D(1)

    @given(
        base=st.integers(min_value=-50, max_value=50),
        exponent=st.integers(min_value=0, max_value=20),
    )
    def test_integer_power_matches_int(self, base: int, exponent: int) -> None:
        assert arithmetic.power(D(base), D(exponent), 0) == D(base**exponent)
