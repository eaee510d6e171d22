"""Tests for the top-level exprengine namespace.

Python 3.13+.
"""

from __future__ import annotations

import pytest

import exprengine
from exprengine import ErrorCode, ExpressionEvaluationError, evaluate


class TestPackage:
    def test_all_names_resolve(self) -> None:
        for name in exprengine.__all__:
            assert hasattr(exprengine, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(exprengine.__version__, str)
        assert exprengine.__version__

    def test_default_scale(self) -> None:
        assert exprengine.DEFAULT_SCALE == 4


class TestEvaluateFunction:
    def test_evaluate(self) -> None:
        assert evaluate("2 ^ 3 ^ 2") == 512
        assert evaluate("10 / 3", scale=2) == "3.33"

    def test_evaluate_raises(self) -> None:
        with pytest.raises(ExpressionEvaluationError) as exc_info:
            evaluate("10 / 0")
        assert exc_info.value.code == ErrorCode.DIVISION_BY_ZERO
