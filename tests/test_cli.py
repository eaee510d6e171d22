"""Tests for the command-line evaluator (exprengine.__main__).

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from exprengine.__main__ import build_arg_parser, main
from exprengine.core.babel_compat import is_babel_available

needs_babel = pytest.mark.skipif(not is_babel_available(), reason="Babel not installed")


class TestArguments:
    def test_defaults(self) -> None:
        args = build_arg_parser().parse_args(["1 + 1"])
        assert args.expressions == ["1 + 1"]
        assert args.scale == 4
        assert args.locale is None
        assert args.format == "rust"
        assert args.verbose is False

    @pytest.mark.parametrize("scale", ["-1", "two", "10001"])
    def test_bad_scale_is_usage_error(self, scale: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--scale", scale, "1"])
        assert exc_info.value.code == 2

    def test_expression_required(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2


class TestMain:
    def test_prints_results(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["2 + 3 * (4 - 2)", "10 / 4"]) == 0
        assert capsys.readouterr().out.splitlines() == ["8", "2.5"]

    def test_scale_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--scale", "2", "10 / 3"]) == 0
        assert capsys.readouterr().out.strip() == "3.33"

    def test_failure_exit_status(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["10 / 0", "1 + 1"]) == 1
        captured = capsys.readouterr()
        assert captured.out.strip() == "2"
        assert "error[division_by_zero]: Division by zero" in captured.err

    def test_simple_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--format", "simple", ""]) == 1
        assert "empty_expression: Expression cannot be empty." in capsys.readouterr().err

    def test_json_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-f", "json", "2 & 3"]) == 1
        err_lines = capsys.readouterr().err.splitlines()
        line = next(text for text in err_lines if text.startswith("{"))
        data = json.loads(line)
        assert data["code"] == "invalid_characters"
        assert data["position"] == 2

    @needs_babel
    def test_locale(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--locale", "de_DE", "1234.5 * 2", "1 / 4"]) == 0
        assert capsys.readouterr().out.splitlines() == ["2.469", "0,25"]

    @needs_babel
    def test_unknown_locale(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--locale", "xx_XX", "1"]) == 2
        assert "unknown_locale" in capsys.readouterr().err

    @pytest.mark.skipif(is_babel_available(), reason="Babel installed")
    def test_locale_without_babel(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--locale", "de_DE", "1"]) == 2
        assert "pip install exprengine[babel]" in capsys.readouterr().err
