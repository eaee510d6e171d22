"""Command-line evaluator.

Usage:
    exprengine "2 + 3 * (4 - 2)"
    exprengine --scale 2 "10 / 3" "2 ^ 10"
    exprengine --locale de_DE "1234.5 * 2"
    exprengine --format json "10 / 0"

Exit Codes:
    0   Every expression evaluated
    1   At least one expression failed
    2   Usage error (bad arguments, unknown locale, Babel missing)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys

from exprengine.constants import DEFAULT_SCALE, MAX_SCALE
from exprengine.core.babel_compat import BabelImportError
from exprengine.diagnostics import Diagnostic, DiagnosticFormatter, OutputFormat
from exprengine.runtime import ExpressionParser, ReturningErrorSink, localize_result


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        msg = f"invalid scale: {text!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if not 0 <= value <= MAX_SCALE:
        msg = f"scale must be between 0 and {MAX_SCALE}, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate for testing)."""
    parser = argparse.ArgumentParser(
        prog="exprengine",
        description="Evaluate arithmetic expressions with fixed-scale decimal precision.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  exprengine "2 + 3 * (4 - 2)"
  exprengine --scale 2 "10 / 3"
  exprengine --locale de_DE "1234.5 * 2"
""",
    )
    parser.add_argument(
        "expressions",
        nargs="+",
        metavar="EXPR",
        help="Expression to evaluate (quote it for the shell)",
    )
    parser.add_argument(
        "--scale",
        "-s",
        type=_non_negative_int,
        default=DEFAULT_SCALE,
        help=f"Fractional digits kept by every operation (default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--locale",
        "-l",
        default=None,
        help="Display results with this locale's number symbols (requires Babel)",
    )
    parser.add_argument(
        "--format",
        "-f",
        choices=[str(f) for f in OutputFormat],
        default=str(OutputFormat.RUST),
        help="Error output style (default: rust)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every evaluation step",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    formatter = DiagnosticFormatter(
        output_format=OutputFormat(args.format),
        color=sys.stderr.isatty(),
    )
    parser = ExpressionParser(args.scale, sink=ReturningErrorSink())

    status = 0
    for expression in args.expressions:
        result = parser.evaluate(expression)
        if isinstance(result, Diagnostic):
            print(formatter.format(result), file=sys.stderr)
            status = 1
            continue

        if args.locale is None:
            print(result)
            continue

        try:
            text, errors = localize_result(result, args.locale)
        except BabelImportError as e:
            print(f"[ERROR] {e}", file=sys.stderr)
            return 2
        if errors:
            print(formatter.format_all(errors), file=sys.stderr)
            return 2
        print(text)

    return status


if __name__ == "__main__":
    sys.exit(main())
