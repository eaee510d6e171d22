"""Shared constants for exprengine.

Centralized configuration constants used across the syntax and runtime
packages. Placing them here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Precision: default and maximum scale for decimal arithmetic
- Input alphabet: characters accepted by the validator
- Evaluation limits: bounds that keep every evaluation finite

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Precision
    "DEFAULT_SCALE",
    "MAX_SCALE",
    # Input alphabet
    "OPERATOR_SYMBOLS",
    "PARENTHESES",
    "NUMBER_CHARACTERS",
    "ALLOWED_CHARACTERS",
    # Evaluation limits
    "MAX_EXPONENT",
    "MAX_POWER_BITS",
]

# ============================================================================
# PRECISION
# ============================================================================

# Fractional digits retained by every arithmetic operation when a parser
# is constructed without an explicit scale.
DEFAULT_SCALE: int = 4

# Largest accepted scale. Each operation builds 10 ** scale and a result of
# that many digits, so cost grows quadratically with the scale.
MAX_SCALE: int = 10_000

# ============================================================================
# INPUT ALPHABET
# ============================================================================

OPERATOR_SYMBOLS: frozenset[str] = frozenset("+-*/^")

PARENTHESES: frozenset[str] = frozenset("()")

NUMBER_CHARACTERS: frozenset[str] = frozenset("0123456789.")

# Whitespace is accepted separately (str.isspace), so it is not listed here.
ALLOWED_CHARACTERS: frozenset[str] = OPERATOR_SYMBOLS | PARENTHESES | NUMBER_CHARACTERS

# ============================================================================
# EVALUATION LIMITS
# ============================================================================

# Largest absolute exponent accepted by "^". Integer powers are computed
# exactly, so an unbounded exponent ("9^9^9") would never finish.
MAX_EXPONENT: int = 100_000

# Upper bound on the estimated bit size of an exact power (about 1.2 million
# decimal digits), so "(9 ^ 9999) ^ 9999" is rejected instead of computed.
MAX_POWER_BITS: int = 4_000_000
