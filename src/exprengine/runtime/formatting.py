"""Result formatting.

format_result() produces the value handed back by ExpressionParser.evaluate:
trailing fractional zeros are stripped and integral results become ``int``.

localize_result() renders such a result for display with CLDR number
symbols. It needs the optional Babel dependency.

Python 3.13+.
"""

from decimal import Decimal

from exprengine.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
)
from exprengine.diagnostics import Diagnostic
from exprengine.diagnostics.templates import ErrorTemplate

__all__ = ["format_result", "localize_result"]


def format_result(value: Decimal) -> str | int:
    """Strip trailing fractional zeros; return ``int`` when nothing remains.

    Args:
        value: Evaluation result

    Returns:
        ``int`` for integral values, otherwise the plain decimal string

    Example:
        >>> format_result(Decimal("4.0000"))
        4
        >>> format_result(Decimal("3.3330"))
        '3.333'
    """
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if "." not in text:
        # int(Decimal) avoids the interpreter's int-from-str digit limit
        return int(value)
    return text


def localize_result(
    result: str | int | Decimal,
    locale_code: str,
) -> tuple[str | None, tuple[Diagnostic, ...]]:
    """Render a result with locale-specific decimal and grouping symbols.

    Every fractional digit is kept; nothing is rounded for display.

    Args:
        result: Value returned by ``ExpressionParser.evaluate``
        locale_code: Locale identifier ("de_DE", "en-US", ...)

    Returns:
        Tuple of (text, errors):
        - text: Localized string, or None if the locale is unknown
        - errors: Tuple of Diagnostic (empty tuple on success)

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> localize_result("1234.5", "de_DE")
        ('1.234,5', ())
    """
    numbers = get_babel_numbers()
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()

    try:
        locale = locale_class.parse(locale_code.replace("-", "_"))
    except (unknown_locale_error, ValueError, TypeError):
        return (None, (ErrorTemplate.unknown_locale(locale_code),))

    value = result if isinstance(result, Decimal) else Decimal(result)
    text = numbers.format_decimal(value, locale=locale, decimal_quantization=False)
    return (text, ())
