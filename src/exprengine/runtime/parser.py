"""ExpressionParser - Main API for expression evaluation.

Python 3.13+. Zero external dependencies.
"""

import logging
import threading

from exprengine.constants import DEFAULT_SCALE, MAX_SCALE
from exprengine.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ExpressionError,
    InvalidScaleError,
)
from exprengine.syntax import to_postfix, tokenize, validate_expression

from .evaluator import evaluate_postfix
from .formatting import format_result
from .sinks import ErrorSink, RaisingErrorSink

__all__ = ["ExpressionParser"]

logger = logging.getLogger(__name__)

# Expressions are echoed in warnings; keep log lines bounded.
_LOG_TRUNCATE_WARNING: int = 100


def _is_valid_scale(scale: object) -> bool:
    # bool is an int subclass but never a meaningful scale
    return isinstance(scale, int) and not isinstance(scale, bool) and 0 <= scale <= MAX_SCALE


class ExpressionParser:
    """Infix arithmetic evaluator with fixed-scale decimal precision.

    Each evaluate() call runs validate -> tokenize -> Shunting-Yard ->
    RPN evaluation -> formatting. Failures go to the configured error
    sink; with the default RaisingErrorSink they raise ExpressionError
    subclasses, with ReturningErrorSink the Diagnostic is returned.

    Thread Safety:
        By default, parsers are NOT thread-safe: scale and last error are
        plain instance state. Use one parser per thread, or pass
        thread_safe=True to serialize set_scale() and evaluate() via an
        internal RLock.

    Examples:
        >>> parser = ExpressionParser()
        >>> parser.evaluate("2 + 3 * (4 - 2)")
        8
        >>> parser.evaluate("10 / 3")
        '3.3333'
        >>> parser.set_scale(2)
        True
        >>> parser.evaluate("10 / 3")
        '3.33'
        >>>
        >>> # Errors as values instead of exceptions
        >>> quiet = ExpressionParser(sink=ReturningErrorSink())
        >>> quiet.evaluate("10 / 0").code
        <ErrorCode.DIVISION_BY_ZERO: 'division_by_zero'>
    """

    __slots__ = ("_last_error", "_lock", "_scale", "_sink", "_thread_safe")

    def __init__(
        self,
        scale: int = DEFAULT_SCALE,
        *,
        sink: ErrorSink | None = None,
        thread_safe: bool = False,
    ) -> None:
        """Initialize parser.

        Args:
            scale: Fractional digits kept by every operation (default: 4)
            sink: Error sink receiving every failure (default: RaisingErrorSink)
            thread_safe: Guard scale and last-error state with an RLock
                (default: False)

        Raises:
            InvalidScaleError: If scale is negative, above MAX_SCALE or not an
                integer, whatever the sink
        """
        if not _is_valid_scale(scale):
            raise InvalidScaleError(ErrorTemplate.invalid_scale(scale))

        self._scale: int = scale
        self._sink: ErrorSink = sink if sink is not None else RaisingErrorSink()
        self._last_error: Diagnostic | None = None
        self._thread_safe = thread_safe
        self._lock: threading.RLock | None = threading.RLock() if thread_safe else None

        logger.info(
            "ExpressionParser initialized (scale=%d, sink=%r, thread_safe=%s)",
            scale,
            self._sink,
            thread_safe,
        )

    @property
    def scale(self) -> int:
        """Fractional digits kept by every operation (read-only)."""
        return self._scale

    @property
    def last_error(self) -> Diagnostic | None:
        """Most recent failure, or None if no call has failed (read-only)."""
        return self.get_last_error()

    @property
    def sink(self) -> ErrorSink:
        """Error sink receiving failures (read-only)."""
        return self._sink

    @property
    def thread_safe(self) -> bool:
        """Whether state access is serialized by an internal lock."""
        return self._thread_safe

    def get_scale(self) -> int:
        """Return the current scale."""
        return self._scale

    def get_last_error(self) -> Diagnostic | None:
        """Return the most recent failure, if any.

        A side channel for callers that want details after the fact; it is
        overwritten by every failing call and never cleared by a success.
        """
        if self._lock is not None:
            with self._lock:
                return self._last_error
        return self._last_error

    def set_scale(self, scale: int) -> object:
        """Set the number of fractional digits for later evaluations.

        Args:
            scale: Integer from 0 to MAX_SCALE

        Returns:
            True on success, otherwise whatever the error sink returns
            for an INVALID_SCALE diagnostic. The scale is unchanged on failure.

        Raises:
            InvalidScaleError: With the default RaisingErrorSink, if scale is
                negative, above MAX_SCALE or not an integer
        """
        if self._lock is not None:
            with self._lock:
                return self._set_scale_impl(scale)
        return self._set_scale_impl(scale)

    def _set_scale_impl(self, scale: int) -> object:
        """Internal implementation of set_scale (no locking)."""
        if not _is_valid_scale(scale):
            return self._report(ErrorTemplate.invalid_scale(scale))
        self._scale = scale
        logger.info("Scale set to %d", scale)
        return True

    def evaluate(self, expression: str) -> object:
        """Evaluate an infix arithmetic expression.

        Args:
            expression: Expression using numbers, + - * / ^ and parentheses

        Returns:
            ``int`` for integral results, otherwise a decimal string with
            trailing zeros stripped. On failure, whatever the error sink
            returns.

        Raises:
            ExpressionError: With the default RaisingErrorSink, the subclass
                matching the failure (ExpressionSyntaxError or
                ExpressionEvaluationError)
            TypeError: If expression is not a string
        """
        if not isinstance(expression, str):
            msg = f"expression must be str, got {type(expression).__name__}"
            raise TypeError(msg)

        if self._lock is not None:
            with self._lock:
                return self._evaluate_impl(expression)
        return self._evaluate_impl(expression)

    def _evaluate_impl(self, expression: str) -> object:
        """Internal implementation of evaluate (no locking)."""
        try:
            validate_expression(expression)
            postfix = to_postfix(tokenize(expression))
            result = format_result(evaluate_postfix(postfix, self._scale))
        except ExpressionError as e:
            diagnostic = e.diagnostic
        except (ArithmeticError, ValueError) as e:
            # Anything the pipeline did not classify itself
            diagnostic = ErrorTemplate.evaluation_failed(str(e) or type(e).__name__)
        else:
            logger.debug("Evaluated %r -> %r", expression[:_LOG_TRUNCATE_WARNING], result)
            return result

        logger.warning(
            "Evaluation of %r failed: [%s] %s",
            expression[:_LOG_TRUNCATE_WARNING],
            diagnostic.code,
            diagnostic.message,
        )
        return self._report(diagnostic)

    def _report(self, diagnostic: Diagnostic) -> object:
        """Record *diagnostic* as the last error and hand it to the sink."""
        self._last_error = diagnostic
        return self._sink.report(diagnostic)

    def __repr__(self) -> str:
        return f"ExpressionParser(scale={self._scale}, sink={self._sink!r})"
