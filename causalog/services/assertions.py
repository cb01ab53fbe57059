"""
Assertion engine.

Builds errors from conditions and templates. The raised error's message is
always the redacted rendering of its template; the template itself is kept in
the error's diagnostic record so a LoggingConsole can show the full detail
later, if and when the error is logged.

Usage:
    from causalog import assert_, details, quote

    assert_(index < len(items), details("index {} out of range", index))
    assert_.equal(actual, expected)
    assert_.typeof(name, "string")
    err = assert_.error(details("while loading {}", quote(path)))
"""

import math
from typing import Any, NoReturn, Optional, Type

from causalog.models.kinds import ValueKind, article
from causalog.services.causality import CausalityTracker
from causalog.services.stacks import capture_construction_stack
from causalog.services.templates import (
    DetailsLike,
    as_details,
    details,
    quote,
    references,
    to_redacted,
)
from causalog.utils.logging import get_logger

logger = get_logger(__name__)

CHECK_FAILED = "Check failed"
ASSERT_FAILED = "Assert failed"

VALUE_CATEGORIES = frozenset(kind.value for kind in ValueKind)


def same_value(actual: Any, expected: Any) -> bool:
    """
    Same-value comparison.

    Values of different categories are never the same. Numbers compare by
    value, with NaN equal to NaN and 0.0 distinct from -0.0. Strings,
    booleans and None compare by value; everything else by identity.
    """
    kind = ValueKind.of(actual)
    if kind is not ValueKind.of(expected):
        return False
    if kind is ValueKind.NUMBER:
        actual_nan = _is_nan(actual)
        if actual_nan or _is_nan(expected):
            return actual_nan and _is_nan(expected)
        if actual == 0 and expected == 0:
            return _sign(actual) == _sign(expected)
        return actual == expected
    if kind in (ValueKind.STRING, ValueKind.BOOLEAN, ValueKind.NULL):
        return actual == expected
    return actual is expected


def _is_nan(number: Any) -> bool:
    try:
        return math.isnan(number)
    except (TypeError, ValueError):
        return False


def _sign(number: Any) -> float:
    try:
        return math.copysign(1.0, number)
    except TypeError:
        return 1.0


class AssertionEngine:
    """
    Callable assertion helper.

    Calling the engine checks a condition; its methods fail unconditionally,
    compare values, check value categories or build errors without raising.
    """

    def __init__(self, tracker: Optional[CausalityTracker] = None):
        """
        Initialize the engine.

        Args:
            tracker: Causality tracker used to record notes on built errors
        """
        self.tracker = tracker or CausalityTracker()
        self.details = details
        self.quote = quote

    def __call__(
        self,
        condition: Any,
        details: DetailsLike = None,
        error_class: Type[BaseException] = AssertionError,
    ) -> None:
        """Raise unless ``condition`` is truthy."""
        if not condition:
            raise self._build(details, error_class, CHECK_FAILED)

    def fail(
        self,
        details: DetailsLike = None,
        error_class: Type[BaseException] = AssertionError,
    ) -> NoReturn:
        """Always raise."""
        raise self._build(details, error_class, ASSERT_FAILED)

    def error(
        self,
        details: DetailsLike = None,
        error_class: Type[BaseException] = AssertionError,
    ) -> BaseException:
        """Build an error the way ``fail`` does, but return it instead of raising."""
        return self._build(details, error_class, ASSERT_FAILED)

    def equal(
        self,
        actual: Any,
        expected: Any,
        details: DetailsLike = None,
        error_class: Type[BaseException] = ValueError,
    ) -> None:
        """
        Raise unless ``actual`` and ``expected`` are the same value.

        The default message names both values only by category; the values
        themselves are kept for diagnostic logging.
        """
        if same_value(actual, expected):
            return
        if details is None:
            details = self.details("Expected {} is same as {}", actual, expected)
        raise self._build(details, error_class, ASSERT_FAILED)

    def typeof(self, value: Any, type_name: str, details: DetailsLike = None) -> None:
        """
        Raise TypeError unless ``value`` belongs to the named category.

        Args:
            value: Value to check
            type_name: One of the ValueKind names ('number', 'string', ...)
            details: Optional message template
        """
        if type_name not in VALUE_CATEGORIES:
            self.fail(self.details("{} is not a value category", self.quote(type_name)), TypeError)
        expected = ValueKind(type_name)
        if ValueKind.of(value) is expected:
            return
        if details is None:
            details = self.details(
                "{} must be " + f"{article(expected.value)} {expected.value}", value
            )
        raise self._build(details, TypeError, ASSERT_FAILED)

    def note(self, error: BaseException, label: str, related: Any) -> None:
        """Record an explicit causal note on an error, e.g. 'Caused by'."""
        self.tracker.annotate(error, label, related)

    def _build(
        self,
        details: DetailsLike,
        error_class: Type[BaseException],
        default_message: str,
    ) -> BaseException:
        """Construct the error, attach its record and derived notes."""
        template = as_details(details, default_message)
        message = to_redacted(template)
        error = error_class(message)
        self.tracker.attach(error, template, capture_construction_stack(skip=1))
        for label, related in references(template):
            self.tracker.annotate(error, label, related, derived=True)
        logger.debug(
            "Built assertion error",
            extra={"error_type": error_class.__name__, "redacted_message": message},
        )
        return error


# Default engine used by the package-level helpers
assert_ = AssertionEngine()
