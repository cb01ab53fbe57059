"""Assertion, causality and console services."""

from causalog.services.assertions import (
    AssertionEngine,
    assert_,
    same_value,
)
from causalog.services.causality import (
    CausalityTracker,
)
from causalog.services.console import (
    LoggingConsole,
    Session,
)
from causalog.services.templates import (
    compose,
    details,
    quote,
    references,
    to_diagnostic,
    to_redacted,
)

__all__ = [
    'AssertionEngine',
    'assert_',
    'same_value',
    'CausalityTracker',
    'LoggingConsole',
    'Session',
    'compose',
    'details',
    'quote',
    'references',
    'to_diagnostic',
    'to_redacted',
]
