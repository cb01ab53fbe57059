"""
Causal assertion and error-reporting engine.

Assertion failures carry only a redacted message; the full template, and the
chain of errors it refers to, is rendered by a LoggingConsole only when the
error is actually logged.
"""

from causalog.models import ConsoleConfig, Details, ErrorRecord, Note, ValueKind
from causalog.services import (
    AssertionEngine,
    CausalityTracker,
    LoggingConsole,
    Session,
    assert_,
    compose,
    details,
    quote,
    to_diagnostic,
    to_redacted,
)
from causalog.sinks import LoggingSink, RecordingSink, StdlibLoggingSink
from causalog.utils.logging import configure_from_settings
from causalog.utils.serialization import serialize

__version__ = "0.1.0"

__all__ = [
    "AssertionEngine",
    "CausalityTracker",
    "ConsoleConfig",
    "Details",
    "ErrorRecord",
    "LoggingConsole",
    "LoggingSink",
    "Note",
    "RecordingSink",
    "Session",
    "StdlibLoggingSink",
    "ValueKind",
    "assert_",
    "compose",
    "configure_from_settings",
    "details",
    "quote",
    "serialize",
    "to_diagnostic",
    "to_redacted",
]
