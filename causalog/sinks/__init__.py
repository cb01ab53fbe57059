"""Output sinks for the logging console."""

from causalog.sinks.base import LoggingSink
from causalog.sinks.recording import RecordingSink
from causalog.sinks.stdlib import StdlibLoggingSink

__all__ = [
    "LoggingSink",
    "RecordingSink",
    "StdlibLoggingSink",
]
