"""
Base interface for logging sinks.

A sink is the host-side output surface a LoggingConsole writes to. The console
decides what to write; the sink decides how it is displayed.
"""

from abc import ABC, abstractmethod
from typing import Any


class LoggingSink(ABC):
    """Base interface for console output targets."""

    @abstractmethod
    def debug(self, *args: Any) -> None:
        """Emit a debug-level line made of ``args``."""
        pass

    @abstractmethod
    def log(self, *args: Any) -> None:
        """Emit an ordinary line made of ``args``."""
        pass

    @abstractmethod
    def warn(self, *args: Any) -> None:
        """Emit a warning line made of ``args``."""
        pass

    @abstractmethod
    def error(self, *args: Any) -> None:
        """Emit an error line made of ``args``."""
        pass

    @abstractmethod
    def group(self, label: str) -> None:
        """
        Open a nested group.

        Every ``group`` call is matched by exactly one later ``group_end``.

        Args:
            label: Heading shown for the group
        """
        pass

    @abstractmethod
    def group_end(self) -> None:
        """Close the innermost open group."""
        pass
