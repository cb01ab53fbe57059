"""
Sink that forwards console output to the standard logging module.

Arguments are joined with single spaces; strings are used as-is and every
other value by its ``repr``. Lines inside open groups are indented two spaces
per level, and the current depth is attached as the ``group_depth`` field.
"""

import logging
from typing import Any, Optional

from causalog.sinks.base import LoggingSink

INDENT = "  "


def render_args(args: tuple) -> str:
    return " ".join(arg if isinstance(arg, str) else repr(arg) for arg in args)


class StdlibLoggingSink(LoggingSink):
    """Writes console lines to a ``logging.Logger``."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the sink.

        Args:
            logger: Target logger; defaults to the 'causalog.console' logger
        """
        self.logger = logger or logging.getLogger("causalog.console")
        self.depth = 0

    def _emit(self, level: int, args: tuple) -> None:
        self.logger.log(
            level,
            "%s%s",
            INDENT * self.depth,
            render_args(args),
            extra={"group_depth": self.depth},
        )

    def debug(self, *args: Any) -> None:
        self._emit(logging.DEBUG, args)

    def log(self, *args: Any) -> None:
        self._emit(logging.INFO, args)

    def warn(self, *args: Any) -> None:
        self._emit(logging.WARNING, args)

    def error(self, *args: Any) -> None:
        self._emit(logging.ERROR, args)

    def group(self, label: str) -> None:
        self._emit(logging.INFO, (label,))
        self.depth += 1

    def group_end(self) -> None:
        if self.depth > 0:
            self.depth -= 1
