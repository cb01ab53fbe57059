"""In-memory sink that records every call."""

from typing import Any, List, Tuple

from causalog.sinks.base import LoggingSink


class RecordingSink(LoggingSink):
    """
    Records calls as tuples such as ``("log", "Caught", "(AssertionError#1)")``.

    Useful in tests and for embedders that post-process console output.
    """

    def __init__(self):
        self.calls: List[Tuple[Any, ...]] = []

    def debug(self, *args: Any) -> None:
        self.calls.append(("debug", *args))

    def log(self, *args: Any) -> None:
        self.calls.append(("log", *args))

    def warn(self, *args: Any) -> None:
        self.calls.append(("warn", *args))

    def error(self, *args: Any) -> None:
        self.calls.append(("error", *args))

    def group(self, label: str) -> None:
        self.calls.append(("group", label))

    def group_end(self) -> None:
        self.calls.append(("group_end",))

    def clear(self) -> None:
        self.calls.clear()
