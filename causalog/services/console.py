"""
Logging console with lazy error identities and causal tree expansion.

The console wraps a LoggingSink. Errors passed to its logging methods get a
display identity the first time they are logged, never earlier. With causal
wrapping enabled, each logged error is replaced by its back-reference
``(TypeName#N)`` and, the first time only, expanded into a ``Nested error``
group showing its diagnostic message, its stack and every related error.

An error that is never logged produces no output at all, however many notes
it carries.
"""

import uuid
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Union

from causalog.models.console import ConsoleConfig
from causalog.models.error import ErrorRecord, Note
from causalog.models.kinds import describe
from causalog.services.causality import CausalityTracker
from causalog.services.stacks import stack_text
from causalog.services.templates import back_reference, to_diagnostic
from causalog.sinks.base import LoggingSink
from causalog.utils.logging import get_logger, log_render_fault
from causalog.utils.metrics import SessionMetrics, emit_metric
from causalog.utils.serialization import serialize

logger = get_logger(__name__)

NESTED_ERROR = "Nested error"
CAUSE_LABEL = "Caused by"


class Session:
    """
    Identity assignment and expansion tracking for one console.

    Per-error state is stored in each error's record, keyed weakly by the
    session, so the session never keeps an error alive.
    """

    def __init__(self, tracker: CausalityTracker):
        self.session_id = uuid.uuid4().hex[:12]
        self.tracker = tracker
        self.metrics = SessionMetrics(self.session_id)
        self._counter = 0

    def _record(self, error: BaseException) -> ErrorRecord:
        return self.tracker.record_of(error, create=True)

    def identity_of(self, error: BaseException) -> int:
        """Display identity of an error, assigning the next number on first use."""
        record = self._record(error)
        identity = record.identity_in(self)
        if identity is None:
            self._counter += 1
            identity = self._counter
            record.assign_identity(self, identity)
            self.metrics.record_identity()
        return identity

    def peek_identity(self, error: BaseException) -> Optional[int]:
        """Display identity if already assigned, without assigning one."""
        record = self.tracker.record_of(error)
        return record.identity_in(self) if record is not None else None

    def label(self, error: BaseException) -> str:
        return f"{type(error).__name__}#{self.identity_of(error)}"

    def is_expanded(self, error: BaseException) -> bool:
        record = self.tracker.record_of(error)
        return record is not None and record.is_expanded_in(self)

    def mark_expanded(self, error: BaseException) -> None:
        self._record(error).mark_expanded_in(self)
        self.metrics.record_expansion()


class LoggingConsole:
    """
    Console that renders errors and their causal trees to a sink.

    Usage:
        console = LoggingConsole(RecordingSink(), {"wrapWithCausal": True})
        try:
            assert_.fail(details("because {}", cause))
        except AssertionError as err:
            console.log("Caught", err)
    """

    def __init__(
        self,
        sink: LoggingSink,
        config: Union[ConsoleConfig, Mapping, None] = None,
        tracker: Optional[CausalityTracker] = None,
    ):
        """
        Initialize the console.

        Args:
            sink: Output target
            config: ConsoleConfig, or a mapping of its fields (snake_case or
                camelCase). Defaults come from the CAUSALOG_* settings.
            tracker: Causality tracker; a default one is created if omitted
        """
        if config is None:
            from causalog.config import settings
            config = settings.console_config()
        elif isinstance(config, Mapping):
            config = ConsoleConfig.model_validate(dict(config))

        self.sink = sink
        self.config = config
        self.tracker = tracker or CausalityTracker()
        self.session = Session(self.tracker)
        self.depth = 0
        self._logger = get_logger(__name__, session_id=self.session.session_id)

    # Sink surface

    def debug(self, *args: Any) -> None:
        self._dispatch("debug", args)

    def log(self, *args: Any) -> None:
        self._dispatch("log", args)

    def warn(self, *args: Any) -> None:
        self._dispatch("warn", args)

    def error(self, *args: Any) -> None:
        self._dispatch("error", args)

    def group(self, label: str) -> None:
        self._open(label)

    def group_end(self) -> None:
        if self.depth == 0:
            self._logger.warning("group_end called with no open group")
            return
        self._close()

    # Metrics

    def metrics_summary(self) -> Dict[str, Any]:
        summary = self.session.metrics.get_metrics_summary()
        summary["open_groups"] = self.depth
        return summary

    def report_metrics(self) -> None:
        """Emit the session counters as metrics on the package logger."""
        metrics = self.session.metrics
        for name in ("identities_assigned", "trees_expanded", "back_references", "render_faults"):
            emit_metric(f"console.{name}", getattr(metrics, name), session_id=self.session.session_id)

    # Internals

    def _call(self, method: str, *args: Any) -> None:
        self.session.metrics.record_sink_call(method)
        getattr(self.sink, method)(*args)

    def _open(self, label: str) -> None:
        self._call("group", label)
        self.depth += 1

    def _close(self) -> None:
        self.depth -= 1
        self._call("group_end")

    def _dispatch(self, method: str, args: tuple) -> None:
        errors: List[BaseException] = []
        for arg in args:
            if isinstance(arg, BaseException):
                self.session.identity_of(arg)
                if not any(arg is seen for seen in errors):
                    errors.append(arg)

        if not self.config.wrap_with_causal or not errors:
            self._call(method, *args)
            return

        self._call(method, *[self._reference(arg) if isinstance(arg, BaseException) else arg for arg in args])
        for error in errors:
            if not self.session.is_expanded(error):
                self._expand(NESTED_ERROR, error)

    def _reference(self, error: BaseException) -> str:
        self.session.metrics.record_back_reference()
        return back_reference(error, self.session.identity_of(error))

    def _display(self, value: Any) -> Any:
        if isinstance(value, BaseException):
            return self._reference(value)
        return serialize(value)

    def _expand(self, label: str, error: BaseException) -> None:
        """Render an error inside its own group. Faults are contained here."""
        self.session.mark_expanded(error)
        depth = self.depth
        try:
            self._open(label)
            self._render_error(error)
        except Exception as e:
            self._contain(error, "Failed to render error", e)
        finally:
            try:
                while self.depth > depth:
                    self._close()
            except Exception as e:
                self._contain(error, "Failed to close group", e)

    def _contain(self, error: BaseException, message: str, fault: Exception) -> None:
        self.session.metrics.record_render_fault(fault)
        fault_logger = self._logger.with_context(
            error_type=type(error).__name__,
            error_id=self.session.peek_identity(error),
        )
        log_render_fault(fault_logger, message, fault)

    def _render_error(self, error: BaseException) -> None:
        label = self.session.label(error)
        record = self.tracker.record_of(error)

        self._call("debug", f"{label}:", *self._message_parts(error, record))
        self._call("debug", "", self._stack(error, record))

        for note in self._notes(error):
            if not note.derived:
                self._call("debug", f"{label} {note.label}:", self._display(note.related))
            related = note.related
            if isinstance(related, BaseException) and not self.session.is_expanded(related):
                self._expand(f"{NESTED_ERROR} under {label}", related)

    def _message_parts(self, error: BaseException, record: Optional[ErrorRecord]) -> List[Any]:
        """Diagnostic message of an error, or its descriptor if it cannot be rendered."""
        try:
            if record is not None and record.details is not None:
                return to_diagnostic(record.details, self.session.identity_of)
            message = str(error)
        except Exception as e:
            self._contain(error, "Failed to render error message", e)
            return [describe(error)]
        return [message] if message else []

    def _notes(self, error: BaseException) -> List[Note]:
        notes = self.tracker.notes_of(error)
        cause = error.__cause__
        if cause is not None and not any(note.related is cause for note in notes):
            notes.append(Note(label=CAUSE_LABEL, related=cause))
        return notes

    def _stack(self, error: BaseException, record: Optional[ErrorRecord]) -> str:
        if self.config.error_taming == "safe":
            return ""
        return stack_text(error, record, concise=self.config.stack_filtering == "concise")
