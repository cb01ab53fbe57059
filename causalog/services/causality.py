"""
Causal notes between errors.

Each exception that takes part in causal logging owns an ``ErrorRecord``,
stored on the exception itself. Notes are appended to that record, so the
note table never outlives the error it annotates and no registry holds errors
alive.
"""

from typing import Any, List, Optional

from causalog.models.details import Details
from causalog.models.error import ErrorRecord, Note
from causalog.services.templates import to_redacted
from causalog.utils.logging import get_logger

logger = get_logger(__name__)

RECORD_ATTRIBUTE = "__causalog_record__"


class CausalityTracker:
    """Reads and writes the diagnostic records attached to exceptions."""

    def record_of(self, error: BaseException, create: bool = False) -> Optional[ErrorRecord]:
        """
        Get the record attached to an error.

        Args:
            error: Exception instance
            create: Attach an empty record when there is none yet

        Returns:
            The record, or None when absent and ``create`` is False
        """
        record = error.__dict__.get(RECORD_ATTRIBUTE)
        if record is None and create:
            record = ErrorRecord(error_type=type(error).__name__)
            setattr(error, RECORD_ATTRIBUTE, record)
        return record

    def attach(
        self,
        error: BaseException,
        details: Details,
        construction_frames: Optional[List[Any]] = None,
    ) -> ErrorRecord:
        """
        Attach a fresh record holding the details an error was built from.

        Any previous record, and the notes on it, is replaced.
        """
        record = ErrorRecord(
            error_type=type(error).__name__,
            message=to_redacted(details),
            details=details,
            construction_frames=list(construction_frames or ()),
        )
        setattr(error, RECORD_ATTRIBUTE, record)
        return record

    def annotate(self, error: BaseException, label: str, related: Any, derived: bool = False) -> Note:
        """
        Append a note to an error. Repeated calls append repeated notes.

        Args:
            error: The error being annotated
            label: Edge label, e.g. 'Caused by'
            related: Related error or value
            derived: True for notes inferred from a template substitution

        Returns:
            The appended note
        """
        if not isinstance(error, BaseException):
            raise TypeError(f"Only exceptions can be annotated, not {type(error).__name__}")
        note = Note(label=label, related=related, derived=derived)
        self.record_of(error, create=True).notes.append(note)
        logger.debug(
            "Annotated error",
            extra={"error_type": type(error).__name__, "label": label, "derived": derived},
        )
        return note

    def notes_of(self, error: BaseException) -> List[Note]:
        """Notes on an error in the order they were recorded."""
        record = self.record_of(error)
        if record is None:
            return []
        return list(record.notes)
