"""Error tracking data models."""

import weakref
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from causalog.models.details import Details


class Note(BaseModel):
    """A directed, labelled edge from an error to a related error or value."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    label: str
    related: Any
    derived: bool = False


class ErrorRecord(BaseModel):
    """
    Diagnostic record owned by one exception instance.

    The record hangs off the exception, so it lives exactly as long as the
    exception does. Per-session display state is kept here in weak tables keyed
    by the session, so neither the session nor the record keeps the other alive.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    error_type: str
    message: Optional[str] = None
    details: Optional[Details] = None
    notes: List[Note] = Field(default_factory=list)
    construction_frames: List[Any] = Field(default_factory=list)

    _identities: weakref.WeakKeyDictionary = PrivateAttr(default_factory=weakref.WeakKeyDictionary)
    _expanded_in: weakref.WeakSet = PrivateAttr(default_factory=weakref.WeakSet)

    def identity_in(self, session: Any) -> Optional[int]:
        """Display identity assigned by a session, if any."""
        return self._identities.get(session)

    def assign_identity(self, session: Any, identity: int) -> None:
        self._identities[session] = identity

    def is_expanded_in(self, session: Any) -> bool:
        return session in self._expanded_in

    def mark_expanded_in(self, session: Any) -> None:
        self._expanded_in.add(session)
