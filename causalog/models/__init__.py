"""Data models for the causal assertion and logging engine."""

from .console import ConsoleConfig
from .details import Details, Quoted, Substitution
from .error import ErrorRecord, Note
from .kinds import ValueKind, describe

__all__ = [
    # Value categories
    "ValueKind",
    "describe",
    # Template models
    "Details",
    "Quoted",
    "Substitution",
    # Error models
    "ErrorRecord",
    "Note",
    # Console models
    "ConsoleConfig",
]
