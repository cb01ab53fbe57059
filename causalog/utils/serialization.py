"""
Cycle-safe serialization of arbitrary values into display text.

Every container reference is remembered for the duration of one top-level
``serialize`` call. A reference met a second time is replaced by the sentinel
``"<**seen**>"``, whether it closes a real cycle or is just shared between two
branches. Output is compact JSON-like text.

Identity is the interpreter's. Objects the interpreter shares, such as the
empty tuple, are one reference wherever they appear, so a second occurrence
renders as the sentinel. Set members are emitted sorted by their rendered
text.
"""

import inspect
import json
import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Set, Tuple

from causalog.models.kinds import ValueKind, describe
from causalog.utils.logging import get_logger

logger = get_logger(__name__)

SEEN_SENTINEL = "<**seen**>"


class SerializationFault(Exception):
    """Raised internally when a value cannot be walked. Never escapes serialize()."""
    pass


def format_number(value: Any) -> str:
    """Render a number, keeping the sign of zero and naming NaN and infinities."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "-0" if math.copysign(1.0, value) < 0 else "0"
        return repr(value)
    return str(value)


def _string(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


class SerializationPass:
    """
    State of one top-level serialization.

    The seen set is keyed by ``id()``; every id in it belongs to an object
    reachable from the root, which stays alive for the whole pass.
    """

    def __init__(self):
        self.seen: Set[int] = set()

    def render(self, value: Any) -> str:
        kind = ValueKind.of(value)
        if kind is ValueKind.NULL:
            return "null"
        if kind is ValueKind.BOOLEAN:
            return "true" if value else "false"
        if kind is ValueKind.NUMBER:
            return format_number(value)
        if kind is ValueKind.STRING:
            return _string(value)
        if kind is ValueKind.SYMBOL:
            return _string(str(value))
        if kind is ValueKind.FUNCTION:
            name = getattr(value, "__qualname__", None) or getattr(value, "__name__", "anonymous")
            return _string(f"[Function {name}]")
        return self._render_reference(value)

    def _render_reference(self, value: Any) -> str:
        if id(value) in self.seen:
            return _string(SEEN_SENTINEL)
        self.seen.add(id(value))

        try:
            if isinstance(value, BaseException):
                return _string(f"[{type(value).__name__}: {value}]")
            if isinstance(value, Mapping):
                return self._render_mapping(value.items())
            if isinstance(value, (list, tuple)):
                items: List[str] = [self.render(item) for item in value]
                return "[" + ",".join(items) + "]"
            if isinstance(value, (set, frozenset)):
                return "[" + ",".join(sorted(self.render(item) for item in value)) + "]"
            if hasattr(value, "__dict__") and not inspect.ismodule(value):
                return self._render_mapping(vars(value).items())
        except SerializationFault:
            raise
        except Exception as e:
            raise SerializationFault(f"cannot walk {describe(value)}") from e
        return _string(describe(value))

    def _render_mapping(self, items: Iterable[Tuple[Any, Any]]) -> str:
        parts = []
        for key, item in items:
            label = key if isinstance(key, str) else str(key)
            parts.append(f"{_string(label)}:{self.render(item)}")
        return "{" + ",".join(parts) + "}"


def serialize(value: Any) -> str:
    """
    Serialize a value with a fresh seen set.

    Walking failures (a raising property, nesting deeper than the interpreter
    allows) are contained; the result then falls back to the value's generic
    descriptor.
    """
    try:
        return SerializationPass().render(value)
    except (RecursionError, SerializationFault) as e:
        logger.debug("Serialization fell back to descriptor", extra={"reason": type(e).__name__})
        return describe(value)
