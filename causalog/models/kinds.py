"""Closed enumeration of value categories."""

import inspect
import numbers
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Category of a value, used for redacted descriptors and type checks."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    NULL = "null"
    FUNCTION = "function"
    SYMBOL = "symbol"
    OBJECT = "object"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """Classify a value. bool is checked before number."""
        if value is None:
            return cls.NULL
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, numbers.Number):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, Enum):
            return cls.SYMBOL
        if inspect.isroutine(value) or inspect.isclass(value):
            return cls.FUNCTION
        return cls.OBJECT

    @property
    def descriptor(self) -> str:
        """Generic text for this category, e.g. 'a number'."""
        if self is ValueKind.NULL:
            return self.value
        return f"{article(self.value)} {self.value}"


def article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def describe(value: Any) -> str:
    """Parenthesized descriptor of a value's category, e.g. '(a number)'."""
    return f"({ValueKind.of(value).descriptor})"
