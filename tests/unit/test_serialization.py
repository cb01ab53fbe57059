"""
Unit tests for cycle-safe serialization.
"""

from collections.abc import Mapping
from decimal import Decimal
from enum import Enum

import pytest

from causalog.utils.serialization import SEEN_SENTINEL, SerializationPass, serialize


class Color(Enum):
    RED = "red"


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class BrokenMapping(Mapping):
    """Mapping whose values cannot be read."""

    def __getitem__(self, key):
        raise RuntimeError("unreadable")

    def __iter__(self):
        return iter(["key"])

    def __len__(self):
        return 1


def sample_function():
    pass


def test_serialize_list():
    """Test a flat list renders as compact JSON."""
    assert serialize(["a", "b", "c"]) == '["a","b","c"]'


def test_serialize_shared_reference_is_flagged():
    """Test a reference reached twice without a cycle is still flagged."""
    items = ["a", "b", "c"]
    repeat = {"x": items, "y": items}

    assert serialize(repeat) == '{"x":["a","b","c"],"y":"<**seen**>"}'


def test_serialize_self_referential_list():
    """Test a cycle terminates with the sentinel."""
    items = ["a", "b", "c"]
    items[1] = items

    assert serialize(items) == '["a","<**seen**>","c"]'


def test_serialize_cycle_inside_shared_reference():
    """Test nested cycle and shared reference in the same pass."""
    items = ["a", "b", "c"]
    repeat = {"x": items, "y": items}
    items[1] = items

    assert serialize(repeat) == '{"x":["a","<**seen**>","c"],"y":"<**seen**>"}'


def test_serialize_calls_do_not_share_seen_set():
    """Test each top-level call starts with an empty seen set."""
    shared = [1, 2]

    assert serialize(shared) == "[1,2]"
    assert serialize(shared) == "[1,2]"
    assert serialize({"a": shared}) == '{"a":[1,2]}'


def test_serialization_pass_tracks_seen_ids():
    """Test the pass records references it has walked."""
    items = [1]
    serialization = SerializationPass()

    serialization.render(items)

    assert id(items) in serialization.seen
    assert serialization.render(items) == f'"{SEEN_SENTINEL}"'


@pytest.mark.parametrize("value,expected", [
    (5, "5"),
    (1.5, "1.5"),
    (-0.0, "-0"),
    (0.0, "0"),
    (float("nan"), "NaN"),
    (float("inf"), "Infinity"),
    (float("-inf"), "-Infinity"),
    (Decimal("2.50"), "2.50"),
    (True, "true"),
    (False, "false"),
    (None, "null"),
])
def test_serialize_primitives(value, expected):
    """Test primitive leaves, including signed zero and NaN."""
    assert serialize(value) == expected


def test_serialize_strings_are_quoted_and_escaped():
    """Test strings use JSON quoting without ASCII escaping."""
    assert serialize('say "hi"') == '"say \\"hi\\""'
    assert serialize("café") == '"café"'


def test_serialize_object_as_property_map():
    """Test objects with attributes render as maps."""
    assert serialize(Point(1, 2)) == '{"x":1,"y":2}'


def test_serialize_non_string_keys():
    """Test mapping keys are stringified."""
    assert serialize({1: "one", None: "none"}) == '{"1":"one","None":"none"}'


def test_serialize_tuple_and_nested_containers():
    """Test tuples render as arrays and nesting is preserved."""
    assert serialize(("a", [1, {"k": False}])) == '["a",[1,{"k":false}]]'


def test_serialize_set_is_sorted():
    """Test set members render in a stable order."""
    assert serialize({"b", "c", "a"}) == '["a","b","c"]'
    assert serialize(frozenset([3, 1, 2])) == "[1,2,3]"


def test_serialize_interpreter_shared_object_is_flagged():
    """Test the shared empty tuple is one reference for the seen check."""
    assert serialize({"a": (), "b": ()}) == '{"a":[],"b":"<**seen**>"}'


def test_serialize_exception():
    """Test exceptions render as a bracketed type and message."""
    assert serialize(ValueError("bad")) == '"[ValueError: bad]"'


def test_serialize_function_and_symbol():
    """Test functions and enum members render as strings."""
    assert serialize(sample_function) == '"[Function sample_function]"'
    assert serialize(Color.RED) == '"Color.RED"'


def test_serialize_unsupported_leaf_uses_descriptor():
    """Test values with no structure fall back to their descriptor."""
    assert serialize(object()) == '"(an object)"'


def test_serialize_contains_walk_failures():
    """Test a value that raises while walked falls back to its descriptor."""
    assert serialize(BrokenMapping()) == "(an object)"
    assert serialize([1, BrokenMapping()]) == "(an object)"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
