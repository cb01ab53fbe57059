"""
Unit tests for message templates.
"""

from enum import Enum

import pytest
from pydantic import ValidationError

from causalog.models import Details, ValueKind, describe
from causalog.services.templates import (
    DEFAULT_NOTE_LABEL,
    as_details,
    compose,
    details,
    quote,
    references,
    to_diagnostic,
    to_redacted,
)


class Flavor(Enum):
    PLAIN = 1


def test_compose_builds_details():
    """Test compose pairs fragments with substitutions."""
    built = compose(["a ", " b"], [1])

    assert built.fragments == ("a ", " b")
    assert len(built.substitutions) == 1
    assert built.substitutions[0].value == 1
    assert built.substitutions[0].quoted is False


def test_compose_unwraps_quoted_values():
    """Test quote() marks a substitution as quoted."""
    built = compose(["", ""], [quote("x")])

    assert built.substitutions[0].value == "x"
    assert built.substitutions[0].quoted is True


def test_compose_explicit_flags():
    """Test explicit quoted flags override wrappers."""
    built = compose(["", " ", ""], [1, 2], quoted=[True, False])

    assert [s.quoted for s in built.substitutions] == [True, False]


def test_compose_rejects_mismatched_lengths():
    """Test fragments must outnumber values by one."""
    with pytest.raises(ValueError):
        compose(["only"], [1])
    with pytest.raises(ValueError):
        compose(["a", "b"], [1], quoted=[True, False])


def test_details_is_immutable():
    """Test Details cannot be modified once built."""
    built = details("x {}", 1)

    with pytest.raises(ValidationError):
        built.fragments = ("y",)


def test_details_keeps_value_identity():
    """Test substituted objects are held by reference."""
    payload = {"k": [1, 2]}

    built = details("value {}", payload)

    assert built.substitutions[0].value is payload


def test_details_parses_positional_and_escaped_fields():
    """Test positional fields and escaped braces."""
    built = details("{{literal}} {0} and {0}", 7)

    assert built.fragments == ("{literal} ", " and ", "")
    assert [s.value for s in built.substitutions] == [7, 7]


def test_details_rejects_named_fields():
    """Test named replacement fields are refused."""
    with pytest.raises(ValueError):
        details("hello {name}", "x")


def test_details_rejects_missing_values():
    """Test a field without a value is refused."""
    with pytest.raises(ValueError):
        details("{} and {}", 1)


def test_as_details_coercion():
    """Test None, strings and Details are all accepted."""
    assert as_details(None, "Check failed").fragments == ("Check failed",)
    assert as_details("foo", "Check failed").fragments == ("foo",)
    built = details("x")
    assert as_details(built, "unused") is built
    with pytest.raises(TypeError):
        as_details(42, "unused")


def test_to_redacted_hides_unquoted_values():
    """Test unquoted values appear only as descriptors."""
    built = details("<{},{}>", "bar", quote("baz"))

    assert to_redacted(built) == '<(a string),"baz">'


def test_to_redacted_never_leaks_secret():
    """Test an unquoted secret is absent from the redacted message."""
    secret = "hunter2"

    message = to_redacted(details("password {} rejected for {}", secret, 42))

    assert secret not in message
    assert message == "password (a string) rejected for (a number)"


def test_to_redacted_serializes_quoted_structures():
    """Test quoted containers are serialized in full."""
    assert to_redacted(details("{}", quote(["a", "b"]))) == '["a","b"]'


def test_to_diagnostic_trims_boundary_spaces():
    """Test boundary spaces and empty fragments are dropped."""
    assert to_diagnostic(details("Expected {} is same as {}", 5, 6)) == ["Expected", 5, "is same as", 6]
    assert to_diagnostic(details("<{},{}>", "bar", quote("baz"))) == ["<", "bar", ",", '"baz"', ">"]


def test_to_diagnostic_plain_message():
    """Test a template with no substitutions."""
    assert to_diagnostic(details("Check failed")) == ["Check failed"]
    assert to_diagnostic(details("")) == []


def test_to_diagnostic_passes_raw_values():
    """Test unquoted values are passed through untouched."""
    payload = object()

    parts = to_diagnostic(details("got {}", payload))

    assert parts[1] is payload


def test_to_diagnostic_renders_error_back_references():
    """Test unquoted errors render as back-references when identities resolve."""
    cause = SyntaxError("foo")

    parts = to_diagnostic(details("synful {}", cause), lambda error: 3)

    assert parts == ["synful", "(SyntaxError#3)"]


def test_to_diagnostic_without_resolver_keeps_error():
    """Test errors pass through raw when no resolver is given."""
    cause = KeyError("k")

    assert to_diagnostic(details("{}", cause)) == [cause]


def test_references_labels():
    """Test references yield preceding text as the label."""
    first = ValueError("a")
    second = ValueError("b")

    found = list(references(details("because {} then{}{}", first, quote(second), second)))

    assert found == [("because", first), (DEFAULT_NOTE_LABEL, second)]


@pytest.mark.parametrize("value,kind,text", [
    (1, ValueKind.NUMBER, "(a number)"),
    (1.5, ValueKind.NUMBER, "(a number)"),
    ("s", ValueKind.STRING, "(a string)"),
    (True, ValueKind.BOOLEAN, "(a boolean)"),
    (None, ValueKind.NULL, "(null)"),
    (len, ValueKind.FUNCTION, "(a function)"),
    (int, ValueKind.FUNCTION, "(a function)"),
    (Flavor.PLAIN, ValueKind.SYMBOL, "(a symbol)"),
    ([], ValueKind.OBJECT, "(an object)"),
    (ValueError("x"), ValueKind.OBJECT, "(an object)"),
])
def test_value_kinds_and_descriptors(value, kind, text):
    """Test the value category enumeration and its descriptors."""
    assert ValueKind.of(value) is kind
    assert describe(value) == text


def test_details_model_validation():
    """Test Details checks arity when built directly."""
    with pytest.raises(ValidationError):
        Details(fragments=("a", "b"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
