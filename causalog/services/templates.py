"""
Message templates with redacted and diagnostic renderings.

A template is captured as a ``Details`` value. The redacted rendering is what a
raised error carries as its message: unquoted substitutions appear only as a
generic descriptor such as ``(a number)``. The diagnostic rendering is the list
of arguments handed to a logging sink, with the raw values intact.
"""

from string import Formatter
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

from causalog.models.details import Details, Quoted, Substitution
from causalog.models.kinds import describe
from causalog.utils.serialization import serialize

DEFAULT_NOTE_LABEL = "Caused by"

DetailsLike = Union[Details, str, None]
IdentityResolver = Callable[[BaseException], int]


def quote(value: Any) -> Quoted:
    """Mark a value so that it is shown in full, serialized, in redacted text."""
    return Quoted(value=value)


def compose(
    fragments: Sequence[str],
    values: Sequence[Any],
    quoted: Optional[Sequence[bool]] = None,
) -> Details:
    """
    Build Details from literal fragments and substitution values.

    Args:
        fragments: Literal text; one more entry than ``values``
        values: Substitution values; ``Quoted`` wrappers are unwrapped
        quoted: Explicit quoted flags, one per value. When omitted the flag is
            taken from whether each value is wrapped by ``quote()``.

    Returns:
        Immutable Details

    Raises:
        ValueError: If the lengths do not line up
    """
    if quoted is not None and len(quoted) != len(values):
        raise ValueError(f"Expected {len(values)} quoted flags, got {len(quoted)}")

    substitutions = []
    for index, value in enumerate(values):
        flag = isinstance(value, Quoted)
        if flag:
            value = value.value
        if quoted is not None:
            flag = bool(quoted[index])
        substitutions.append(Substitution(value=value, quoted=flag))

    return Details(fragments=tuple(fragments), substitutions=tuple(substitutions))


def details(template: str, *values: Any) -> Details:
    """
    Build Details from a ``str.format``-style template.

    Replacement fields may be automatic (``{}``) or positional (``{0}``);
    literal braces are written ``{{`` and ``}}``. Format specs and conversions
    are not supported, since substitutions are rendered later.

    Example:
        details("because {}", err)
        details("<{},{}>", "bar", quote("baz"))
    """
    fragments: List[str] = []
    selected: List[Any] = []
    pending = ""
    auto_index = 0

    for literal, field, spec, conversion in Formatter().parse(template):
        pending += literal
        if field is None:
            continue
        if spec or conversion:
            raise ValueError("Format specs and conversions are not supported in details")
        if field == "":
            index = auto_index
            auto_index += 1
        elif field.isdigit():
            index = int(field)
        else:
            raise ValueError(f"Only positional fields are supported in details, got {{{field}}}")
        if index >= len(values):
            raise ValueError(f"Template refers to value {index} but only {len(values)} given")
        fragments.append(pending)
        selected.append(values[index])
        pending = ""

    fragments.append(pending)
    return compose(fragments, selected)


def as_details(value: DetailsLike, default: str) -> Details:
    """Coerce an optional details argument; plain strings become one fragment."""
    if value is None:
        return Details(fragments=(default,))
    if isinstance(value, Details):
        return value
    if isinstance(value, str):
        return Details(fragments=(value,))
    raise TypeError(f"details must be Details, str or None, not {type(value).__name__}")


def to_redacted(details: Details) -> str:
    """Render the message placed on a raised error."""
    parts = [details.fragments[0]]
    for substitution, fragment in zip(details.substitutions, details.fragments[1:]):
        if substitution.quoted:
            parts.append(serialize(substitution.value))
        else:
            parts.append(describe(substitution.value))
        parts.append(fragment)
    return "".join(parts)


def back_reference(error: BaseException, identity: int) -> str:
    return f"({type(error).__name__}#{identity})"


def to_diagnostic(details: Details, identity_of: Optional[IdentityResolver] = None) -> List[Any]:
    """
    Render the arguments of a multi-argument logging call.

    One space next to each substitution is dropped from the neighbouring
    fragments, and fragments left empty are dropped, so a sink that joins
    arguments with spaces reproduces the template text.

    Args:
        details: Template to render
        identity_of: Resolves an exception to its display identity. When given,
            unquoted exceptions render as ``(TypeName#N)``.

    Returns:
        List of literal strings and rendered or raw values
    """
    parts: List[Any] = [details.fragments[0]]
    for substitution, fragment in zip(details.substitutions, details.fragments[1:]):
        prior = parts.pop()
        if prior.endswith(" "):
            prior = prior[:-1]
        if prior:
            parts.append(prior)

        value = substitution.value
        if substitution.quoted:
            parts.append(serialize(value))
        elif identity_of is not None and isinstance(value, BaseException):
            parts.append(back_reference(value, identity_of(value)))
        else:
            parts.append(value)

        parts.append(fragment[1:] if fragment.startswith(" ") else fragment)

    if parts and parts[-1] == "":
        parts.pop()
    return parts


def references(details: Details) -> Iterator[Tuple[str, BaseException]]:
    """
    Yield (label, error) for each unquoted exception substitution.

    The label is the literal text just before the slot, trimmed, or
    ``DEFAULT_NOTE_LABEL`` when that text is blank.
    """
    for substitution, preceding in zip(details.substitutions, details.fragments):
        if substitution.quoted or not isinstance(substitution.value, BaseException):
            continue
        yield preceding.strip() or DEFAULT_NOTE_LABEL, substitution.value
