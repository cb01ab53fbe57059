"""Template details data models."""

from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Quoted(BaseModel):
    """Marks a substitution value for full serialization in redacted text."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = Field(..., description="The wrapped value")


class Substitution(BaseModel):
    """One substitution slot of a template."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = Field(..., description="Raw substituted value")
    quoted: bool = Field(False, description="Whether the value may appear in redacted text")


class Details(BaseModel):
    """
    A captured message template.

    Literal fragments are interleaved with substitutions: fragment 0, slot 0,
    fragment 1, slot 1, ..., fragment n. There is always exactly one more
    fragment than there are substitutions.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    fragments: Tuple[str, ...] = Field(..., description="Literal text fragments")
    substitutions: Tuple[Substitution, ...] = Field(
        default_factory=tuple, description="Substitution slots between fragments"
    )

    @model_validator(mode="after")
    def check_arity(self) -> "Details":
        if len(self.substitutions) != len(self.fragments) - 1:
            raise ValueError(
                f"Expected {len(self.fragments) - 1} substitutions for "
                f"{len(self.fragments)} fragments, got {len(self.substitutions)}"
            )
        return self
