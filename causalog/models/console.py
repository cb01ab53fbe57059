"""Logging console configuration model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ConsoleConfig(BaseModel):
    """Independent switches controlling how a LoggingConsole renders errors."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error_taming: Literal["safe", "unsafe"] = Field(
        "safe", alias="errorTaming", description="Whether native stack text is obtainable"
    )
    stack_filtering: Literal["concise", "verbose"] = Field(
        "concise", alias="stackFiltering", description="How much stack text is forwarded"
    )
    wrap_with_causal: bool = Field(
        False, alias="wrapWithCausal", description="Expand causal trees into nested groups"
    )
