"""Format specifiers: a literal pattern or a pluggable formatter object."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from ..interfaces import DateFormatter


class PatternFormat(BaseModel):
    """Format described by a pendulum token pattern such as ``YYYY-MM-DD``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pattern"] = "pattern"
    pattern: str = Field(..., min_length=1, description="pendulum format tokens")


class FormatterFormat(BaseModel):
    """Format delegated to an object implementing ``DateFormatter``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["formatter"] = "formatter"
    formatter: DateFormatter


DateFormat = Annotated[
    Union[PatternFormat, FormatterFormat], Field(discriminator="kind")
]
