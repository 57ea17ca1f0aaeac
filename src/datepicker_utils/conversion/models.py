"""
Calendar value model wrapping pendulum datetimes with validity diagnostics.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

import pendulum
from pendulum import DateTime
from pydantic import BaseModel, ConfigDict, Field

Inclusivity = Literal["[]", "()", "[)", "(]"]


class ParsingFlags(BaseModel):
    """Diagnostics describing how a calendar value was built."""

    model_config = ConfigDict(frozen=True)

    null_input: bool = Field(
        default=False, description="Value was built from an absent input"
    )
    invalid_format: bool = Field(
        default=False, description="Input text did not match the format"
    )
    user_invalidated: bool = Field(
        default=False, description="Value was explicitly marked invalid"
    )
    input: Optional[str] = Field(default=None, description="Text that was parsed")
    format: Optional[str] = Field(default=None, description="Pattern used to parse")


class CalendarValue(BaseModel):
    """A pendulum datetime together with its validity state.

    A value built from an absent input is *null*; a value whose parse failed
    is *invalid*. Both report ``is_valid() == False`` and are told apart
    through ``parsing_flags``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Optional[DateTime] = None
    parsing_flags: ParsingFlags = Field(default_factory=ParsingFlags)

    @classmethod
    def of(cls, value: DateTime) -> "CalendarValue":
        return cls(value=value)

    @classmethod
    def null(cls) -> "CalendarValue":
        return cls(parsing_flags=ParsingFlags(null_input=True))

    @classmethod
    def invalid(
        cls,
        *,
        invalid_format: bool = False,
        text: Optional[str] = None,
        pattern: Optional[str] = None,
    ) -> "CalendarValue":
        return cls(
            parsing_flags=ParsingFlags(
                invalid_format=invalid_format,
                user_invalidated=not invalid_format,
                input=text,
                format=pattern,
            )
        )

    def is_valid(self) -> bool:
        flags = self.parsing_flags
        return (
            self.value is not None
            and not flags.null_input
            and not flags.invalid_format
            and not flags.user_invalidated
        )

    def is_null(self) -> bool:
        return self.parsing_flags.null_input

    def _align(self, bound: datetime) -> DateTime:
        """Express ``bound`` in the same timezone (or naivety) as this value."""
        tz = self.value.tzinfo
        if tz is None:
            return pendulum.naive(
                bound.year,
                bound.month,
                bound.day,
                bound.hour,
                bound.minute,
                bound.second,
                bound.microsecond,
            )
        return pendulum.instance(bound, tz=tz).in_timezone(tz)

    def is_between(
        self,
        start: Optional[datetime],
        end: Optional[datetime],
        unit: str = "day",
        inclusivity: Inclusivity = "[]",
    ) -> bool:
        """Check whether this value falls between two bounds at ``unit`` granularity.

        An absent bound leaves that side open. Invalid values are never
        between anything.
        """
        if not self.is_valid():
            return False

        current = self.value.start_of(unit)
        if start is not None:
            lower = self._align(start).start_of(unit)
            if current < lower or (inclusivity[0] == "(" and current == lower):
                return False
        if end is not None:
            upper = self._align(end).start_of(unit)
            if current > upper or (inclusivity[1] == ")" and current == upper):
                return False
        return True
