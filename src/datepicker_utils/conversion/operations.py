"""
Conversions between native datetimes and calendar values.

Calendar values are always rebuilt from explicit wall-clock fields rather than
from timestamps, so a configured timezone shifts the instant while keeping
the date and time the user picked. Without a timezone the conversions are a
pass-through.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple, Union

import pendulum

from ..common.date_utils import DateRange
from ..config import CalendarConfig
from .models import CalendarValue

logger = logging.getLogger(__name__)

CalendarRange = Tuple[CalendarValue, CalendarValue]


def _timezone(config: Optional[CalendarConfig]):
    return config.tz if config is not None else None


def from_date_to_calendar_value(
    date: Union[datetime, str, None], config: Optional[CalendarConfig] = None
) -> CalendarValue:
    """
    Translate a datetime into a calendar value, adjusting the local wall time
    into the configured timezone.

    Args:
        date: Datetime to convert, an ISO-8601 string, or None
        config: Calendar configuration; None means no timezone adjustment

    Returns:
        A valid CalendarValue, or a null one when ``date`` is None
    """
    if date is None:
        return CalendarValue.null()

    tz = _timezone(config)
    if isinstance(date, str):
        parsed = pendulum.parse(date, tz=tz) if tz is not None else pendulum.parse(date).naive()
        return CalendarValue.of(parsed)

    fields = (
        date.year,
        date.month,
        date.day,
        date.hour,
        date.minute,
        date.second,
        date.microsecond,
    )
    if tz is None:
        return CalendarValue.of(pendulum.naive(*fields))
    return CalendarValue.of(pendulum.datetime(*fields, tz=tz))


def from_calendar_value_to_date(
    calendar_value: Optional[CalendarValue],
) -> Optional[datetime]:
    """
    Translate a calendar value into a naive local datetime, keeping its
    wall-clock fields.

    Null values give None. Invalid values are converted literally, and one
    that carries no date fields also gives None; its parsing flags stay on
    the calendar value.
    """
    if calendar_value is None or calendar_value.is_null():
        return None

    value = calendar_value.value
    if value is None:
        logger.debug(f"Calendar value has no date fields: {calendar_value.parsing_flags}")
        return None

    return datetime(
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond,
    )


def from_date_range_to_calendar_range(
    date_range: Optional[DateRange], config: Optional[CalendarConfig] = None
) -> Optional[CalendarRange]:
    if date_range is None:
        return None
    start, end = date_range
    return (
        from_date_to_calendar_value(start, config),
        from_date_to_calendar_value(end, config),
    )


def from_calendar_range_to_date_range(
    calendar_range: Optional[CalendarRange],
) -> Optional[DateRange]:
    if calendar_range is None:
        return None
    start, end = calendar_range
    return (from_calendar_value_to_date(start), from_calendar_value_to_date(end))


def is_calendar_value_null(calendar_value: CalendarValue) -> bool:
    """Return True if the value was built from an absent input."""
    return calendar_value.is_null()


def is_calendar_value_in_range(
    calendar_value: CalendarValue,
    min_date: Optional[datetime],
    max_date: Optional[datetime],
) -> bool:
    return calendar_value.is_between(min_date, max_date, "day", "[]")


def is_calendar_value_valid_and_in_range(
    calendar_value: CalendarValue,
    min_date: Optional[datetime],
    max_date: Optional[datetime],
) -> bool:
    """Return True if the value is valid and its day lies within [min_date, max_date]."""
    valid = calendar_value.is_valid()
    if not valid:
        logger.debug(f"Calendar value is invalid: {calendar_value.parsing_flags}")
    return valid and is_calendar_value_in_range(calendar_value, min_date, max_date)
