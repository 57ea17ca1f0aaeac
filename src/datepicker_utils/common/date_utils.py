"""Date comparison, range membership and construction helpers.

Every function here is pure: inputs are never modified and new ``datetime``
values are returned. Instants are treated as local wall-clock values, so
comparisons use each value's own fields rather than converting timezones.
"""

from __future__ import annotations
from datetime import datetime
from typing import Optional, Tuple

from .months import Months

DateRange = Tuple[Optional[datetime], Optional[datetime]]

# Day used to pin time-of-day values so they compare as pure times.
_REFERENCE_YEAR, _REFERENCE_MONTH, _REFERENCE_DAY = 1900, 1, 1


def _milliseconds(dt: datetime) -> int:
    return dt.microsecond // 1000


def _truncate_to_milliseconds(dt: datetime) -> datetime:
    return dt.replace(microsecond=_milliseconds(dt) * 1000)


def _start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def are_equal(date1: Optional[datetime], date2: Optional[datetime]) -> bool:
    """Return True if both dates are absent or point at the same millisecond."""
    if date1 is None and date2 is None:
        return True
    elif date1 is None or date2 is None:
        return False
    else:
        return _truncate_to_milliseconds(date1) == _truncate_to_milliseconds(date2)


def are_ranges_equal(
    date_range1: Optional[DateRange], date_range2: Optional[DateRange]
) -> bool:
    """Compare two ranges bound by bound at day granularity."""
    if date_range1 is None and date_range2 is None:
        return True
    elif date_range1 is None or date_range2 is None:
        return False
    else:
        start1, end1 = date_range1
        start2, end2 = date_range2
        starts_equal = (start1 is None and start2 is None) or are_same_day(start1, start2)
        ends_equal = (end1 is None and end2 is None) or are_same_day(end1, end2)
        return starts_equal and ends_equal


def are_same_day(date1: Optional[datetime], date2: Optional[datetime]) -> bool:
    return (
        date1 is not None
        and date2 is not None
        and date1.day == date2.day
        and date1.month == date2.month
        and date1.year == date2.year
    )


def are_same_month(date1: Optional[datetime], date2: Optional[datetime]) -> bool:
    return (
        date1 is not None
        and date2 is not None
        and date1.month == date2.month
        and date1.year == date2.year
    )


def are_same_time(date1: Optional[datetime], date2: Optional[datetime]) -> bool:
    """Return True if the time-of-day parts match to the millisecond."""
    return (
        date1 is not None
        and date2 is not None
        and date1.hour == date2.hour
        and date1.minute == date2.minute
        and date1.second == date2.second
        and _milliseconds(date1) == _milliseconds(date2)
    )


def clone(date: datetime) -> datetime:
    """Return an independent copy of ``date``."""
    return date.replace()


def is_day_in_range(
    date: Optional[datetime], date_range: DateRange, exclusive: bool = False
) -> bool:
    """Check whether the calendar day of ``date`` lies within ``date_range``.

    Both bounds are inclusive unless ``exclusive`` is set, in which case the
    first and last day of the range are rejected. A missing bound leaves that
    side of the range open.
    """
    if date is None:
        return False

    start, end = date_range
    day = _start_of_day(date)

    if start is not None:
        start = _start_of_day(start)
        if day < start or (exclusive and are_same_day(start, day)):
            return False
    if end is not None:
        end = _start_of_day(end)
        if day > end or (exclusive and are_same_day(day, end)):
            return False
    return True


def is_day_range_in_range(inner_range: DateRange, outer_range: DateRange) -> bool:
    """Check that every present bound of ``inner_range`` falls inside ``outer_range``."""
    inner_start, inner_end = inner_range
    return (inner_start is None or is_day_in_range(inner_start, outer_range)) and (
        inner_end is None or is_day_in_range(inner_end, outer_range)
    )


def is_month_in_range(date: Optional[datetime], date_range: DateRange) -> bool:
    if date is None:
        return False

    start, end = date_range
    month = _start_of_day(date).replace(day=1)

    if start is not None and month < _start_of_day(start).replace(day=1):
        return False
    if end is not None and month > _start_of_day(end).replace(day=1):
        return False
    return True


def is_time_equal_or_greater_than(time: datetime, time_to_compare: datetime) -> bool:
    return time >= time_to_compare


def is_time_equal_or_smaller_than(time: datetime, time_to_compare: datetime) -> bool:
    return time <= time_to_compare


def is_time_in_range(date: datetime, min_date: datetime, max_date: datetime) -> bool:
    """Check whether the time of day of ``date`` lies between two times of day.

    Dates are ignored. When ``max_date`` is not later than ``min_date`` the
    window wraps past midnight, e.g. 23:00 to 01:00 accepts 23:30 and 00:30.
    Both ends are inclusive.
    """
    time = get_date_only_with_time(date)
    min_time = get_date_only_with_time(min_date)
    max_time = get_date_only_with_time(max_date)

    is_after_min = is_time_equal_or_greater_than(time, min_time)
    is_before_max = is_time_equal_or_smaller_than(time, max_time)

    if is_time_equal_or_smaller_than(max_time, min_time):
        return is_after_min or is_before_max

    return is_after_min and is_before_max


def get_time_in_range(time: datetime, min_time: datetime, max_time: datetime) -> datetime:
    """Clamp ``time`` into the ``[min_time, max_time]`` time-of-day window."""
    if are_same_time(min_time, max_time):
        return max_time
    elif is_time_in_range(time, min_time, max_time):
        return time
    elif is_time_same_or_after(time, max_time):
        return max_time

    return min_time


def is_time_same_or_after(date: datetime, date_to_compare: datetime) -> bool:
    """
    Return True if the time part of ``date`` is later than or equal to the
    time part of ``date_to_compare``. Day, month and year are not compared.
    """
    time = get_date_only_with_time(date)
    time_to_compare = get_date_only_with_time(date_to_compare)

    return is_time_equal_or_greater_than(time, time_to_compare)


def get_date_between(date_range: DateRange) -> datetime:
    """Return the instant exactly halfway between the two bounds of ``date_range``."""
    start, end = date_range
    return start + (end - start) * 0.5


def get_date_time(
    date: Optional[datetime], time: Optional[datetime]
) -> Optional[datetime]:
    """Combine the calendar day of ``date`` with the time of day of ``time``.

    A missing ``time`` yields midnight; a missing ``date`` yields None.
    """
    if date is None:
        return None
    elif time is None:
        return _start_of_day(date)
    else:
        return date.replace(
            hour=time.hour,
            minute=time.minute,
            second=time.second,
            microsecond=_milliseconds(time) * 1000,
        )


def get_date_only_with_time(date: datetime) -> datetime:
    """Pin the time of day of ``date`` to a fixed, naive reference day."""
    return datetime(
        _REFERENCE_YEAR,
        _REFERENCE_MONTH,
        _REFERENCE_DAY,
        date.hour,
        date.minute,
        date.second,
        _milliseconds(date) * 1000,
    )


def get_date_previous_month(date: datetime) -> datetime:
    """Return the first day of the month before ``date``, at midnight."""
    if date.month == Months.JANUARY:
        return datetime(date.year - 1, Months.DECEMBER, 1, tzinfo=date.tzinfo)
    else:
        return datetime(date.year, date.month - 1, 1, tzinfo=date.tzinfo)


def get_date_next_month(date: datetime) -> datetime:
    """Return the first day of the month after ``date``, at midnight."""
    if date.month == Months.DECEMBER:
        return datetime(date.year + 1, Months.JANUARY, 1, tzinfo=date.tzinfo)
    else:
        return datetime(date.year, date.month + 1, 1, tzinfo=date.tzinfo)
