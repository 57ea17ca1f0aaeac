"""
Conversion between native datetimes and pendulum-backed calendar values.
"""

from .models import CalendarValue, ParsingFlags
from .operations import (
    CalendarRange,
    from_calendar_range_to_date_range,
    from_calendar_value_to_date,
    from_date_range_to_calendar_range,
    from_date_to_calendar_value,
    is_calendar_value_in_range,
    is_calendar_value_null,
    is_calendar_value_valid_and_in_range,
)

__all__ = [
    "CalendarRange",
    "CalendarValue",
    "ParsingFlags",
    "from_calendar_range_to_date_range",
    "from_calendar_value_to_date",
    "from_date_range_to_calendar_range",
    "from_date_to_calendar_value",
    "is_calendar_value_in_range",
    "is_calendar_value_null",
    "is_calendar_value_valid_and_in_range",
]
