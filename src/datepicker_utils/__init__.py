"""
Date Picker Utilities

Pure date comparison, range, construction and formatting helpers used by
date picker components.
"""

__version__ = "1.0.0"

# Import main components for easier access
from .common import (
    DateRange,
    DateRangeBoundary,
    Months,
    are_equal,
    are_ranges_equal,
    are_same_day,
    are_same_month,
    are_same_time,
    clone,
    get_date_between,
    get_date_next_month,
    get_date_only_with_time,
    get_date_previous_month,
    get_date_time,
    get_time_in_range,
    is_day_in_range,
    is_day_range_in_range,
    is_month_in_range,
    is_time_in_range,
    is_time_same_or_after,
)
from .config import CalendarConfig, get_config
from .conversion import (
    CalendarValue,
    from_calendar_range_to_date_range,
    from_calendar_value_to_date,
    from_date_range_to_calendar_range,
    from_date_to_calendar_value,
    is_calendar_value_null,
    is_calendar_value_valid_and_in_range,
)
from .formatting import (
    DateFormat,
    FormatterFormat,
    PatternFormat,
    calendar_value_to_string,
    date_to_string,
    get_locale,
    string_to_calendar_value,
)
from .interfaces import DateFormatter

__all__ = [
    "CalendarConfig",
    "CalendarValue",
    "DateFormat",
    "DateFormatter",
    "DateRange",
    "DateRangeBoundary",
    "FormatterFormat",
    "Months",
    "PatternFormat",
    "are_equal",
    "are_ranges_equal",
    "are_same_day",
    "are_same_month",
    "are_same_time",
    "calendar_value_to_string",
    "clone",
    "date_to_string",
    "from_calendar_range_to_date_range",
    "from_calendar_value_to_date",
    "from_date_range_to_calendar_range",
    "from_date_to_calendar_value",
    "get_config",
    "get_date_between",
    "get_date_next_month",
    "get_date_only_with_time",
    "get_date_previous_month",
    "get_date_time",
    "get_locale",
    "get_time_in_range",
    "is_calendar_value_null",
    "is_calendar_value_valid_and_in_range",
    "is_day_in_range",
    "is_day_range_in_range",
    "is_month_in_range",
    "is_time_in_range",
    "is_time_same_or_after",
    "string_to_calendar_value",
]
