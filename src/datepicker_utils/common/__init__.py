"""
Pure date comparison, range and construction helpers.
"""

from .months import DateRangeBoundary, Months
from .date_utils import (
    DateRange,
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
    is_time_equal_or_greater_than,
    is_time_equal_or_smaller_than,
    is_time_in_range,
    is_time_same_or_after,
)

__all__ = [
    "DateRange",
    "DateRangeBoundary",
    "Months",
    "are_equal",
    "are_ranges_equal",
    "are_same_day",
    "are_same_month",
    "are_same_time",
    "clone",
    "get_date_between",
    "get_date_next_month",
    "get_date_only_with_time",
    "get_date_previous_month",
    "get_date_time",
    "get_time_in_range",
    "is_day_in_range",
    "is_day_range_in_range",
    "is_month_in_range",
    "is_time_equal_or_greater_than",
    "is_time_equal_or_smaller_than",
    "is_time_in_range",
    "is_time_same_or_after",
]
