"""
Locale-aware formatting and parsing with pattern or formatter-object formats.
"""

from .formats import DateFormat, FormatterFormat, PatternFormat
from .operations import (
    calendar_value_to_string,
    date_to_string,
    get_locale,
    string_to_calendar_value,
    to_localized_date_string,
)

__all__ = [
    "DateFormat",
    "FormatterFormat",
    "PatternFormat",
    "calendar_value_to_string",
    "date_to_string",
    "get_locale",
    "string_to_calendar_value",
    "to_localized_date_string",
]
