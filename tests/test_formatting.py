"""
Tests for pattern and formatter-object formatting and parsing.
"""

import pytest
from datetime import datetime
from typing import List, Optional

from pendulum.locales.locale import Locale
from pydantic import TypeAdapter, ValidationError

from datepicker_utils.config import CalendarConfig
from datepicker_utils.conversion import (
    CalendarValue,
    from_calendar_value_to_date,
    from_date_to_calendar_value,
)
from datepicker_utils.formatting import (
    DateFormat,
    FormatterFormat,
    PatternFormat,
    calendar_value_to_string,
    date_to_string,
    get_locale,
    string_to_calendar_value,
    to_localized_date_string,
)


class IsoDayFormatter:
    """Formatter object that records the arguments it receives."""

    def __init__(self) -> None:
        self.formatted: List[datetime] = []
        self.parsed: List[str] = []

    def date_to_string(self, date: datetime) -> str:
        self.formatted.append(date)
        return date.strftime("%Y/%m/%d")

    def string_to_date(self, text: str) -> Optional[datetime]:
        self.parsed.append(text)
        try:
            return datetime.strptime(text, "%Y/%m/%d")
        except ValueError:
            return None


class TestDateFormat:
    """Test format specifier models."""

    def test_pattern_format(self) -> None:
        date_format = PatternFormat(pattern="YYYY-MM-DD")
        assert date_format.kind == "pattern"

    def test_empty_pattern_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PatternFormat(pattern="")

    def test_formatter_format_requires_formatter_object(self) -> None:
        """Objects without the formatter methods are rejected."""
        assert FormatterFormat(formatter=IsoDayFormatter()).kind == "formatter"
        with pytest.raises(ValidationError):
            FormatterFormat(formatter=object())

    def test_discriminated_union(self) -> None:
        """The kind field selects the variant."""
        adapter = TypeAdapter(DateFormat)
        date_format = adapter.validate_python({"kind": "pattern", "pattern": "YYYY"})
        assert isinstance(date_format, PatternFormat)
        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "unknown", "pattern": "YYYY"})


class TestCalendarValueToString:
    """Test rendering calendar values."""

    def setup_method(self) -> None:
        """Set up a Monday in January."""
        self.value = from_date_to_calendar_value(datetime(2024, 1, 15, 9, 5))

    def test_pattern_default_locale(self) -> None:
        result = calendar_value_to_string(
            self.value, PatternFormat(pattern="YYYY-MM-DD HH:mm"), None
        )
        assert result == "2024-01-15 09:05"

    def test_pattern_english_day_name(self) -> None:
        result = to_localized_date_string(self.value, "dddd", None)
        assert result == "Monday"

    def test_pattern_with_locale(self) -> None:
        result = calendar_value_to_string(self.value, PatternFormat(pattern="MMMM"), "de")
        assert result == "Januar"

    def test_invalid_value_gives_none(self) -> None:
        """Invalid and null values render as None instead of raising."""
        assert to_localized_date_string(CalendarValue.invalid(text="x"), "YYYY", None) is None
        assert (
            calendar_value_to_string(CalendarValue.null(), PatternFormat(pattern="YYYY"), None)
            is None
        )

    def test_formatter_object_skips_failed_parse(self) -> None:
        """A failed parse renders as None and the formatter object is not called."""
        failed = string_to_calendar_value(
            "garbage", PatternFormat(pattern="YYYY-MM-DD"), None
        )
        formatter = IsoDayFormatter()
        assert calendar_value_to_string(failed, FormatterFormat(formatter=formatter), None) is None
        assert formatter.formatted == []

    def test_config_locale_is_fallback(self) -> None:
        """The configured locale applies only when no locale is passed."""
        config = CalendarConfig(locale="de")
        date_format = PatternFormat(pattern="MMMM")
        assert calendar_value_to_string(self.value, date_format, None, config) == "Januar"
        assert calendar_value_to_string(self.value, date_format, "fr", config) == "janvier"
        assert calendar_value_to_string(self.value, date_format, None) == "January"

    def test_formatter_object_receives_date_only(self) -> None:
        """Formatter objects get a plain datetime and no locale."""
        formatter = IsoDayFormatter()
        result = calendar_value_to_string(
            self.value, FormatterFormat(formatter=formatter), "de"
        )
        assert result == "2024/01/15"
        assert formatter.formatted == [datetime(2024, 1, 15, 9, 5)]


class TestStringToCalendarValue:
    """Test parsing text into calendar values."""

    def test_pattern_parse(self) -> None:
        value = string_to_calendar_value(
            "15/01/2024 13:45", PatternFormat(pattern="DD/MM/YYYY HH:mm"), None
        )
        assert value.is_valid()
        assert value.value.tzinfo is None
        assert from_calendar_value_to_date(value) == datetime(2024, 1, 15, 13, 45)

    def test_pattern_parse_with_timezone(self) -> None:
        config = CalendarConfig(timezone="Europe/Paris")
        value = string_to_calendar_value(
            "2024-01-15", PatternFormat(pattern="YYYY-MM-DD"), None, config
        )
        assert value.value.timezone_name == "Europe/Paris"
        assert from_calendar_value_to_date(value) == datetime(2024, 1, 15)

    def test_pattern_parse_failure_is_invalid(self) -> None:
        """Unparseable text gives an invalid, non-null value."""
        value = string_to_calendar_value(
            "not a date", PatternFormat(pattern="YYYY-MM-DD"), None
        )
        assert not value.is_valid()
        assert not value.is_null()
        assert value.parsing_flags.invalid_format
        assert value.parsing_flags.input == "not a date"
        assert value.parsing_flags.format == "YYYY-MM-DD"

    def test_formatter_object_parse(self) -> None:
        formatter = IsoDayFormatter()
        value = string_to_calendar_value(
            "2024/02/29", FormatterFormat(formatter=formatter), "fr"
        )
        assert value.is_valid()
        assert from_calendar_value_to_date(value) == datetime(2024, 2, 29)
        assert formatter.parsed == ["2024/02/29"]

    def test_pattern_parse_uses_config_locale(self) -> None:
        """Month names are read in the configured locale when none is passed."""
        config = CalendarConfig(locale="de")
        value = string_to_calendar_value(
            "15 Januar 2024", PatternFormat(pattern="D MMMM YYYY"), None, config
        )
        assert value.is_valid()
        assert from_calendar_value_to_date(value) == datetime(2024, 1, 15)

    def test_formatter_object_absent_result_is_invalid(self) -> None:
        """A formatter returning None gives an invalid, non-null value."""
        value = string_to_calendar_value(
            "garbage", FormatterFormat(formatter=IsoDayFormatter()), None
        )
        assert not value.is_valid()
        assert not value.is_null()
        assert value.parsing_flags.user_invalidated


class TestLocales:
    """Test locale lookup."""

    def test_absent_identifier(self) -> None:
        assert get_locale(None) is None
        assert get_locale("") is None

    def test_known_identifier(self) -> None:
        assert isinstance(get_locale("fr"), Locale)

    def test_unknown_identifier_raises(self) -> None:
        with pytest.raises(ValueError):
            get_locale("zz")


class TestDateToString:
    """Test rendering plain datetimes."""

    def test_pattern_with_locale(self) -> None:
        result = date_to_string(
            datetime(2024, 1, 15), PatternFormat(pattern="D MMMM YYYY"), "fr"
        )
        assert result == "15 janvier 2024"

    def test_pattern_without_locale(self) -> None:
        result = date_to_string(
            datetime(2024, 1, 15, 7, 3), PatternFormat(pattern="YYYY-MM-DD HH:mm"), None
        )
        assert result == "2024-01-15 07:03"

    def test_config_locale_is_fallback(self) -> None:
        config = CalendarConfig(locale="fr")
        date_format = PatternFormat(pattern="D MMMM YYYY")
        assert date_to_string(datetime(2024, 1, 15), date_format, None, config) == "15 janvier 2024"
        assert date_to_string(datetime(2024, 1, 15), date_format, "de", config) == "15 Januar 2024"

    def test_unknown_locale_propagates(self) -> None:
        with pytest.raises(ValueError):
            date_to_string(datetime(2024, 1, 15), PatternFormat(pattern="YYYY"), "zz")

    def test_formatter_object_ignores_locale(self) -> None:
        """Formatter objects are called directly, even with an unknown locale."""
        formatter = IsoDayFormatter()
        date = datetime(2024, 1, 15, 7, 3)
        assert date_to_string(date, FormatterFormat(formatter=formatter), "zz") == "2024/01/15"
        assert formatter.formatted == [date]
