"""
Locale-aware formatting and parsing of dates.

Pattern formats go through pendulum; formatter objects are called directly
and never receive a locale.
"""

import logging
from datetime import datetime
from typing import Optional

import pendulum
from pendulum.formatting import Formatter
from pendulum.locales.locale import Locale

from ..config import CalendarConfig
from ..conversion.models import CalendarValue
from ..conversion.operations import (
    from_calendar_value_to_date,
    from_date_to_calendar_value,
)
from .formats import DateFormat

logger = logging.getLogger(__name__)

_formatter = Formatter()


def _resolve_locale(
    locale: Optional[str], config: Optional[CalendarConfig]
) -> Optional[str]:
    if locale is None and config is not None:
        return config.locale
    return locale


def to_localized_date_string(
    calendar_value: CalendarValue, pattern: str, locale: Optional[str]
) -> Optional[str]:
    """Return ``calendar_value`` rendered with ``pattern`` in ``locale``.

    A None locale keeps pendulum's default locale. Invalid values give None.
    """
    if not calendar_value.is_valid():
        logger.debug(f"Not formatting invalid calendar value: {calendar_value.parsing_flags}")
        return None
    if locale is not None:
        return calendar_value.value.format(pattern, locale=locale)
    return calendar_value.value.format(pattern)


def calendar_value_to_string(
    calendar_value: CalendarValue,
    date_format: DateFormat,
    locale: Optional[str],
    config: Optional[CalendarConfig] = None,
) -> Optional[str]:
    """
    Render ``calendar_value`` with a pattern or a formatter object.

    Pattern formats fall back to ``config.locale`` when ``locale`` is None.
    Invalid and null values give None without calling the formatter object.
    """
    if date_format.kind == "pattern":
        return to_localized_date_string(
            calendar_value, date_format.pattern, _resolve_locale(locale, config)
        )
    date = from_calendar_value_to_date(calendar_value)
    if date is None:
        return None
    return date_format.formatter.date_to_string(date)


def string_to_calendar_value(
    date_string: str,
    date_format: DateFormat,
    locale: Optional[str],
    config: Optional[CalendarConfig] = None,
) -> CalendarValue:
    """
    Parse ``date_string`` into a calendar value.

    Text that does not match a pattern, or that a formatter object cannot
    parse, yields an invalid CalendarValue instead of raising.

    Args:
        date_string: Text to parse
        date_format: Pattern or formatter object to parse with
        locale: Locale for pattern parsing (ignored by formatter objects);
            falls back to ``config.locale`` when None
        config: Calendar configuration; None means no timezone adjustment

    Returns:
        CalendarValue, possibly flagged invalid
    """
    if date_format.kind == "pattern":
        tz = config.tz if config is not None else None
        locale = _resolve_locale(locale, config)
        try:
            if tz is not None:
                parsed = pendulum.from_format(
                    date_string, date_format.pattern, tz=tz, locale=locale
                )
            else:
                parsed = pendulum.from_format(
                    date_string, date_format.pattern, locale=locale
                ).naive()
        except ValueError as e:
            logger.debug(
                f"Failed to parse {date_string!r} with pattern {date_format.pattern!r}: {e}"
            )
            return CalendarValue.invalid(
                invalid_format=True, text=date_string, pattern=date_format.pattern
            )
        return CalendarValue.of(parsed)

    date = date_format.formatter.string_to_date(date_string)
    if date is None:
        logger.debug(f"Formatter could not parse {date_string!r}")
        return CalendarValue.invalid(text=date_string)
    return from_date_to_calendar_value(date, config)


def get_locale(locale_string: Optional[str]) -> Optional[Locale]:
    """
    Resolve locale data by identifier.

    Unknown identifiers raise pendulum's ValueError.
    """
    if not locale_string:
        return None
    return Locale.load(locale_string)


def date_to_string(
    date: datetime,
    date_format: DateFormat,
    locale: Optional[str],
    config: Optional[CalendarConfig] = None,
) -> str:
    """Return ``date`` rendered with ``date_format``, localized to ``locale``.

    Pattern formats fall back to ``config.locale`` when ``locale`` is None.
    """
    if date_format.kind == "pattern":
        value = from_date_to_calendar_value(date).value
        return _formatter.format(
            value, date_format.pattern, get_locale(_resolve_locale(locale, config))
        )
    return date_format.formatter.date_to_string(date)
