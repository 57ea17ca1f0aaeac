"""
Configuration management for the date picker helpers.
"""

import logging
import os
from typing import Optional

import pendulum
from dotenv import load_dotenv
from pendulum.tz.timezone import Timezone
from pendulum.tz.exceptions import InvalidTimezone
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class CalendarConfig(BaseModel):
    """Timezone and locale settings consumed by the calendar conversions.

    Leaving ``timezone`` unset makes every conversion a pass-through of the
    local wall-clock fields.
    """

    timezone: Optional[str] = Field(
        default=None, description="IANA timezone calendar values are created in"
    )
    locale: Optional[str] = Field(
        default=None, description="Default locale for pattern formatting"
    )

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            pendulum.timezone(value)
        except (InvalidTimezone, ValueError, KeyError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @property
    def tz(self) -> Optional[Timezone]:
        """Resolved pendulum timezone, or None when no adjustment is configured."""
        if self.timezone is None:
            return None
        return pendulum.timezone(self.timezone)


def get_config() -> CalendarConfig:
    """Build the configuration from ``CALENDAR_TIMEZONE`` and ``CALENDAR_LOCALE``."""
    config = CalendarConfig(
        timezone=os.getenv("CALENDAR_TIMEZONE") or None,
        locale=os.getenv("CALENDAR_LOCALE") or None,
    )
    logger.debug(
        f"Loaded calendar config (timezone={config.timezone}, locale={config.locale})"
    )
    return config
