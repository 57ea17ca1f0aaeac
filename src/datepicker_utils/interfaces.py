"""Protocol definitions for pluggable collaborators."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class DateFormatter(Protocol):
    def date_to_string(self, date: datetime) -> str: ...  # noqa: D401
    def string_to_date(self, text: str) -> Optional[datetime]: ...  # noqa: D401
