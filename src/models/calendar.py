# File: src/models/calendar.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .common import parse_color_hex
from .time_code import TimeCode


@dataclass(frozen=True)
class RawEvent:
    """An event as read from a calendar, before any formatting."""
    title: str
    start: datetime
    is_all_day: bool = False
    description_markup: str = ""
    calendar_color_hex: str = "#000000"
    calendar_id: Optional[str] = None

    def __post_init__(self):
        """Validate event data."""
        if self.start.tzinfo is None:
            raise ValueError(f"Event start time must be timezone-aware: {self.title}")

    @property
    def color_value(self) -> int:
        """Calendar colour as an integer, the form chat embeds expect."""
        return parse_color_hex(self.calendar_color_hex)


@dataclass(frozen=True)
class ResolvedEvent:
    """An event with its display title, time code and chat-ready description."""
    display_title: str
    time_code: TimeCode
    description_text: str = ""
    color_value: int = 0

    def sort_key(self):
        """Time first, then case-insensitive title."""
        return (self.time_code, self.display_title.lower())
