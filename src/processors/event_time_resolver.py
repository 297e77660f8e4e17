# File: src/processors/event_time_resolver.py
"""
Decides the one time value an event is displayed and sorted with.
"""

import datetime
from typing import Optional, Tuple

import pytz

from src.models.calendar import RawEvent
from src.models.time_code import TimeCode, TitleTime
from src.processors.title_time_extractor import extract_title_time
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def day_start_for(day: datetime.date, tz: pytz.BaseTzInfo) -> datetime.datetime:
    """Local midnight at the start of ``day`` as an aware datetime."""
    return tz.localize(datetime.datetime.combine(day, datetime.time.min))


class EventTimeResolver:
    """
    Resolves an event's display title and TimeCode.

    Precedence, highest first:
        1. A time written in the title
        2. CONTINUED, if the event started before today
        3. ALL_DAY, if the event is an all-day event
        4. The start time, converted to the civil timezone
    """

    def __init__(self, timezone: pytz.BaseTzInfo):
        self.timezone = timezone

    def resolve(
        self,
        event: RawEvent,
        day_start: datetime.datetime,
        title_time: Optional[TitleTime] = None
    ) -> Tuple[str, TimeCode]:
        """
        Resolve the display title and time code for one event.

        Args:
            event: The raw calendar event
            day_start: Local midnight of the day being posted
            title_time: Result of extract_title_time, computed here when omitted

        Returns:
            Tuple of (display_title, time_code)
        """
        if title_time is None:
            title_time = extract_title_time(event.title)

        if title_time is not None:
            logger.debug(f"Using title time for '{event.title}'")
            return title_time.cleaned_title, TimeCode.at(title_time.minute_of_day)

        if event.start < day_start:
            return event.title, TimeCode.continued()

        if event.is_all_day:
            return event.title, TimeCode.all_day()

        # Go through the timezone; a fixed UTC offset is wrong across DST changes
        local_start = event.start.astimezone(self.timezone)
        return event.title, TimeCode.at(local_start.hour * 60 + local_start.minute)
