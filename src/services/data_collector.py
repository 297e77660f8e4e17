# File: src/services/data_collector.py

import datetime
from typing import List, Optional, Sequence

from src.core.exceptions import CalendarUnavailableError
from src.models.calendar import RawEvent, ResolvedEvent
from src.processors.event_time_resolver import EventTimeResolver, day_start_for
from src.processors.markup_converter import MarkupConverter
from src.processors.title_time_extractor import extract_title_time
from src.services.calendar_service import GoogleCalendarService
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventCollector:
    """Collects the day's events from every configured calendar and resolves them."""

    def __init__(
        self,
        calendar_service: GoogleCalendarService,
        converter: Optional[MarkupConverter] = None
    ):
        """
        Initialize the collector.

        Args:
            calendar_service: Calendar service instance (returns RawEvent objects)
            converter: Description converter, the default rule set if omitted
        """
        self.calendar = calendar_service
        self.converter = converter or MarkupConverter()
        self.resolver = EventTimeResolver(calendar_service.timezone)

    def collect_events(
        self,
        calendar_ids: Sequence[str],
        day: datetime.date
    ) -> List[ResolvedEvent]:
        """
        Read and resolve all events for ``day``.

        A calendar that cannot be fetched is logged and skipped; the
        remaining calendars are still read.

        Returns:
            Resolved events in no particular order
        """
        logger.info(f"Collecting events for {day.isoformat()} from {len(calendar_ids)} calendar(s)")

        day_start = day_start_for(day, self.calendar.timezone)
        resolved: List[ResolvedEvent] = []

        for calendar_id in calendar_ids:
            try:
                raw_events = self.calendar.get_events_for_day(calendar_id, day)
            except CalendarUnavailableError as e:
                logger.warning(f"Couldn't fetch calendar with ID {calendar_id}: {e}")
                continue
            except Exception as e:
                logger.error(f"Unexpected error reading calendar {calendar_id}: {e}", exc_info=True)
                continue

            for raw_event in raw_events:
                resolved.append(self.resolve_event(raw_event, day_start))

        logger.info(f"Collected {len(resolved)} events")
        return resolved

    def resolve_event(self, event: RawEvent, day_start: datetime.datetime) -> ResolvedEvent:
        """Turn one raw event into its display form."""
        title, time_code = self.resolver.resolve(
            event, day_start, extract_title_time(event.title)
        )
        return ResolvedEvent(
            display_title=title,
            time_code=time_code,
            description_text=self.converter.convert(event.description_markup),
            color_value=event.color_value
        )
