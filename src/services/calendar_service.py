# File: src/services/calendar_service.py

import datetime
from typing import Any, Dict, List, Optional

import pytz
from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from src.core.config_manager import Config
from src.core.exceptions import CalendarUnavailableError
from src.models.calendar import RawEvent
from src.models.common import parse_iso_datetime
from src.processors.event_time_resolver import day_start_for
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

DEFAULT_CALENDAR_COLOR = "#000000"


class GoogleCalendarService:
    """Reads a day's events from Google calendars."""

    def __init__(self, calendar_service: Resource, timezone: Optional[str] = None):
        """
        Initialize calendar service.

        Args:
            calendar_service: Authenticated Google Calendar API resource
            timezone: Civil timezone name used for the day window
        """
        self.service = calendar_service
        self.timezone = pytz.timezone(timezone or Config.TARGET_TIMEZONE)

    def get_calendar_color(self, calendar_id: str) -> str:
        """
        Look up the calendar's colour from the user's calendar list.

        The host account must own or be subscribed to the calendar.

        Raises:
            CalendarUnavailableError: If the calendar cannot be fetched
        """
        try:
            entry = self.service.calendarList().get(calendarId=calendar_id).execute()
        except HttpError as e:
            raise CalendarUnavailableError(calendar_id, f"HTTP {e.resp.status}") from e

        return entry.get('backgroundColor') or DEFAULT_CALENDAR_COLOR

    def get_events_for_day(self, calendar_id: str, day: datetime.date) -> List[RawEvent]:
        """
        Fetch every event that overlaps ``day`` in the civil timezone.

        Args:
            calendar_id: Google calendar ID
            day: The day to read

        Returns:
            List of RawEvent objects

        Raises:
            CalendarUnavailableError: If the calendar cannot be fetched
        """
        logger.info(f"Fetching events for {day.isoformat()} from calendar {calendar_id}")

        color = self.get_calendar_color(calendar_id)

        time_min = day_start_for(day, self.timezone)
        time_max = day_start_for(day + datetime.timedelta(days=1), self.timezone)

        items: List[Dict[str, Any]] = []
        page_token = None
        try:
            while True:
                result = self.service.events().list(
                    calendarId=calendar_id,
                    timeMin=time_min.isoformat(),
                    timeMax=time_max.isoformat(),
                    timeZone=self.timezone.zone,
                    singleEvents=True,
                    orderBy='startTime',
                    pageToken=page_token
                ).execute()

                items.extend(result.get('items', []))
                page_token = result.get('nextPageToken')
                if not page_token:
                    break
        except HttpError as e:
            raise CalendarUnavailableError(calendar_id, f"HTTP {e.resp.status}") from e

        events = []
        for item in items:
            event = self._to_raw_event(item, color, calendar_id)
            if event is not None:
                events.append(event)

        logger.info(f"Found {len(events)} events in calendar {calendar_id}")
        return events

    def _to_raw_event(
        self,
        item: Dict[str, Any],
        color: str,
        calendar_id: str
    ) -> Optional[RawEvent]:
        """Convert one API event resource; None if it has no usable start."""
        if item.get('status') == 'cancelled':
            return None

        start = item.get('start', {})
        is_all_day = 'date' in start and 'dateTime' not in start

        if is_all_day:
            start_dt = self._parse_all_day(start['date'])
        else:
            start_dt = parse_iso_datetime(start.get('dateTime'))
            if start_dt is not None and start_dt.tzinfo is None:
                start_dt = self.timezone.localize(start_dt)

        if start_dt is None:
            logger.warning(f"Skipping event without a start time: {item.get('summary')}")
            return None

        return RawEvent(
            title=item.get('summary', 'No Title'),
            start=start_dt,
            is_all_day=is_all_day,
            description_markup=item.get('description', ''),
            calendar_color_hex=color,
            calendar_id=calendar_id
        )

    def _parse_all_day(self, date_str: str) -> Optional[datetime.datetime]:
        """All-day events start at local midnight of their date."""
        try:
            date_obj = datetime.datetime.strptime(date_str, "%Y-%m-%d").date()
        except ValueError:
            return None
        return day_start_for(date_obj, self.timezone)
