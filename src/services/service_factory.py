# File: src/services/service_factory.py

from typing import Optional

import requests
from googleapiclient.discovery import Resource

from src.core.config_manager import Config
from src.services.calendar_service import GoogleCalendarService
from src.services.data_collector import EventCollector
from src.services.webhook_service import DigestPublisher


class ServiceFactory:
    """Factory for creating service instances."""

    @staticmethod
    def create_calendar_service(
        calendar_service: Resource,
        timezone: Optional[str] = None
    ) -> GoogleCalendarService:
        """
        Wrap the raw Calendar API resource.

        Args:
            calendar_service: Authenticated calendar API resource
            timezone: Civil timezone name, Config.TARGET_TIMEZONE if omitted
        """
        return GoogleCalendarService(calendar_service, timezone)

    @staticmethod
    def create_event_collector(calendar_service: GoogleCalendarService) -> EventCollector:
        """Create the collector that reads and resolves events."""
        return EventCollector(calendar_service)

    @staticmethod
    def create_publisher(
        dry_run: bool = False,
        session: Optional[requests.Session] = None
    ) -> DigestPublisher:
        """Create the webhook publisher."""
        return DigestPublisher(
            session=session,
            timeout=Config.webhook_timeout(),
            dry_run=dry_run
        )
