# File: src/core/orchestrator.py
"""
Main orchestrator module for the calendar digest poster.
Coordinates collection, digest building and delivery for one day.

Every run is stateless: it reads the whole day again and posts it again.
"""

import datetime
from typing import Optional, Tuple

from src.core.config_manager import Config
from src.core.exceptions import ConfigurationError
from src.auth.google_auth import get_calendar_service
from src.models.config import DigestConfig
from src.models.digest import DeliveryReport, DigestChunk
from src.processors.digest_builder import DigestBuilder
from src.services.data_collector import EventCollector
from src.services.service_factory import ServiceFactory
from src.services.webhook_service import DigestPublisher
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class DigestOrchestrator:
    """
    Runs the daily digest pipeline.

    Pipeline Steps:
        1. Collect and resolve events from every calendar
        2. Sort and pack them into chunks
        3. Post the chunks to every webhook
    """

    def __init__(
        self,
        config: DigestConfig,
        collector: EventCollector,
        publisher: DigestPublisher,
        builder: Optional[DigestBuilder] = None
    ):
        self.config = config
        self.collector = collector
        self.publisher = publisher
        self.builder = builder or DigestBuilder()

    def today(self) -> datetime.date:
        """Today's date in the civil timezone, not the host's."""
        return datetime.datetime.now(self.config.tzinfo).date()

    def build_digest(self, day: datetime.date) -> Tuple[DigestChunk, ...]:
        """Collect the day's events and build the chunks without posting."""
        logger.info("STEP 1: Collecting events")
        events = self.collector.collect_events(self.config.calendars, day)

        logger.info("STEP 2: Building digest")
        return self.builder.build(events)

    def run_daily_digest(self, day: Optional[datetime.date] = None) -> DeliveryReport:
        """
        Execute the full digest pipeline for ``day`` (default: today).

        Returns:
            DeliveryReport describing what was posted
        """
        day = day or self.today()

        logger.info("="*60)
        logger.info(f"Starting calendar digest for {day.isoformat()}")
        logger.info("="*60)

        chunks = self.build_digest(day)

        logger.info("STEP 3: Publishing digest")
        report = self.publisher.publish(
            chunks,
            self.config.title,
            self.config.public_url,
            self.config.webhooks
        )

        logger.info("="*60)
        logger.info(f"Digest complete: {len(chunks)} chunk(s), {report}")
        logger.info("="*60)

        return report


class OrchestratorFactory:
    """Factory for creating DigestOrchestrator instances with dependency injection."""

    @staticmethod
    def create(dry_run: bool = False) -> DigestOrchestrator:
        """
        Create a fully initialized DigestOrchestrator.

        Raises:
            ConfigurationError: If configuration is invalid
            ConnectionError: If authentication fails
        """
        logger.info("Creating DigestOrchestrator via factory")

        if not Config.validate():
            raise ConfigurationError(
                "Configuration validation failed. "
                "Check config/config.json and your .env file."
            )

        config = Config.load_digest_config()

        raw_service = get_calendar_service()
        if raw_service is None:
            raise ConnectionError(
                "Google authentication failed. Run 'python scripts/setup.py' first."
            )

        calendar_service = ServiceFactory.create_calendar_service(raw_service, config.timezone)
        return DigestOrchestrator(
            config=config,
            collector=ServiceFactory.create_event_collector(calendar_service),
            publisher=ServiceFactory.create_publisher(dry_run=dry_run)
        )
