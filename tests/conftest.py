# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data and mocks for all tests.
"""

import pytest
import datetime
from pathlib import Path
from unittest.mock import Mock
import sys

import pytz

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.models.calendar import RawEvent, ResolvedEvent
from src.models.config import DigestConfig
from src.models.time_code import TimeCode
from src.processors.event_time_resolver import day_start_for


# ==================== Time Fixtures ====================

@pytest.fixture
def chicago():
    """The civil timezone used throughout the tests."""
    return pytz.timezone("America/Chicago")


@pytest.fixture
def target_day():
    """A fixed day so tests do not depend on the clock."""
    return datetime.date(2026, 10, 19)


@pytest.fixture
def day_start(target_day, chicago):
    """Local midnight of target_day."""
    return day_start_for(target_day, chicago)


@pytest.fixture
def local_time(target_day, chicago):
    """Factory: aware datetime on target_day (or an offset day) in Chicago."""
    def _make(hour, minute=0, day_offset=0):
        day = target_day + datetime.timedelta(days=day_offset)
        return chicago.localize(datetime.datetime.combine(day, datetime.time(hour, minute)))
    return _make


# ==================== Event Fixtures ====================

@pytest.fixture
def make_raw_event(local_time):
    """Factory for RawEvent with sensible defaults."""
    def _make(title="Guild Meeting", start=None, is_all_day=False,
              description="", color="#9fc6e7", calendar_id="guild@group.calendar.google.com"):
        return RawEvent(
            title=title,
            start=start or local_time(19, 0),
            is_all_day=is_all_day,
            description_markup=description,
            calendar_color_hex=color,
            calendar_id=calendar_id
        )
    return _make


@pytest.fixture
def sample_resolved_events():
    """A small, deliberately unsorted day of events."""
    return [
        ResolvedEvent("Zeta Raid", TimeCode.at(20 * 60), "Bring flasks."),
        ResolvedEvent("Weekend Festival", TimeCode.continued()),
        ResolvedEvent("Alpha Raid", TimeCode.at(20 * 60)),
        ResolvedEvent("Guild Birthday", TimeCode.all_day(), "Cake in the *tavern*."),
        ResolvedEvent("Morning Fishing", TimeCode.at(9 * 60 + 30)),
    ]


# ==================== Config Fixtures ====================

@pytest.fixture
def digest_config():
    """Sample digest configuration."""
    return DigestConfig(
        calendars=["guild@group.calendar.google.com", "officers@group.calendar.google.com"],
        webhooks=["https://discord.com/api/webhooks/1/aaa", "https://discord.com/api/webhooks/2/bbb"],
        title="The First Regiment Calendar",
        public_url="https://calendar.example.com/first-regiment",
        timezone="America/Chicago"
    )


# ==================== Mock Fixtures ====================

@pytest.fixture
def mock_session():
    """requests.Session stand-in whose POSTs all succeed."""
    session = Mock()
    response = Mock()
    response.status_code = 204
    response.raise_for_status.return_value = None
    session.post.return_value = response
    return session


@pytest.fixture
def google_event_item():
    """Factory for Calendar API event resources."""
    def _make(summary, start_datetime=None, start_date=None, description=None, status="confirmed"):
        start = {'date': start_date} if start_date else {'dateTime': start_datetime}
        item = {'summary': summary, 'start': start, 'status': status}
        if description is not None:
            item['description'] = description
        return item
    return _make
