# File: tests/unit/test_models.py
"""
Unit tests for data models.
Tests all dataclasses and their methods.
"""

import pytest
from datetime import datetime, timezone

from src.models.calendar import RawEvent, ResolvedEvent
from src.models.common import parse_color_hex, parse_iso_datetime
from src.models.config import DigestConfig
from src.models.digest import DeliveryReport, DigestChunk
from src.models.time_code import TimeCode, TimeKind


# ==================== TimeCode Tests ====================

class TestTimeCode:
    """Tests for the TimeCode tagged value."""

    def test_constructors(self):
        """Test the three kinds of time code."""
        assert TimeCode.continued().kind is TimeKind.CONTINUED
        assert TimeCode.all_day().kind is TimeKind.ALL_DAY
        assert TimeCode.at(90).minutes == 90

    def test_kind_properties(self):
        """Exactly one kind flag is set per code."""
        assert TimeCode.continued().is_continued
        assert TimeCode.all_day().is_all_day
        assert TimeCode.at(0).has_clock_time
        assert not TimeCode.all_day().has_clock_time
        assert not TimeCode.continued().has_clock_time

    def test_total_order(self):
        """Continued < all-day < any clock time."""
        codes = [TimeCode.at(0), TimeCode.all_day(), TimeCode.at(1439), TimeCode.continued()]
        assert sorted(codes) == [
            TimeCode.continued(), TimeCode.all_day(), TimeCode.at(0), TimeCode.at(1439)
        ]

    def test_comparisons(self):
        """Comparison operators follow the order."""
        assert TimeCode.continued() < TimeCode.all_day()
        assert TimeCode.all_day() < TimeCode.at(0)
        assert TimeCode.at(600) >= TimeCode.at(600)
        assert TimeCode.at(601) > TimeCode.at(600)

    def test_equal_codes_hash_equal(self):
        """Frozen codes work as dict keys."""
        assert {TimeCode.at(5): "x"}[TimeCode.at(5)] == "x"

    @pytest.mark.parametrize("minutes", [-1, 1440, None])
    def test_out_of_range_minutes_raise(self, minutes):
        """Clock times must fall inside a day."""
        with pytest.raises(ValueError):
            TimeCode(TimeKind.MINUTES, minutes)

    def test_sentinel_with_minutes_raises(self):
        """Sentinels carry no minute value."""
        with pytest.raises(ValueError, match="cannot carry minutes"):
            TimeCode(TimeKind.ALL_DAY, 10)

    def test_str(self):
        """String form is for logs."""
        assert str(TimeCode.at(9 * 60 + 5)) == "09:05"
        assert str(TimeCode.continued()) == "CONTINUED"


# ==================== Event Tests ====================

class TestRawEvent:
    """Tests for RawEvent dataclass."""

    def test_requires_aware_start(self):
        """Naive datetimes are rejected."""
        with pytest.raises(ValueError, match="timezone-aware"):
            RawEvent(title="Raid", start=datetime(2026, 10, 19, 20, 0))

    def test_color_value(self, make_raw_event):
        """Calendar colour is exposed as an int."""
        assert make_raw_event(color="#9fc6e7").color_value == 0x9FC6E7


class TestResolvedEvent:
    """Tests for ResolvedEvent dataclass."""

    def test_sort_key(self):
        """Sort key is time code, then lowercased title."""
        event = ResolvedEvent("Raid", TimeCode.at(5))
        assert event.sort_key() == (TimeCode.at(5), "raid")


# ==================== Helper Tests ====================

class TestHelpers:
    """Tests for parsing helpers."""

    @pytest.mark.parametrize("raw, expected", [
        ("#ffffff", 0xFFFFFF),
        ("A4BDFC", 0xA4BDFC),
        ("#000000", 0),
        ("", 0),
        (None, 0),
        ("red", 0),
        ("#fff", 0),
    ])
    def test_parse_color_hex(self, raw, expected):
        assert parse_color_hex(raw) == expected

    def test_parse_iso_datetime_with_z(self):
        assert parse_iso_datetime("2026-10-19T20:00:00Z") == datetime(2026, 10, 19, 20, 0, tzinfo=timezone.utc)

    def test_parse_iso_datetime_invalid(self):
        assert parse_iso_datetime("not a date") is None
        assert parse_iso_datetime(None) is None


# ==================== Digest Tests ====================

class TestDigestChunk:
    """Tests for the webhook payload shape."""

    def test_header_chunk_payload(self):
        chunk = DigestChunk("Body", has_header=True)
        payload = chunk.to_payload("My Calendar", "https://calendar.example.com")

        assert payload == {
            "content": "",
            "embeds": [{
                "description": "Body",
                "title": ":calendar_spiral: My Calendar",
                "url": "https://calendar.example.com"
            }]
        }

    def test_header_without_public_url(self):
        payload = DigestChunk("Body", has_header=True).to_payload("My Calendar", None)
        assert "url" not in payload["embeds"][0]
        assert payload["embeds"][0]["title"] == ":calendar_spiral: My Calendar"

    def test_continuation_chunk_payload(self):
        payload = DigestChunk("More").to_payload("My Calendar", "https://calendar.example.com")
        assert payload == {"content": "", "embeds": [{"description": "More"}]}


class TestDeliveryReport:
    """Tests for delivery bookkeeping."""

    def test_counts(self):
        report = DeliveryReport()
        report.record_success()
        report.record_failure("chunk 1 -> hook")

        assert report.attempted == 2
        assert report.delivered == 1
        assert report.failed == 1
        assert str(report) == "1/2 deliveries succeeded"


# ==================== Config Tests ====================

class TestDigestConfig:
    """Tests for DigestConfig."""

    def test_from_dict(self):
        config = DigestConfig.from_dict({
            'calendars': ['a@group.calendar.google.com'],
            'webhooks': ['https://discord.com/api/webhooks/1/x'],
            'title': 'Guild',
        })

        assert config.calendars == ['a@group.calendar.google.com']
        assert config.public_url is None
        assert config.timezone == "America/Chicago"
        assert config.tzinfo.zone == "America/Chicago"

    def test_empty_public_url_is_none(self):
        config = DigestConfig(['c'], ['w'], 'Guild', public_url='')
        assert config.public_url is None

    @pytest.mark.parametrize("kwargs, message", [
        ({'calendars': []}, "calendar"),
        ({'webhooks': []}, "webhook"),
        ({'title': ''}, "title"),
        ({'timezone': 'Mars/Olympus_Mons'}, "Unknown timezone"),
    ])
    def test_validation(self, kwargs, message):
        values = {'calendars': ['c'], 'webhooks': ['w'], 'title': 'Guild'}
        values.update(kwargs)
        with pytest.raises(ValueError, match=message):
            DigestConfig(**values)
