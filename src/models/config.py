# File: src/models/config.py
"""
Data models for the digest configuration.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pytz


@dataclass
class DigestConfig:
    """Static deployment settings for one digest."""
    calendars: List[str]
    webhooks: List[str]
    title: str
    public_url: Optional[str] = None
    timezone: str = "America/Chicago"

    def __post_init__(self):
        """Validate the required values."""
        if not self.calendars:
            raise ValueError("At least one calendar ID must be configured")
        if not self.webhooks:
            raise ValueError("At least one webhook URL must be configured")
        if not self.title:
            raise ValueError("A digest title must be configured")
        if self.timezone not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {self.timezone}")

        # An empty string in config.json means "no public URL"
        if not self.public_url:
            self.public_url = None

    @property
    def tzinfo(self) -> pytz.BaseTzInfo:
        """The civil timezone all wall-clock conversions use."""
        return pytz.timezone(self.timezone)

    @classmethod
    def from_dict(cls, data: dict) -> 'DigestConfig':
        """Create DigestConfig from dictionary (e.g., loaded from JSON)."""
        return cls(
            calendars=[str(c) for c in data.get('calendars', [])],
            webhooks=[str(w) for w in data.get('webhooks', [])],
            title=str(data.get('title', '')),
            public_url=data.get('public_url'),
            timezone=data.get('timezone', 'America/Chicago')
        )
