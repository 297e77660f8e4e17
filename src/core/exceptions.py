# File: src/core/exceptions.py
"""
Exception types for the calendar digest poster.

Only configuration and authentication problems stop a run. Everything that
can go wrong after collection starts is logged and skipped instead.
"""

from typing import Optional


class DigestError(Exception):
    """Base class for all digest errors."""


class ConfigurationError(DigestError):
    """Raised when the static configuration is missing or invalid."""


class CalendarUnavailableError(DigestError):
    """Raised when a configured calendar cannot be fetched."""

    def __init__(self, calendar_id: str, reason: Optional[str] = None):
        self.calendar_id = calendar_id
        self.reason = reason
        message = f"Calendar unavailable: {calendar_id}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
