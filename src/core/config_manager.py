# File: src/core/config_manager.py
"""
Centralized configuration management for the calendar digest poster.
Loads settings from environment variables and the config file.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv

from src.core.exceptions import ConfigurationError
from src.models.config import DigestConfig

# Load environment variables
load_dotenv()


def _split_env_list(value: Optional[str]) -> List[str]:
    """Split a comma separated environment value into a clean list."""
    if not value:
        return []
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from src/core/

    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"

    # Files
    CONFIG_FILE = Path(os.getenv("DIGEST_CONFIG_FILE", str(CONFIG_DIR / "config.json")))
    TOKEN_FILE = BASE_DIR / "token.json"
    CREDENTIALS_FILE = BASE_DIR / "credentials.json"
    ENV_FILE = BASE_DIR / ".env"

    # Google Services
    GOOGLE_SCOPES = [
        'https://www.googleapis.com/auth/calendar.readonly',
    ]

    # Deployment values; these override config.json when set
    CALENDAR_IDS: List[str] = _split_env_list(os.getenv("DIGEST_CALENDARS"))
    WEBHOOK_URLS: List[str] = _split_env_list(os.getenv("DIGEST_WEBHOOKS"))
    DIGEST_TITLE = os.getenv("DIGEST_TITLE")
    PUBLIC_URL = os.getenv("DIGEST_PUBLIC_URL")

    # Application Settings
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "America/Chicago")
    DEFAULT_WEBHOOK_TIMEOUT = 10.0
    # Raw string, parsed by webhook_timeout()
    WEBHOOK_TIMEOUT = os.getenv("WEBHOOK_TIMEOUT")

    # Output limits (fixed by the chat platform's message size)
    MAX_EVENT_CHARS = 1800
    MAX_CHUNK_CHARS = 2000

    # Embed decoration
    TITLE_ICON = ":calendar_spiral:"
    HEADER_TEXT = "The following events are posted for today:"
    NO_EVENTS_TEXT = "*No events are posted for today.*"

    @classmethod
    def load_raw_config(cls) -> Dict[str, Any]:
        """Load the digest configuration file, or an empty dict if there is none."""
        if not cls.CONFIG_FILE.exists():
            return {}

        with open(cls.CONFIG_FILE, 'r', encoding='utf-8') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {cls.CONFIG_FILE}: {e}") from e

    @classmethod
    def load_digest_config(cls) -> DigestConfig:
        """
        Build the DigestConfig for a run.

        Values from the environment take precedence over config.json.

        Raises:
            ConfigurationError: If calendars, webhooks or title are missing
        """
        data = cls.load_raw_config()

        if cls.CALENDAR_IDS:
            data['calendars'] = cls.CALENDAR_IDS
        if cls.WEBHOOK_URLS:
            data['webhooks'] = cls.WEBHOOK_URLS
        if cls.DIGEST_TITLE:
            data['title'] = cls.DIGEST_TITLE
        if cls.PUBLIC_URL:
            data['public_url'] = cls.PUBLIC_URL
        data.setdefault('timezone', cls.TARGET_TIMEZONE)

        try:
            return DigestConfig.from_dict(data)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def webhook_timeout(cls) -> float:
        """
        Per-request webhook timeout in seconds.

        Raises:
            ConfigurationError: If WEBHOOK_TIMEOUT is not a positive number
        """
        if not cls.WEBHOOK_TIMEOUT:
            return cls.DEFAULT_WEBHOOK_TIMEOUT

        try:
            timeout = float(cls.WEBHOOK_TIMEOUT)
        except ValueError as e:
            raise ConfigurationError(
                f"WEBHOOK_TIMEOUT must be a number of seconds, got {cls.WEBHOOK_TIMEOUT!r}"
            ) from e

        if timeout <= 0:
            raise ConfigurationError(f"WEBHOOK_TIMEOUT must be positive, got {timeout}")
        return timeout

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = []

        if not cls.CREDENTIALS_FILE.exists() and not cls.TOKEN_FILE.exists():
            errors.append(f"Neither credentials.json nor token.json found in {cls.BASE_DIR}")

        for check in (cls.load_digest_config, cls.webhook_timeout):
            try:
                check()
            except ConfigurationError as e:
                errors.append(str(e))

        if errors:
            for error in errors:
                print(f"Configuration Error: {error}")
            return False

        return True
