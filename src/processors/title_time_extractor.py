# File: src/processors/title_time_extractor.py
"""
Finds a hand-written time in an event title, e.g. "Raid (8pm)" or "Meeting 8:30".

Organizers often put the real start time in the title instead of the event
itself, so a time found here wins over the calendar's own timing.
"""

import re
from typing import Optional, Tuple

from src.models.time_code import TitleTime
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

# "8pm" "8 PM" "8:00 pm" "8:00 p.m." - am/pm required, minutes optional
_MERIDIEM_REQUIRED = re.compile(
    r"\s*\(?(\d+)(:(\d\d))? ?((a|p)\.?m\.?)(\)?|\b)\s*",
    re.IGNORECASE | re.MULTILINE,
)

# "8:00" "8:00pm" - minutes required, am/pm optional
_MINUTES_REQUIRED = re.compile(
    r"\s*\(?(\d+)(:(\d\d)) ?((a|p)\.?m\.?)?(\)?|\b)\s*",
    re.IGNORECASE | re.MULTILINE,
)

TITLE_TIME_PATTERNS: Tuple[re.Pattern, ...] = (_MERIDIEM_REQUIRED, _MINUTES_REQUIRED)

# When only "8:30" is written we assume the evening.
# TODO: confirm the pm default with the guild officers before changing it.
DEFAULT_MERIDIEM = "p"


def extract_title_time(title: Optional[str]) -> Optional[TitleTime]:
    """
    Parse a time annotation out of an event title.

    Patterns are tried in order and only the first that matches is used.
    The matched text (with any parentheses and surrounding whitespace) is
    removed from the title.

    Args:
        title: Raw event title

    Returns:
        TitleTime with the cleaned title and minute of day, or None if the
        title has no recognizable time

    Example:
        >>> extract_title_time("Raid at 8pm")
        TitleTime(cleaned_title='Raid at', minute_of_day=1200)
    """
    if not title:
        return None

    for pattern in TITLE_TIME_PATTERNS:
        match = pattern.search(title)
        if match:
            break
    else:
        return None

    hour = int(match.group(1))
    minute = int(match.group(3) or "00")
    meridiem = (match.group(5) or DEFAULT_MERIDIEM).lower()

    minute_of_day = _to_minute_of_day(hour, minute, meridiem)
    if minute_of_day is None:
        logger.debug(f"Ignoring out-of-range time '{match.group(0).strip()}' in title: {title}")
        return None

    cleaned = (title[:match.start()] + " " + title[match.end():]).strip()
    return TitleTime(cleaned_title=cleaned, minute_of_day=minute_of_day)


def _to_minute_of_day(hour: int, minute: int, meridiem: str) -> Optional[int]:
    """
    12-hour clock to minute of day. 12am is midnight, 12pm is noon.

    Hours 13-23 are already on a 24-hour clock and take no pm offset.
    """
    if minute > 59 or hour > 23:
        return None

    if hour <= 12:
        if hour == 12:
            hour = 0
        if meridiem == "p":
            hour += 12

    return hour * 60 + minute
