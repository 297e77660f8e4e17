# File: src/processors/event_formatter.py

from src.core.config_manager import Config
from src.models.calendar import ResolvedEvent
from src.models.time_code import TimeCode

ELLIPSIS = "..."


def format_clock_time(minute_of_day: int) -> str:
    """
    Format a minute of day as a 12-hour clock time.

    Example:
        >>> format_clock_time(20 * 60 + 5)
        '8:05 p.m.'
    """
    hour, minute = divmod(minute_of_day, 60)
    suffix = "p.m." if hour >= 12 else "a.m."
    hour = hour % 12
    if hour == 0:
        hour = 12
    return f"{hour}:{minute:02d} {suffix}"


def format_time_label(time_code: TimeCode) -> str:
    """Text shown in parentheses after the title; empty for all-day events."""
    if time_code.has_clock_time:
        return format_clock_time(time_code.minutes)
    if time_code.is_continued:
        return "continued"
    return ""


def format_event(event: ResolvedEvent, max_chars: int = Config.MAX_EVENT_CHARS) -> str:
    """
    Render one event as a block of Discord markdown.

    The block is the bold bulleted title, an optional time, then the
    description. Blocks longer than ``max_chars`` are cut and end in "...".
    """
    text = f"**• {event.display_title}**"

    time_label = format_time_label(event.time_code)
    if time_label:
        text += f" ({time_label})"

    text += "\n"
    if event.description_text:
        text += event.description_text + "\n"

    if len(text) > max_chars:
        text = text[:max_chars] + ELLIPSIS

    return text
