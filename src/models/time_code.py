# File: src/models/time_code.py

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple

MINUTES_PER_DAY = 24 * 60


class TimeKind(Enum):
    """What an event's displayed time means. Values give the sort order."""
    CONTINUED = 0  # Started on a previous day, still running
    ALL_DAY = 1    # All-day event with no useful start time
    MINUTES = 2    # A real minute of the day


@total_ordering
@dataclass(frozen=True)
class TimeCode:
    """
    Sortable display time of an event.

    CONTINUED sorts before ALL_DAY, which sorts before every real time.
    Real times compare by minute of day.
    """
    kind: TimeKind
    minutes: Optional[int] = None

    def __post_init__(self):
        """Validate that only MINUTES carries a value, and that it fits in a day."""
        if self.kind is TimeKind.MINUTES:
            if self.minutes is None or not 0 <= self.minutes < MINUTES_PER_DAY:
                raise ValueError(f"Minute of day out of range: {self.minutes}")
        elif self.minutes is not None:
            raise ValueError(f"{self.kind.name} time code cannot carry minutes")

    @classmethod
    def continued(cls) -> 'TimeCode':
        return cls(TimeKind.CONTINUED)

    @classmethod
    def all_day(cls) -> 'TimeCode':
        return cls(TimeKind.ALL_DAY)

    @classmethod
    def at(cls, minutes: int) -> 'TimeCode':
        return cls(TimeKind.MINUTES, minutes)

    @property
    def is_continued(self) -> bool:
        return self.kind is TimeKind.CONTINUED

    @property
    def is_all_day(self) -> bool:
        return self.kind is TimeKind.ALL_DAY

    @property
    def has_clock_time(self) -> bool:
        return self.kind is TimeKind.MINUTES

    def sort_key(self) -> Tuple[int, int]:
        return (self.kind.value, self.minutes or 0)

    def __lt__(self, other: 'TimeCode') -> bool:
        if not isinstance(other, TimeCode):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.kind is TimeKind.MINUTES:
            return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"
        return self.kind.name


@dataclass(frozen=True)
class TitleTime:
    """A time annotation found in an event title."""
    cleaned_title: str
    minute_of_day: int
