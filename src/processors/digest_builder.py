# File: src/processors/digest_builder.py
"""
Digest building for the calendar poster.
Sorts resolved events and packs their text into message-sized chunks.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Iterable, List, Tuple

from src.core.config_manager import Config
from src.models.calendar import ResolvedEvent
from src.models.digest import DigestChunk
from src.processors.event_formatter import format_event
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class _PackState:
    """Accumulator for packing: bodies sealed so far plus the open body."""
    sealed: Tuple[str, ...] = ()
    current: str = ""


def sort_events(events: Iterable[ResolvedEvent]) -> List[ResolvedEvent]:
    """Order by time code (continued, all-day, then clock time), then title."""
    return sorted(events, key=lambda e: e.sort_key())


class DigestBuilder:
    """Builds the ordered list of digest chunks for one run."""

    def __init__(
        self,
        max_chunk_chars: int = Config.MAX_CHUNK_CHARS,
        max_event_chars: int = Config.MAX_EVENT_CHARS,
        header_text: str = Config.HEADER_TEXT,
        no_events_text: str = Config.NO_EVENTS_TEXT
    ):
        self.max_chunk_chars = max_chunk_chars
        self.max_event_chars = max_event_chars
        self.header_text = header_text
        self.no_events_text = no_events_text

    def build(self, events: Iterable[ResolvedEvent]) -> Tuple[DigestChunk, ...]:
        """
        Sort events and pack their formatted text into chunks.

        Args:
            events: Resolved events for the day, in any order

        Returns:
            Chunks in posting order. The first chunk, and only the first,
            has has_header set. Never empty.
        """
        ordered = sort_events(events)

        if not ordered:
            logger.info("No events found, building placeholder digest")
            return (DigestChunk(self.no_events_text, has_header=True),)

        blocks = [format_event(event, self.max_event_chars) for event in ordered]

        initial = _PackState(current=f"{self.header_text}\n\n")
        final = self._seal(reduce(self._pack, blocks, initial))

        chunks = tuple(
            DigestChunk(body, has_header=(index == 0))
            for index, body in enumerate(final.sealed)
        )

        logger.info(f"Packed {len(ordered)} events into {len(chunks)} chunk(s)")
        return chunks

    def _pack(self, state: _PackState, block: str) -> _PackState:
        """Add one event block, sealing the open body first if it would overflow."""
        if len(state.current) + len(block) > self.max_chunk_chars:
            state = self._seal(state)
        return _PackState(state.sealed, state.current + block + "\n")

    def _seal(self, state: _PackState) -> _PackState:
        """Close the open body. Blank bodies are dropped, oversized ones cut."""
        body = state.current.strip()
        if not body:
            return _PackState(state.sealed, "")

        if len(body) > self.max_chunk_chars:
            logger.warning(
                f"Chunk of {len(body)} chars exceeds {self.max_chunk_chars}, truncating"
            )
            body = body[:self.max_chunk_chars]

        return _PackState(state.sealed + (body,), "")
