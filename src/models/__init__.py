from .common import parse_iso_datetime, parse_color_hex
from .time_code import TimeKind, TimeCode, TitleTime, MINUTES_PER_DAY
from .calendar import RawEvent, ResolvedEvent
from .digest import DigestChunk, DeliveryReport
from .config import DigestConfig

__all__ = [
    "parse_iso_datetime",
    "parse_color_hex",
    "TimeKind",
    "TimeCode",
    "TitleTime",
    "MINUTES_PER_DAY",
    "RawEvent",
    "ResolvedEvent",
    "DigestChunk",
    "DeliveryReport",
    "DigestConfig"
]
