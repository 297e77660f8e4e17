# File: src/models/common

import re
from datetime import datetime
from typing import Optional

_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{6})$")


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets."""
    if not date_str:
        return None
    try:
        # specific fix for Python < 3.11 which doesn't handle 'Z' natively in fromisoformat
        clean_str = date_str.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(date_str, "%Y-%m-%d")
        except ValueError:
            return None


def parse_color_hex(color: Optional[str]) -> int:
    """Turn '#RRGGBB' (or 'RRGGBB') into an int; anything else is black."""
    if not color:
        return 0
    match = _HEX_COLOR.match(color.strip())
    if not match:
        return 0
    return int(match.group(1), 16)
