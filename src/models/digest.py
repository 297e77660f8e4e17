# File: src/models/digest.py
"""
Data models for digest output and delivery.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class DigestChunk:
    """One chat message worth of digest text."""
    body_text: str
    has_header: bool = False

    def to_payload(self, title: str, public_url: Optional[str] = None,
                   icon: str = ":calendar_spiral:") -> Dict[str, Any]:
        """
        Build the webhook payload for this chunk.

        Only the header chunk carries the embed title and URL.
        """
        embed: Dict[str, Any] = {"description": self.body_text}
        if self.has_header:
            embed["title"] = f"{icon} {title}"
            if public_url:
                embed["url"] = public_url

        # Content can be empty when there are embeds
        return {"content": "", "embeds": [embed]}


@dataclass
class DeliveryReport:
    """Outcome of posting a digest. Only ever logged, never raised."""
    attempted: int = 0
    delivered: int = 0
    failures: List[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def record_success(self) -> None:
        self.attempted += 1
        self.delivered += 1

    def record_failure(self, reason: str) -> None:
        self.attempted += 1
        self.failures.append(reason)

    def __str__(self) -> str:
        return f"{self.delivered}/{self.attempted} deliveries succeeded"
