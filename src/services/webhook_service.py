# File: src/services/webhook_service.py
"""
Posts digest chunks to Discord webhooks.

Delivery is fire-and-forget: a failed POST is logged and the remaining
targets and chunks are still sent. Nothing is retried.
"""

import json
from typing import Any, Dict, Optional, Sequence

import requests

from src.core.config_manager import Config
from src.models.digest import DeliveryReport, DigestChunk
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def _mask_url(url: str) -> str:
    """Webhook URLs are credentials; only log the start of them."""
    return url[:40] + "..." if len(url) > 40 else url


class DigestPublisher:
    """Sends digest chunks to every configured webhook, in chunk order."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = Config.DEFAULT_WEBHOOK_TIMEOUT,
        dry_run: bool = False
    ):
        """
        Initialize the publisher.

        Args:
            session: HTTP session to post with, a new one if omitted
            timeout: Per-request timeout in seconds
            dry_run: Log payloads instead of posting them
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self.dry_run = dry_run

    def publish(
        self,
        chunks: Sequence[DigestChunk],
        title: str,
        public_url: Optional[str],
        webhooks: Sequence[str]
    ) -> DeliveryReport:
        """
        Post each chunk to each webhook.

        Chunks go out in order, so every channel sees chunk 1 before chunk 2.

        Args:
            chunks: Digest chunks from DigestBuilder
            title: Digest title shown on the header chunk
            public_url: Optional link for the header chunk's title
            webhooks: Webhook URLs to post to

        Returns:
            DeliveryReport, for logging only
        """
        report = DeliveryReport()
        logger.info(f"Publishing {len(chunks)} chunk(s) to {len(webhooks)} webhook(s)")

        for index, chunk in enumerate(chunks, start=1):
            payload = chunk.to_payload(title, public_url, icon=Config.TITLE_ICON)
            for url in webhooks:
                if self._post(url, payload):
                    report.record_success()
                else:
                    report.record_failure(f"chunk {index} -> {_mask_url(url)}")

        if report.failed:
            logger.warning(f"Delivery finished with failures: {report}")
        else:
            logger.info(f"Delivery finished: {report}")
        return report

    def _post(self, url: str, payload: Dict[str, Any]) -> bool:
        """POST one payload. Returns False on any failure instead of raising."""
        if self.dry_run:
            logger.info(f"[dry run] Would post to {_mask_url(url)}:\n{json.dumps(payload, indent=2)}")
            return True

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "?"
            logger.error(f"Webhook {_mask_url(url)} rejected the digest (HTTP {status})")
            return False
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to post digest to {_mask_url(url)}: {e}")
            return False

        logger.debug(f"Posted {len(payload['embeds'][0]['description'])} chars to {_mask_url(url)}")
        return True
