# skuhook/services/notifier.py
from __future__ import annotations
from typing import Protocol

import requests

from ..config import Settings
from ..errors import NotificationFailure
from ..utils.logging import logger

class Notifier(Protocol):
    def notify(self, sku: str) -> None: ...

class LogNotifier:
    """Default side effect when no fulfillment backend is configured."""

    def notify(self, sku: str) -> None:
        logger.info("Found wanted sku: %s", sku)

class HttpFulfillmentNotifier:
    def __init__(self, url: str, shared_secret: str, timeout: float = 12.0):
        self.url = url
        self.timeout = timeout
        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "x-internal-auth": shared_secret,
            "User-Agent": "skuhook/1.0 (+requests)",
        }

    def notify(self, sku: str) -> None:
        """POST {"sku": sku} to the fulfillment backend.

        No retries: a failure fails the webhook request and the sender
        redelivers it.
        """
        try:
            r = requests.post(self.url, headers=self.headers, json={"sku": sku},
                              timeout=self.timeout, allow_redirects=False)
        except requests.RequestException as e:
            logger.error("Fulfillment notify for %s failed: %s", sku, e)
            raise NotificationFailure(f"Fulfillment backend unreachable: {e}", sku=sku) from e

        if 300 <= r.status_code < 400:
            loc = r.headers.get("Location", "")
            raise NotificationFailure(f"Unexpected redirect {r.status_code} to {loc} (POST {self.url})", sku=sku)
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            snippet = (r.text or "")[:1000]
            logger.error("Fulfillment notify HTTP %s\nURL: %s\nBody:\n%s", r.status_code, self.url, snippet)
            raise NotificationFailure(f"Fulfillment backend returned HTTP {r.status_code}", sku=sku) from e

        logger.info("Fulfillment notified for sku %s", sku)

def build_notifier(settings: Settings) -> Notifier:
    if settings.FULFILLMENT_URL:
        base = settings.FULFILLMENT_URL.strip()
        logger.info("Notifying fulfillment backend at %s", base)
        return HttpFulfillmentNotifier(
            base,
            settings.INTERNAL_SHARED_SECRET.get_secret_value(),
            timeout=settings.FULFILLMENT_TIMEOUT,
        )
    return LogNotifier()
