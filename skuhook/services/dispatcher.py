# skuhook/services/dispatcher.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..catalog.connection import CatalogConnection
from ..errors import NotificationFailure, WebhookError
from ..utils.logging import logger
from .notifier import Notifier

@dataclass
class DispatchResult:
    matched: List[str] = field(default_factory=list)  # one entry per matching line item, input order
    checked: int = 0  # line items that carried a sku

    @property
    def found(self) -> bool:
        return bool(self.matched)

def dispatch_line_items(
    skus: Iterable[Optional[str]],
    catalog: CatalogConnection,
    notifier: Notifier,
    stop_on_first_match: bool = False,
) -> DispatchResult:
    """
    Notify once per line item whose sku is in the catalog.
    - The catalog is read once per call; CatalogUnavailable propagates before any notification.
    - Line items without a sku (None) are skipped.
    - Any notifier error surfaces as NotificationFailure; earlier notifications stay sent.
    - stop_on_first_match keeps the legacy behaviour of ending at the first hit.
    """
    wanted = set(catalog.list())
    result = DispatchResult()

    for sku in skus:
        if sku is None:
            continue
        result.checked += 1
        if sku not in wanted:
            continue
        try:
            notifier.notify(sku)
        except WebhookError:
            raise
        except Exception as e:
            logger.exception("Notifier failed for sku %s", sku)
            raise NotificationFailure(f"Notifier failed for sku {sku}: {e}", sku=sku) from e
        result.matched.append(sku)
        if stop_on_first_match:
            break

    logger.info("Dispatched %d line items, %d matched", result.checked, len(result.matched))
    return result

class LineItemDispatcher:
    def __init__(self, catalog: CatalogConnection, notifier: Notifier, stop_on_first_match: bool = False):
        self.catalog = catalog
        self.notifier = notifier
        self.stop_on_first_match = stop_on_first_match

    def dispatch(self, skus: Iterable[Optional[str]]) -> DispatchResult:
        return dispatch_line_items(skus, self.catalog, self.notifier, self.stop_on_first_match)
