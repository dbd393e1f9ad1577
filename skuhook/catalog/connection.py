# skuhook/catalog/connection.py
from __future__ import annotations
from typing import Iterable, List, Protocol

from ..config import Settings
from ..utils.logging import logger

class CatalogConnection(Protocol):
    """Read access to the SKUs configured as wanted.

    Both calls raise CatalogUnavailable when the backend cannot be read.
    """

    def list(self) -> List[str]: ...

    def contains(self, sku: str) -> bool: ...

class CatalogDatabase(Protocol):
    def connect(self) -> CatalogConnection: ...

    def disconnect(self) -> None: ...

class MemCatalogConnection:
    def __init__(self, skus: Iterable[str]):
        # immutable snapshot, safe for any number of concurrent readers
        self._skus = tuple(skus)

    def list(self) -> List[str]:
        return list(self._skus)

    def contains(self, sku: str) -> bool:
        return sku in self._skus

class MemCatalogDatabase:
    def __init__(self, skus: Iterable[str]):
        self._skus = tuple(skus)

    def connect(self) -> MemCatalogConnection:
        return MemCatalogConnection(self._skus)

    def disconnect(self) -> None:
        return None

def build_catalog(settings: Settings) -> CatalogDatabase:
    if settings.CATALOG_BACKEND == "database":
        from .repository import SqlCatalogDatabase
        logger.info("Using database catalog")
        return SqlCatalogDatabase(settings.DATABASE_URL)
    logger.info("Using in-memory catalog with %d skus", len(settings.CATALOG_SKUS))
    return MemCatalogDatabase(settings.CATALOG_SKUS)
