# skuhook/catalog/repository.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..database import create_db_engine, make_sessionmaker
from ..errors import CatalogUnavailable
from ..models import WantedSku
from ..utils.logging import logger

class SqlCatalogConnection:
    def __init__(self, SessionLocal: sessionmaker):
        self._SessionLocal = SessionLocal

    def list(self) -> List[str]:
        try:
            with self._SessionLocal() as db:
                return list(db.execute(select(WantedSku.sku).order_by(WantedSku.id)).scalars().all())
        except SQLAlchemyError as e:
            logger.error("Catalog read failed: %s", e)
            raise CatalogUnavailable("Catalog backend unavailable") from e

    def contains(self, sku: str) -> bool:
        try:
            with self._SessionLocal() as db:
                row = db.execute(select(WantedSku.id).where(WantedSku.sku == sku).limit(1)).first()
                return row is not None
        except SQLAlchemyError as e:
            logger.error("Catalog lookup for %s failed: %s", sku, e)
            raise CatalogUnavailable("Catalog backend unavailable") from e

class SqlCatalogDatabase:
    def __init__(self, url: str):
        self.url = url
        self._engine: Optional[Engine] = None

    def connect(self) -> SqlCatalogConnection:
        if self._engine is None:
            self._engine = create_db_engine(self.url)  # lazy: no connection until the first read
        return SqlCatalogConnection(make_sessionmaker(self._engine))

    def disconnect(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
