from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer, DateTime, func
from .database import Base

# ----------------------------
# Catalog of wanted SKUs
# ----------------------------
class WantedSku(Base):
    __tablename__ = "wanted_skus"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sku: Mapped[str] = mapped_column(String(128), nullable=False, index=True)  # not unique: duplicates are harmless
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())
