"""InventoryItem ORM — the single persisted table of the warehouse.

Invariants:
    - id is INTEGER PRIMARY KEY AUTOINCREMENT (SQLite never reuses a removed id)
    - price and stock guarded by CHECK >= 0 (store-level defense behind the validator)
    - created_at/updated_at default to now; updated_at is refreshed by the gateway

Design Decisions:
    - Numeric(asdecimal=False): exact column type in the DDL, plain float on read
      so SQLite does not warn about Decimal emulation
    - Named indexes on name/category: support the search and category filters
"""

from datetime import datetime, timezone

from sqlalchemy import (
    CheckConstraint, DateTime, Index, Integer, Numeric, String, func,
)
from sqlalchemy.orm import Mapped, mapped_column

from warehouse.core.domain_types import CATEGORY_MAX_LENGTH, NAME_MAX_LENGTH
from warehouse.db.base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InventoryItem(Base):
    """One stock-keeping record."""
    __tablename__ = "inventory"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_inventory_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_inventory_stock_non_negative"),
        Index("idx_inventory_name", "name"),
        Index("idx_inventory_category", "category"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    category: Mapped[str] = mapped_column(String(CATEGORY_MAX_LENGTH), nullable=False)
    price: Mapped[float] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=False,
    )
    stock: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
