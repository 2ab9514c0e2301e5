"""Inventory Gateway — typed CRUD intents translated into parameterized SQL.

Invariants:
    - Every statement is a SQLAlchemy expression: values travel as bound parameters,
      never interpolated into SQL text (search text LIKE-escaped as well)
    - list() orders by updated_at DESC, created_at DESC, id DESC
    - insert() stamps created_at == updated_at; update() always refreshes updated_at
    - update() with no fields is a no-op returning False (store not touched)
    - CHECK rejections surface as ConstraintViolation after a rollback
    - Rows leave this module as InventoryRecord, never as ORM instances

Design Decisions:
    - Handler class bound to one AsyncSession: explicit dependencies, no globals
    - Core update()/delete() with rowcount instead of load-then-mutate: one round trip,
      and "was a row affected" is exactly what callers need
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator

from sqlalchemy import Select, delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.core.domain_types import (
    DEFAULT_LOW_STOCK_THRESHOLD, InventoryRecord, ItemField, ItemFilter, ItemId,
)
from warehouse.core.errors import ConstraintViolation, ErrorContext
from warehouse.models.inventory_item import InventoryItem, utcnow

logger = logging.getLogger(__name__)

_WRITABLE = frozenset(f.value for f in ItemField)


class SqlInventoryGateway:
    """InventoryRepository backed by the relational store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_items(self, item_filter: ItemFilter | None = None) -> list[InventoryRecord]:
        """All records matching the filter, most recently touched first."""
        query = select(InventoryItem)
        if item_filter and not item_filter.is_empty:
            query = _apply_filter(query, item_filter)
        query = query.order_by(
            InventoryItem.updated_at.desc(),
            InventoryItem.created_at.desc(),
            InventoryItem.id.desc(),
        )
        result = await self.db.execute(query)
        return [_to_record(row) for row in result.scalars().all()]

    async def get(self, item_id: ItemId) -> InventoryRecord | None:
        result = await self.db.execute(
            select(InventoryItem).where(InventoryItem.id == item_id),
        )
        item = result.scalar_one_or_none()
        return _to_record(item) if item else None

    async def insert(self, values: dict[str, Any]) -> InventoryRecord:
        """Store a new record; identity and timestamps are assigned here."""
        now = utcnow()
        item = InventoryItem(
            name=values["name"],
            category=values["category"],
            price=values["price"],
            stock=values["stock"],
            created_at=now,
            updated_at=now,
        )
        async with self._constraint_guard("insert"):
            self.db.add(item)
            await self.db.commit()
        await self.db.refresh(item)
        logger.info(f"Inventory item {item.id} created", extra={"item_id": item.id})
        return _to_record(item)

    async def update(self, item_id: ItemId, fields: dict[str, Any]) -> bool:
        """Apply only the supplied fields. Returns whether a row was affected."""
        changes = {k: v for k, v in fields.items() if k in _WRITABLE}
        if not changes:
            return False
        changes["updated_at"] = utcnow()
        async with self._constraint_guard("update", item_id):
            result = await self.db.execute(
                update(InventoryItem)
                .where(InventoryItem.id == item_id)
                .values(**changes)
                .execution_options(synchronize_session=False),
            )
            await self.db.commit()
        updated = result.rowcount > 0
        if updated:
            logger.info(f"Inventory item {item_id} updated", extra={"item_id": item_id})
        return updated

    async def delete(self, item_id: ItemId) -> bool:
        result = await self.db.execute(
            delete(InventoryItem)
            .where(InventoryItem.id == item_id)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Inventory item {item_id} deleted", extra={"item_id": item_id})
        return deleted

    async def count(self) -> int:
        result = await self.db.execute(select(func.count(InventoryItem.id)))
        return int(result.scalar_one())

    async def list_categories(self) -> list[str]:
        result = await self.db.execute(
            select(InventoryItem.category).distinct().order_by(InventoryItem.category),
        )
        return list(result.scalars().all())

    async def total_value(self) -> float:
        """Sum of price × stock over all records, rounded to cents."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(InventoryItem.price * InventoryItem.stock), 0)),
        )
        return round(float(result.scalar_one()), 2)

    async def low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> list[InventoryRecord]:
        """Records at or below the reorder threshold, emptiest first."""
        result = await self.db.execute(
            select(InventoryItem)
            .where(InventoryItem.stock <= threshold)
            .order_by(InventoryItem.stock.asc(), InventoryItem.name.asc()),
        )
        return [_to_record(row) for row in result.scalars().all()]

    @asynccontextmanager
    async def _constraint_guard(
        self, operation: str, item_id: ItemId | None = None,
    ) -> AsyncIterator[None]:
        """Translate CHECK/NOT NULL rejections raised inside the block."""
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(
                f"Store rejected {operation}: {e.orig}",
                extra={"item_id": item_id, "error_code": "CONSTRAINT_VIOLATION"},
            )
            raise ConstraintViolation(
                str(e.orig), operation, ErrorContext(item_id=item_id),
            ) from e


def _to_record(item: InventoryItem) -> InventoryRecord:
    return InventoryRecord(
        id=ItemId(item.id),
        name=item.name,
        category=item.category,
        price=float(item.price),
        stock=int(item.stock),
        created_at=_as_utc(item.created_at),
        updated_at=_as_utc(item.updated_at),
    )


def _as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _apply_filter(query: Select, item_filter: ItemFilter) -> Select:
    if item_filter.text:
        term = item_filter.text.lower()
        query = query.where(or_(
            func.lower(InventoryItem.name).contains(term, autoescape=True),
            func.lower(InventoryItem.category).contains(term, autoescape=True),
        ))
    if item_filter.category:
        query = query.where(InventoryItem.category == item_filter.category)
    return query
