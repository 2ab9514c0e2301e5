"""Item Routes — CRUD, search and statistics over the inventory store.

Invariants:
    - Every response body is an envelope (core/envelope.py); errors are raised
      as InventoryError and enveloped by the global handlers
    - ID-bearing routes parse the identity themselves: non-integers and integers
      outside the store's 64-bit range → InvalidIdentifier
    - Write bodies pass validate_item before the gateway sees them
    - /stats and /categories are registered before /{item_id}

Design Decisions:
    - Gateway injected via get_gateway: routes only know the InventoryRepository
      protocol, tests can substitute it through dependency_overrides
    - PUT is a partial update: absent fields are left untouched, present fields are
      validated with the same rules as POST
"""

import logging
import re
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from warehouse.config import Settings, get_settings
from warehouse.core.domain_types import (
    ITEM_ID_MAX, ITEM_ID_MIN, STOCK_MAX, ItemFilter, ItemId,
)
from warehouse.core.envelope import Ok
from warehouse.core.errors import InvalidIdentifier, NotFound, ValidationFailed
from warehouse.core.inventory_stats import compute_inventory_stats
from warehouse.core.repository_protocols import InventoryRepository
from warehouse.core.validate_item import validate_item
from warehouse.infrastructure.database import get_db
from warehouse.schemas.item import serialize_record, serialize_records
from warehouse.services.inventory_gateway import SqlInventoryGateway

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/items", tags=["items"])

_ITEM_ID_PATTERN = re.compile(r"[+-]?[0-9]{1,19}")


def get_gateway(db: AsyncSession = Depends(get_db)) -> InventoryRepository:
    return SqlInventoryGateway(db)


def parse_item_id(raw: str) -> ItemId:
    """Parse the path identity or raise InvalidIdentifier."""
    candidate = raw.strip()
    if not _ITEM_ID_PATTERN.fullmatch(candidate):
        raise InvalidIdentifier(raw)
    value = int(candidate)
    if not ITEM_ID_MIN <= value <= ITEM_ID_MAX:
        raise InvalidIdentifier(raw)
    return ItemId(value)


async def get_item_or_404(gateway: InventoryRepository, item_id: ItemId):
    record = await gateway.get(item_id)
    if record is None:
        raise NotFound(item_id)
    return record


@router.get("")
async def list_items(
    search: str | None = Query(None),
    category: str | None = Query(None),
    gateway: InventoryRepository = Depends(get_gateway),
):
    """List items, optionally filtered by search text and exact category."""
    item_filter = ItemFilter(
        text=(search or "").strip() or None,
        category=(category or "").strip() or None,
    )
    records = await gateway.list_items(item_filter)
    return Ok(data=serialize_records(records)).to_response()


@router.get("/stats")
async def get_stats(
    threshold: int | None = Query(None, ge=0, le=STOCK_MAX),
    gateway: InventoryRepository = Depends(get_gateway),
    settings: Settings = Depends(get_settings),
):
    """Totals, categories and the low-stock list."""
    low_stock_threshold = (
        threshold if threshold is not None else settings.low_stock_threshold
    )
    total_items = await gateway.count()
    total_value = await gateway.total_value()
    categories = await gateway.list_categories()
    low_stock = await gateway.low_stock(low_stock_threshold)
    stats = compute_inventory_stats(
        total_items, total_value, categories, serialize_records(low_stock),
    )
    return Ok(data=stats).to_response()


@router.get("/categories")
async def list_categories(
    gateway: InventoryRepository = Depends(get_gateway),
):
    """Distinct categories currently in use, sorted."""
    return Ok(data=await gateway.list_categories()).to_response()


@router.get("/{item_id}")
async def get_item(
    item_id: str, gateway: InventoryRepository = Depends(get_gateway),
):
    """Get a single item."""
    record = await get_item_or_404(gateway, parse_item_id(item_id))
    return Ok(data=serialize_record(record)).to_response()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    body: dict[str, Any] = Body(...),
    gateway: InventoryRepository = Depends(get_gateway),
):
    """Create a new item."""
    result = validate_item(body)
    if not result.is_valid:
        raise ValidationFailed(result.errors)
    record = await gateway.insert(result.values)
    return Ok(
        data=serialize_record(record), message="Item created successfully",
    ).to_response()


@router.put("/{item_id}")
async def update_item(
    item_id: str,
    body: dict[str, Any] = Body(...),
    gateway: InventoryRepository = Depends(get_gateway),
):
    """Partially update an item. Only supplied fields change."""
    parsed_id = parse_item_id(item_id)
    result = validate_item(body, partial=True)
    if not result.is_valid:
        raise ValidationFailed(result.errors)

    existing = await get_item_or_404(gateway, parsed_id)
    if not result.values:
        return Ok(
            data=serialize_record(existing), message="No changes applied",
        ).to_response()

    if not await gateway.update(parsed_id, result.values):
        raise NotFound(parsed_id)
    record = await get_item_or_404(gateway, parsed_id)
    return Ok(
        data=serialize_record(record), message="Item updated successfully",
    ).to_response()


@router.delete("/{item_id}")
async def delete_item(
    item_id: str, gateway: InventoryRepository = Depends(get_gateway),
):
    """Hard-delete an item."""
    parsed_id = parse_item_id(item_id)
    await get_item_or_404(gateway, parsed_id)
    if not await gateway.delete(parsed_id):
        raise NotFound(parsed_id)
    return Ok(message="Item deleted successfully").to_response()
