"""Boundary Protocols — contract between the HTTP shell and the record store.

Invariants:
    - Routes depend on InventoryRepository, never on a concrete store class
    - One explicit method per operation: no dynamic dispatch on operation names
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the pure validator and stats
      builder never are
"""

from typing import Any, Protocol

from warehouse.core.domain_types import (
    DEFAULT_LOW_STOCK_THRESHOLD, InventoryRecord, ItemFilter, ItemId,
)


class InventoryRepository(Protocol):
    """Contract for inventory persistence — implemented by shell."""
    async def list_items(self, item_filter: ItemFilter | None = None) -> list[InventoryRecord]: ...
    async def get(self, item_id: ItemId) -> InventoryRecord | None: ...
    async def insert(self, values: dict[str, Any]) -> InventoryRecord: ...
    async def update(self, item_id: ItemId, fields: dict[str, Any]) -> bool: ...
    async def delete(self, item_id: ItemId) -> bool: ...
    async def count(self) -> int: ...
    async def list_categories(self) -> list[str]: ...
    async def total_value(self) -> float: ...
    async def low_stock(
        self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> list[InventoryRecord]: ...
