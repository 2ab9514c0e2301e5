"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId wraps the store-assigned integer identity — never reassigned
    - InventoryRecord is immutable; updates produce a new record from the store
    - Field limits live here and nowhere else (validator and ORM both import them)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for writable fields: serialize to JSON keys without custom encoders
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ItemId = NewType("ItemId", int)

# SQLite INTEGER is a signed 64-bit value
ITEM_ID_MIN = -(2 ** 63)
ITEM_ID_MAX = 2 ** 63 - 1


# ─── Field Limits ────────────────────────────────────────────────

NAME_MAX_LENGTH = 100
CATEGORY_MAX_LENGTH = 50
PRICE_MAX = 1_000_000
STOCK_MAX = 1_000_000
DEFAULT_LOW_STOCK_THRESHOLD = 10


# ─── Enums ───────────────────────────────────────────────────────

class ItemField(str, Enum):
    """Client-writable record fields, in validation order."""
    NAME = "name"
    CATEGORY = "category"
    PRICE = "price"
    STOCK = "stock"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class InventoryRecord:
    """One stored inventory row, marshalled out of the ORM."""
    id: ItemId
    name: str
    category: str
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ItemFilter:
    """List filter — text matches name OR category, category is exact; AND-combined."""
    text: str | None = None
    category: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.text and not self.category
