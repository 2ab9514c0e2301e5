"""Item Schemas — wire shape of inventory records.

Invariants:
    - ItemResponse mirrors InventoryRecord field-for-field
    - Timestamps serialize as ISO-8601 strings (mode="json")

Design Decisions:
    - from_attributes=True: validates straight from the frozen dataclass the
      gateway returns, no intermediate dict
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from warehouse.core.domain_types import InventoryRecord


class ItemResponse(BaseModel):
    """Item response — public-facing record data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    price: float
    stock: int
    created_at: datetime
    updated_at: datetime


def serialize_record(record: InventoryRecord) -> dict:
    return ItemResponse.model_validate(record).model_dump(mode="json")


def serialize_records(records: list[InventoryRecord]) -> list[dict]:
    return [serialize_record(r) for r in records]
