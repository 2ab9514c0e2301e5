"""
Seed the inventory table with demo items when it is empty.

Run locally:
  warehouse-seed            (or: python -m warehouse.scripts.seed_inventory)

It uses the same DB_FILE / DATABASE_URL env vars as the API. Existing rows are
never touched: if the table already holds anything, nothing is inserted.
"""

import asyncio
import logging
from dataclasses import asdict, dataclass

from warehouse.config import get_settings
from warehouse.core.validate_item import validate_item
from warehouse.infrastructure.database import DatabaseSessionManager
from warehouse.infrastructure.observability import setup_logging
from warehouse.services.inventory_gateway import SqlInventoryGateway

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedItem:
    name: str
    category: str
    price: float
    stock: int


SEED_ITEMS: list[SeedItem] = [
    SeedItem(name='MacBook Pro 16"', category="Electronics", price=2499.99, stock=8),
    SeedItem(name="Ergonomic Office Chair", category="Furniture", price=349.99, stock=15),
    SeedItem(name="Wireless Mouse", category="Electronics", price=29.99, stock=42),
    SeedItem(name="Desk Lamp", category="Furniture", price=24.99, stock=23),
    SeedItem(name="Sticky Notes", category="Stationery", price=5.99, stock=67),
    SeedItem(name="Coffee Mug", category="Kitchen", price=12.99, stock=89),
    SeedItem(name="External SSD 1TB", category="Electronics", price=129.99, stock=18),
    SeedItem(name="Desk Organizer", category="Furniture", price=19.99, stock=31),
    SeedItem(name="Ballpoint Pens (Pack of 12)", category="Stationery", price=8.49, stock=54),
    SeedItem(name="Water Bottle", category="Kitchen", price=18.99, stock=27),
]


async def seed_if_empty(gateway: SqlInventoryGateway, items: list[SeedItem] = SEED_ITEMS) -> int:
    """Insert items only when the table is empty. Returns how many were inserted."""
    existing = await gateway.count()
    if existing:
        logger.info(f"Inventory already holds {existing} items, skipping seed")
        return 0
    rows = []
    for item in items:
        result = validate_item(asdict(item))
        if not result.is_valid:
            raise ValueError(f"Invalid seed item {item.name!r}: {result.errors}")
        rows.append(result.values)
    # Every row is checked before the first insert commits
    for values in rows:
        await gateway.insert(values)
    logger.info(f"Seeded {len(items)} initial items")
    return len(items)


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    async with DatabaseSessionManager(settings.sqlalchemy_url) as manager:
        async with manager.session() as db:
            await seed_if_empty(SqlInventoryGateway(db))


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
