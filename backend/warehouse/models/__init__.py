"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - One file per entity for locality
    - Imported by create_schema() and alembic env so metadata is complete
      before DDL runs
"""

from warehouse.models.inventory_item import InventoryItem  # noqa: F401
