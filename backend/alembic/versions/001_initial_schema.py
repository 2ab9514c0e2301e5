"""Initial schema — inventory table with non-negative checks and search indexes.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("category", sa.String(50), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("stock", sa.Integer, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("price >= 0", name="ck_inventory_price_non_negative"),
        sa.CheckConstraint("stock >= 0", name="ck_inventory_stock_non_negative"),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_inventory_name", "inventory", ["name"])
    op.create_index("idx_inventory_category", "inventory", ["category"])


def downgrade() -> None:
    op.drop_index("idx_inventory_category", table_name="inventory")
    op.drop_index("idx_inventory_name", table_name="inventory")
    op.drop_table("inventory")
