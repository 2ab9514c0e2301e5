"""Inventory Stats — pure assembly of the dashboard statistics payload.

Invariants:
    - No IO, no DB: all inputs are already-fetched aggregates
    - totalValue is rounded to 2 decimals; lowStockCount == len(lowStockItems)
    - Keys use the camelCase names the UI dashboard consumes

Design Decisions:
    - Pure function, not a gateway method (ADR: gateway fetches, core presents)
"""

from typing import Any


def compute_inventory_stats(
    total_items: int,
    total_value: float,
    categories: list[str],
    low_stock_items: list[Any],
) -> dict:
    """Build the stats payload from gateway aggregates. Pure, no IO."""
    return {
        "totalItems": total_items,
        "totalValue": round(float(total_value or 0), 2),
        "categories": list(categories),
        "lowStockCount": len(low_stock_items),
        "lowStockItems": list(low_stock_items),
    }
