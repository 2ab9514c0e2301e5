"""Inventory Gateway — verifies CRUD, filtering, ordering and aggregates on SQLite.

Invariants:
    - insert assigns id and equal created/updated timestamps
    - update touches only supplied fields plus updated_at; missing id → False
    - list orders by updated desc, then created desc
    - text filter is case-insensitive on name OR category, wildcards are literal
    - CHECK constraints surface as ConstraintViolation and leave the session usable
"""

import pytest

from warehouse.core.domain_types import ItemFilter
from warehouse.core.errors import ConstraintViolation


async def test_insert_assigns_identity_and_timestamps(gateway, pen):
    record = await gateway.insert(pen)
    assert record.id >= 1
    assert record.created_at == record.updated_at

    fetched = await gateway.get(record.id)
    assert fetched == record
    assert (fetched.name, fetched.category, fetched.price, fetched.stock) == (
        "Pen", "Stationery", 5.0, 100,
    )


async def test_get_missing_returns_none(gateway):
    assert await gateway.get(999) is None


async def test_identity_not_reused_after_delete(gateway, pen, book):
    first = await gateway.insert(pen)
    await gateway.delete(first.id)
    second = await gateway.insert(book)
    assert second.id > first.id


async def test_list_without_filter_orders_most_recent_first(gateway, pen, book):
    older = await gateway.insert(pen)
    newer = await gateway.insert(book)

    records = await gateway.list_items()
    assert [r.id for r in records] == [newer.id, older.id]

    await gateway.update(older.id, {"stock": 99})
    records = await gateway.list_items()
    assert [r.id for r in records] == [older.id, newer.id]


async def test_list_text_filter_matches_name_or_category_case_insensitive(gateway):
    mouse = await gateway.insert(
        {"name": "Wireless Mouse", "category": "Electronics", "price": 29.99, "stock": 42},
    )
    pad = await gateway.insert(
        {"name": "Gel Pad", "category": "Mouse Accessories", "price": 9.5, "stock": 12},
    )
    await gateway.insert(
        {"name": "Desk Lamp", "category": "Furniture", "price": 24.99, "stock": 23},
    )

    records = await gateway.list_items(ItemFilter(text="mOuSe"))
    assert {r.id for r in records} == {mouse.id, pad.id}


async def test_list_category_filter_is_exact(gateway):
    await gateway.insert({"name": "Chair", "category": "Furniture", "price": 349.99, "stock": 15})
    await gateway.insert({"name": "Stool", "category": "Furniture Parts", "price": 10, "stock": 3})

    records = await gateway.list_items(ItemFilter(category="Furniture"))
    assert [r.name for r in records] == ["Chair"]


async def test_list_filters_combine_with_and(gateway):
    await gateway.insert({"name": "USB Mouse", "category": "Electronics", "price": 15, "stock": 5})
    await gateway.insert({"name": "Mouse Mat", "category": "Office", "price": 4, "stock": 50})

    records = await gateway.list_items(ItemFilter(text="mouse", category="Office"))
    assert [r.name for r in records] == ["Mouse Mat"]


async def test_list_text_filter_escapes_like_wildcards(gateway):
    await gateway.insert({"name": "100% Cotton Shirt", "category": "Clothing", "price": 20, "stock": 4})
    await gateway.insert({"name": "1000 Thread Sheet", "category": "Home", "price": 80, "stock": 2})

    records = await gateway.list_items(ItemFilter(text="0%"))
    assert [r.name for r in records] == ["100% Cotton Shirt"]


async def test_update_changes_only_supplied_fields(gateway, pen):
    before = await gateway.insert(pen)

    assert await gateway.update(before.id, {"stock": 5}) is True

    after = await gateway.get(before.id)
    assert after.stock == 5
    assert (after.name, after.category, after.price) == (before.name, before.category, before.price)
    assert after.created_at == before.created_at
    assert after.updated_at >= before.updated_at
    assert after.updated_at >= after.created_at


async def test_update_ignores_non_writable_keys(gateway, pen):
    record = await gateway.insert(pen)
    assert await gateway.update(record.id, {"id": 500, "name": "Blue Pen"}) is True
    assert (await gateway.get(record.id)).name == "Blue Pen"
    assert await gateway.get(500) is None


async def test_update_missing_id_returns_false(gateway):
    assert await gateway.update(12345, {"stock": 1}) is False


async def test_update_with_no_fields_is_noop(gateway, pen):
    record = await gateway.insert(pen)
    assert await gateway.update(record.id, {}) is False
    assert (await gateway.get(record.id)).updated_at == record.updated_at


async def test_delete_then_get_is_not_found(gateway, pen):
    record = await gateway.insert(pen)
    assert await gateway.delete(record.id) is True
    assert await gateway.get(record.id) is None
    assert await gateway.delete(record.id) is False


async def test_insert_negative_price_raises_constraint_violation(gateway):
    with pytest.raises(ConstraintViolation) as excinfo:
        await gateway.insert({"name": "Bad", "category": "X", "price": -1, "stock": 1})
    assert excinfo.value.operation == "insert"
    assert await gateway.count() == 0


async def test_update_negative_stock_raises_constraint_violation(gateway, pen):
    record = await gateway.insert(pen)
    with pytest.raises(ConstraintViolation):
        await gateway.update(record.id, {"stock": -4})
    assert (await gateway.get(record.id)).stock == 100


async def test_list_categories_sorted_distinct(gateway):
    for name, category in [("a", "Kitchen"), ("b", "Books"), ("c", "Kitchen"), ("d", "Electronics")]:
        await gateway.insert({"name": name, "category": category, "price": 1, "stock": 1})
    assert await gateway.list_categories() == ["Books", "Electronics", "Kitchen"]


async def test_total_value_empty_is_zero(gateway):
    assert await gateway.total_value() == 0


async def test_total_value_and_low_stock_for_pen_and_book(gateway, pen, book):
    await gateway.insert(pen)
    book_record = await gateway.insert(book)

    assert await gateway.total_value() == 540
    low = await gateway.low_stock(threshold=10)
    assert [r.id for r in low] == [book_record.id]


async def test_total_value_matches_manual_sum(gateway):
    fixtures = [
        ("MacBook Pro 16\"", "Electronics", 2499.99, 8),
        ("Ergonomic Office Chair", "Furniture", 349.99, 15),
        ("Sticky Notes", "Stationery", 5.99, 67),
        ("Water Bottle", "Kitchen", 18.99, 27),
    ]
    for name, category, price, stock in fixtures:
        await gateway.insert({"name": name, "category": category, "price": price, "stock": stock})
    expected = round(sum(price * stock for _, _, price, stock in fixtures), 2)
    assert await gateway.total_value() == expected


async def test_low_stock_includes_threshold_and_orders_emptiest_first(gateway):
    await gateway.insert({"name": "Ten", "category": "X", "price": 1, "stock": 10})
    await gateway.insert({"name": "Zero", "category": "X", "price": 1, "stock": 0})
    await gateway.insert({"name": "Eleven", "category": "X", "price": 1, "stock": 11})

    assert [r.name for r in await gateway.low_stock()] == ["Zero", "Ten"]
    assert [r.name for r in await gateway.low_stock(threshold=0)] == ["Zero"]


async def test_count(gateway, pen, book):
    assert await gateway.count() == 0
    await gateway.insert(pen)
    await gateway.insert(book)
    assert await gateway.count() == 2
