"""API Catalogue — human-readable list of endpoints and query parameters.

Invariants:
    - Static content; kept in sync with items.py and health.py by hand
"""

from fastapi import APIRouter

from warehouse.core.envelope import Ok

router = APIRouter(tags=["docs"])

ENDPOINTS = {
    "GET /api/items": "Get all inventory items",
    "GET /api/items/:id": "Get single item",
    "POST /api/items": "Create new item",
    "PUT /api/items/:id": "Update item",
    "DELETE /api/items/:id": "Delete item",
    "GET /api/items/stats": "Get inventory statistics",
    "GET /api/items/categories": "Get all categories",
    "GET /health": "Health check",
    "GET /health/ready": "Readiness check",
}

QUERY_PARAMETERS = {
    "search": "Search items by name or category",
    "category": "Filter by category",
    "threshold": "Low-stock threshold for /api/items/stats",
}


@router.get("/api-docs")
async def api_docs():
    return Ok(data={
        "endpoints": ENDPOINTS,
        "queryParameters": QUERY_PARAMETERS,
    }).to_response()
