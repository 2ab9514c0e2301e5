"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return envelope-shaped JSON responses

Design Decisions:
    - Thin routes delegate to core (validation, stats) and services (gateway)
"""
