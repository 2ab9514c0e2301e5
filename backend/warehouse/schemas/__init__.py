"""Pydantic Schemas — response serialization for API endpoints.

Invariants:
    - Schemas shape data at the system boundary only
    - Write bodies are checked by core/validate_item.py, not by schema constraints

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
