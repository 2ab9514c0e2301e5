"""Infrastructure Layer — store handle, logging and other cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Store failures mapped to typed errors (core/errors.py)
"""
