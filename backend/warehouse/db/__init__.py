"""Database Metadata — the SQLAlchemy declarative Base shared by every model.

Invariants:
    - Engines and sessions live in infrastructure/database.py, not here
"""
