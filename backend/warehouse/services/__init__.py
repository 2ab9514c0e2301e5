"""Services Layer — IO-bound implementations of core protocols.

Invariants:
    - Services own AsyncSession usage; core never sees a session
"""
