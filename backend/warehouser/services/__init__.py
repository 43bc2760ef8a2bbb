"""Services Layer - orchestrates core rules over the record store.

Invariants:
    - Services own the transaction boundary; routes never commit
"""
