"""Pydantic Schemas - request/response validation and the records exchanged with the store.

Invariants:
    - Schemas validate at system boundary (request bodies, store rows)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
