"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Error kinds are mapped to HTTP status codes here and nowhere else

Design Decisions:
    - Thin routes delegate to InventoryService (ADR: impureim sandwich)
"""
