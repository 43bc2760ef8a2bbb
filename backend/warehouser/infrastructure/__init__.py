"""Infrastructure Layer - database access, record store and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy failures are mapped to core errors before leaving this layer
"""
