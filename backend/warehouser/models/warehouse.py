"""Warehouse ORM - one row per warehouse in the `warehouses` table.

Invariants:
    - id is externally assigned (no autoincrement)
    - items is an ordered JSON list of item ids, insertion order preserved

Design Decisions:
    - JSON column over a Postgres ARRAY: same schema on PostgreSQL and the
      SQLite test database
    - items is always reassigned as a new list, never mutated in place
      (plain JSON columns do not track in-place changes)
"""

from sqlalchemy import JSON, Integer
from sqlalchemy.orm import Mapped, mapped_column

from warehouser.db.base import Base


class WarehouseRow(Base):
    """Persisted warehouse."""
    __tablename__ = "warehouses"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    items: Mapped[list[int]] = mapped_column(
        JSON, nullable=False, default=list,
    )
