"""Inventory Item ORM - one row per item in the `inventory` table.

Invariants:
    - id is externally assigned (no autoincrement) and never changes
    - warehouse is NULL for an unassigned item
    - dimensions are stored flattened as width/height/depth SMALLINT columns
"""

from sqlalchemy import Enum, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from warehouser.core.domain_types import Transport
from warehouser.db.base import Base

transport_enum = Enum(
    Transport,
    name="transport",
    values_callable=lambda cls: [member.value for member in cls],
)


class InventoryItemRow(Base):
    """Persisted inventory item."""
    __tablename__ = "inventory"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False,
    )
    warehouse: Mapped[int | None] = mapped_column(
        Integer, nullable=True, index=True,
    )
    weight: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    value: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    transport: Mapped[Transport] = mapped_column(transport_enum, nullable=False)
    width: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    height: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    depth: Mapped[int] = mapped_column(SmallInteger, nullable=False)
