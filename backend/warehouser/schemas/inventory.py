"""Inventory Schemas - Pydantic records for items and warehouses.

Invariants:
    - weight, value and every dimension fit a SMALLINT column
    - ids fit an INT column
    - Warehouse.items never contains the same id twice

Design Decisions:
    - One record type for request body, store boundary and response: the
      wire shape of an item is exactly its stored shape
    - Field names match the JSON contract (`warehouse`, `items`), no aliases
"""

from collections import Counter
from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from warehouser.core.domain_types import (
    Transport, SMALLINT_MIN, SMALLINT_MAX, INT_MIN, INT_MAX,
)

SmallInt = Annotated[int, Field(ge=SMALLINT_MIN, le=SMALLINT_MAX)]
RecordId = Annotated[int, Field(ge=INT_MIN, le=INT_MAX)]


class Dimensions(BaseModel):
    """Width, height and depth of an item in metres."""
    width: SmallInt
    height: SmallInt
    depth: SmallInt


class InventoryItem(BaseModel):
    """An inventory item, optionally held by one warehouse."""
    id: RecordId
    warehouse: RecordId | None = None
    weight: SmallInt
    value: SmallInt
    transport: Transport
    dimensions: Dimensions


class Warehouse(BaseModel):
    """A warehouse and the ordered ids of the items it holds."""
    id: RecordId
    items: list[RecordId] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def reject_duplicate_items(cls, v: list[int]) -> list[int]:
        repeated = sorted(i for i, n in Counter(v).items() if n > 1)
        if repeated:
            raise ValueError(f"items must not repeat an id (repeated: {repeated})")
        return v
