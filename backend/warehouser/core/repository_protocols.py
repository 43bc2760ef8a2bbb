"""Boundary Protocols - contracts between the relationship core and the record store.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Stores exchange Pydantic records, never ORM rows
    - get/update/delete raise NotFoundError for a missing id; insert raises
      ConflictError for a duplicate id
    - Writes are visible to later reads in the same transaction but are not
      committed by the store

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - for_update on get: lets the service lock rows it is about to mutate
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from warehouser.core.domain_types import ItemId, WarehouseId
from warehouser.schemas.inventory import InventoryItem, Warehouse


class ItemStore(Protocol):
    """Contract for inventory item persistence - implemented by shell."""
    async def get(self, item_id: ItemId, *, for_update: bool = False) -> InventoryItem: ...
    async def exists(self, item_id: ItemId) -> bool: ...
    async def list(self, limit: int) -> list[InventoryItem]: ...
    async def list_by_ids(
        self, limit: int, ids: Sequence[int],
    ) -> list[InventoryItem]: ...
    async def insert(self, item: InventoryItem) -> InventoryItem: ...
    async def update(self, item: InventoryItem) -> InventoryItem: ...
    async def delete(self, item_id: ItemId) -> InventoryItem: ...


class WarehouseStore(Protocol):
    """Contract for warehouse persistence - implemented by shell."""
    async def get(
        self, warehouse_id: WarehouseId, *, for_update: bool = False,
    ) -> Warehouse: ...
    async def exists(self, warehouse_id: WarehouseId) -> bool: ...
    async def list(self, limit: int) -> list[Warehouse]: ...
    async def list_by_ids(
        self, limit: int, ids: Sequence[int],
    ) -> list[Warehouse]: ...
    async def insert(self, warehouse: Warehouse) -> Warehouse: ...
    async def update(self, warehouse: Warehouse) -> Warehouse: ...
    async def delete(self, warehouse_id: WarehouseId) -> Warehouse: ...
