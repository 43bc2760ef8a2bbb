"""Inventory Service - keeps item.warehouse and warehouse.items mutually consistent.

Invariants:
    - item.warehouse == W  <=>  warehouse W exists and lists the item, after every
      successful call
    - Every mutating operation runs in ONE store transaction: committed once on
      success, rolled back on any error, so a failed call leaves both sides as
      they were before it
    - Nested steps (assigns inside create_warehouse, unassigns inside the delete
      cascades) join the caller's transaction
    - A cascade stops at its first failure and propagates it; the delete does not
      happen
    - Rows about to be mutated are read with FOR UPDATE (no-op on SQLite)
    - Locks are always taken item row first, then warehouse row;
      delete_warehouse reads the warehouse unlocked, lets each unassign lock
      item then warehouse, and only then locks the warehouse for the delete

Design Decisions:
    - Rules live in core/enforce_membership.py as pure functions returning an
      error or None; this module only fetches, raises and persists
    - create_item registers the item with its warehouse through the same assign
      path instead of only storing the claim
    - Pre-delete snapshots are returned by delete_item/delete_warehouse so the
      caller still sees the former links
"""

import logging
from collections.abc import Awaitable
from contextlib import asynccontextmanager
from typing import AsyncGenerator, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from warehouser.core.domain_types import ItemId, WarehouseId
from warehouser.core.enforce_membership import (
    check_free_for_new_warehouse,
    check_item_assignable,
    check_item_removable,
    check_listed,
    check_not_listed,
    check_warehouse_unchanged,
    with_member,
    without_member,
)
from warehouser.core.errors import (
    ConflictError,
    ErrorContext,
    NotFoundError,
    NotImplementedOperationError,
    WarehouserError,
)
from warehouser.core.repository_protocols import ItemStore, WarehouseStore
from warehouser.infrastructure.record_store import SqlItemStore, SqlWarehouseStore
from warehouser.schemas.inventory import InventoryItem, Warehouse

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _raise_if(error: WarehouserError | None) -> None:
    if error is not None:
        raise error


async def _reword_missing(lookup: Awaitable[T], message: str) -> T:
    """Await a store lookup, replacing its NotFound message with a caller-specific one."""
    try:
        return await lookup
    except NotFoundError as e:
        raise NotFoundError(message, e.context) from e


class InventoryService:
    """Relationship core over an item store and a warehouse store."""

    def __init__(
        self,
        db: AsyncSession,
        items: ItemStore | None = None,
        warehouses: WarehouseStore | None = None,
    ):
        self.db = db
        self.items: ItemStore = items or SqlItemStore(db)
        self.warehouses: WarehouseStore = warehouses or SqlWarehouseStore(db)

    @asynccontextmanager
    async def _transaction(self) -> AsyncGenerator[None, None]:
        """Commit once on success, roll back everything on error."""
        try:
            yield
        except Exception:
            await self.db.rollback()
            raise
        await self.db.commit()

    # --- relationship steps (run inside a caller's transaction) ---

    async def _assign(self, warehouse_id: WarehouseId, item_id: ItemId) -> Warehouse:
        item = await self.items.get(item_id, for_update=True)
        _raise_if(check_item_assignable(item, warehouse_id))

        await self.items.update(item.model_copy(update={"warehouse": warehouse_id}))

        warehouse = await self.warehouses.get(warehouse_id, for_update=True)
        _raise_if(check_not_listed(warehouse, item_id))
        return await self.warehouses.update(with_member(warehouse, item_id))

    async def _unassign(self, warehouse_id: WarehouseId, item_id: ItemId) -> Warehouse:
        item = await self.items.get(item_id, for_update=True)
        _raise_if(check_item_removable(item, warehouse_id))

        await self.items.update(item.model_copy(update={"warehouse": None}))

        warehouse = await self.warehouses.get(warehouse_id, for_update=True)
        _raise_if(check_listed(warehouse, item_id))
        return await self.warehouses.update(without_member(warehouse, item_id))

    # --- assignment ---

    async def assign_item(self, warehouse_id: WarehouseId, item_id: ItemId) -> Warehouse:
        """Add an item to a warehouse. Returns the updated warehouse."""
        async with self._transaction():
            warehouse = await self._assign(warehouse_id, item_id)
        logger.info(
            f"Item {item_id} assigned to warehouse {warehouse_id}",
            extra={"item_id": item_id, "warehouse_id": warehouse_id},
        )
        return warehouse

    async def unassign_item(self, warehouse_id: WarehouseId, item_id: ItemId) -> Warehouse:
        """Remove an item from the warehouse it belongs to. Returns the updated warehouse."""
        async with self._transaction():
            warehouse = await self._unassign(warehouse_id, item_id)
        logger.info(
            f"Item {item_id} removed from warehouse {warehouse_id}",
            extra={"item_id": item_id, "warehouse_id": warehouse_id},
        )
        return warehouse

    # --- items ---

    async def get_item(self, item_id: ItemId) -> InventoryItem:
        return await self.items.get(item_id)

    async def list_items(self, limit: int) -> list[InventoryItem]:
        return await self.items.list(limit)

    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Insert an item; an item naming a warehouse is also registered with it."""
        async with self._transaction():
            if item.warehouse is not None and not await self.warehouses.exists(item.warehouse):
                raise NotFoundError(
                    f"Cannot create item with warehouse id {item.warehouse}, "
                    "because it does not exist",
                    ErrorContext(item_id=item.id, warehouse_id=item.warehouse),
                )
            created = await self.items.insert(item.model_copy(update={"warehouse": None}))
            if item.warehouse is not None:
                await self._assign(item.warehouse, item.id)
                created = created.model_copy(update={"warehouse": item.warehouse})
        logger.info(
            f"Item {item.id} created",
            extra={"item_id": item.id, "warehouse_id": item.warehouse},
        )
        return created

    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update every field except the warehouse link."""
        async with self._transaction():
            existing = await _reword_missing(
                self.items.get(item.id, for_update=True),
                f"Cannot update item {item.id} as it doesn't exist. "
                "Try creating the item instead",
            )
            _raise_if(check_warehouse_unchanged(item, existing))
            updated = await self.items.update(item)
        return updated

    async def delete_item(self, item_id: ItemId) -> InventoryItem:
        """Delete an item, first removing it from its warehouse.

        Returns the item as it was before deletion, warehouse included.
        """
        async with self._transaction():
            item = await self.items.get(item_id, for_update=True)
            if item.warehouse is not None:
                await self._unassign(item.warehouse, item_id)
            await self.items.delete(item_id)
        logger.info(
            f"Item {item_id} deleted",
            extra={"item_id": item_id, "warehouse_id": item.warehouse},
        )
        return item

    # --- warehouses ---

    async def get_warehouse(self, warehouse_id: WarehouseId) -> Warehouse:
        return await self.warehouses.get(warehouse_id)

    async def list_warehouses(self, limit: int) -> list[Warehouse]:
        return await self.warehouses.list(limit)

    async def list_items_for_warehouse(
        self, warehouse_id: WarehouseId, limit: int,
    ) -> list[InventoryItem]:
        warehouse = await _reword_missing(
            self.warehouses.get(warehouse_id),
            f"Cannot get items for warehouse id {warehouse_id}, as it does not exist",
        )
        return await self.items.list_by_ids(limit, warehouse.items)

    async def create_warehouse(self, warehouse: Warehouse) -> Warehouse:
        """Create a warehouse already holding the given unassigned items.

        Every listed item is checked before anything is written, so a rejected
        request leaves no warehouse behind. The warehouse is inserted empty and
        filled through the assign path in list order.
        """
        async with self._transaction():
            if await self.warehouses.exists(warehouse.id):
                raise ConflictError(
                    f"Warehouse id {warehouse.id} already exists",
                    ErrorContext(warehouse_id=warehouse.id),
                )
            for item_id in warehouse.items:
                item = await _reword_missing(
                    self.items.get(item_id),
                    f"Cannot create warehouse, item id {item_id} does not exist",
                )
                _raise_if(check_free_for_new_warehouse(item))

            created = await self.warehouses.insert(
                warehouse.model_copy(update={"items": []}),
            )
            for item_id in warehouse.items:
                await self._assign(created.id, item_id)

        logger.info(
            f"Warehouse {warehouse.id} created with {len(warehouse.items)} item(s)",
            extra={"warehouse_id": warehouse.id},
        )
        return created.model_copy(update={"items": list(warehouse.items)})

    async def update_warehouse(self, warehouse: Warehouse | None = None) -> Warehouse:
        """Always fails, whatever the input: membership changes go through assign/unassign."""
        raise NotImplementedOperationError(
            "Updating warehouses is not supported, "
            "to add and remove items use the respective endpoints",
            ErrorContext(warehouse_id=warehouse.id if warehouse else None),
        )

    async def delete_warehouse(self, warehouse_id: WarehouseId) -> Warehouse:
        """Delete a warehouse after removing each of its items.

        Returns the warehouse as it was before deletion, items included.
        """
        async with self._transaction():
            warehouse = await self.warehouses.get(warehouse_id)
            for item_id in warehouse.items:
                await self._unassign(warehouse_id, item_id)
            remaining = await self.warehouses.get(warehouse_id, for_update=True)
            if remaining.items:
                raise ConflictError(
                    f"Cannot delete warehouse id {warehouse_id}, item ids "
                    f"{remaining.items} were assigned to it during the delete",
                    ErrorContext(warehouse_id=warehouse_id),
                )
            await self.warehouses.delete(warehouse_id)
        logger.info(
            f"Warehouse {warehouse_id} deleted, {len(warehouse.items)} item(s) released",
            extra={"warehouse_id": warehouse_id},
        )
        return warehouse
