"""Membership Enforcement - pure rules for the item <-> warehouse relationship.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return an error on violation, None on success
    - An item lists warehouse W iff warehouse W lists the item; any check that
      finds only one half of a link reports InconsistencyError

Design Decisions:
    - Return errors (not raise): callers chain checks and raise the first one,
      and the rules stay testable without pytest.raises (ADR: functional core)
"""

from warehouser.core.domain_types import ItemId, WarehouseId
from warehouser.core.errors import (
    ConflictError, ErrorContext, InconsistencyError, WarehouserError,
)
from warehouser.schemas.inventory import InventoryItem, Warehouse


def _ctx(item_id: ItemId, warehouse_id: WarehouseId | None) -> ErrorContext:
    return ErrorContext(item_id=item_id, warehouse_id=warehouse_id)


# --- assign -------------------------------------------------------------------

def check_item_assignable(
    item: InventoryItem, warehouse_id: WarehouseId,
) -> WarehouserError | None:
    """Rule: only an unassigned item can be assigned."""
    owner = item.warehouse
    if owner is None:
        return None
    if owner == warehouse_id:
        msg = f"Item id {item.id} already belongs to warehouse id {owner}"
    else:
        msg = (
            f"Cannot assign item id {item.id} to warehouse id {warehouse_id} "
            f"as it already belongs to warehouse id {owner}"
        )
    return ConflictError(msg, _ctx(item.id, warehouse_id))


def check_not_listed(
    warehouse: Warehouse, item_id: ItemId,
) -> WarehouserError | None:
    """Warehouse must not list an item that claimed no warehouse."""
    if item_id in warehouse.items:
        return InconsistencyError(
            f"Item id {item_id} claims it belongs to no warehouse, "
            f"yet warehouse id {warehouse.id} indicates ownership",
            _ctx(item_id, warehouse.id),
        )
    return None


def with_member(warehouse: Warehouse, item_id: ItemId) -> Warehouse:
    """Copy of warehouse with item_id appended at the end."""
    return warehouse.model_copy(update={"items": [*warehouse.items, item_id]})


# --- unassign -----------------------------------------------------------------

def check_item_removable(
    item: InventoryItem, warehouse_id: WarehouseId,
) -> WarehouserError | None:
    """Rule: an item can only leave the warehouse it belongs to."""
    owner = item.warehouse
    if owner is None:
        return ConflictError(
            f"Item id {item.id} does not belong to any warehouse",
            _ctx(item.id, warehouse_id),
        )
    if owner != warehouse_id:
        return ConflictError(
            f"Item id {item.id} does not belong to warehouse id {warehouse_id}, "
            f"belongs to warehouse id {owner}",
            _ctx(item.id, warehouse_id),
        )
    return None


def check_listed(
    warehouse: Warehouse, item_id: ItemId,
) -> WarehouserError | None:
    """Warehouse must list an item that claims it."""
    if item_id not in warehouse.items:
        return InconsistencyError(
            f"Item id {item_id} claims it belongs to warehouse id {warehouse.id}, "
            f"however warehouse id {warehouse.id} does not indicate ownership",
            _ctx(item_id, warehouse.id),
        )
    return None


def without_member(warehouse: Warehouse, item_id: ItemId) -> Warehouse:
    """Copy of warehouse with item_id removed; other ids keep their order."""
    return warehouse.model_copy(
        update={"items": [i for i in warehouse.items if i != item_id]},
    )


# --- create / update ----------------------------------------------------------

def check_free_for_new_warehouse(
    item: InventoryItem,
) -> WarehouserError | None:
    """A new warehouse may only start with items no warehouse holds."""
    if item.warehouse is not None:
        return ConflictError(
            f"Cannot create warehouse, item id {item.id} "
            f"already belongs to warehouse id {item.warehouse}",
            _ctx(item.id, item.warehouse),
        )
    return None


def check_warehouse_unchanged(
    updated: InventoryItem, existing: InventoryItem,
) -> WarehouserError | None:
    """Generic item update must not move the item between warehouses."""
    if updated.warehouse != existing.warehouse:
        return ConflictError(
            f"Updating the warehouse of item id {existing.id} is not supported "
            f"(stored: {existing.warehouse}, requested: {updated.warehouse}), "
            "use the warehouse item add/remove endpoint",
            _ctx(existing.id, existing.warehouse),
        )
    return None

