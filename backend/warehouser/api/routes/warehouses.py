"""Warehouse Routes - CRUD, membership changes and CSV export for warehouses.

Invariants:
    - /csv is registered before /{warehouse_id} so it is never parsed as an id
    - Membership changes only through /{id}/add and /{id}/remove (?id=<item id>)
    - PUT always answers 501, whatever the body
    - DELETE returns the warehouse as it was, including its former items
"""

from fastapi import APIRouter, Depends, Query, Response, status

from warehouser.api.dependencies import (
    PathRecordId, QueryItemId, get_inventory_service, resolve_limit,
)
from warehouser.core.csv_format import format_warehouse_csv
from warehouser.schemas.inventory import InventoryItem, Warehouse
from warehouser.services.inventory_service import InventoryService

router = APIRouter(prefix="/api/warehouse", tags=["warehouses"])


@router.post(
    "", response_model=Warehouse, status_code=status.HTTP_201_CREATED,
)
async def create_warehouse(
    body: Warehouse,
    service: InventoryService = Depends(get_inventory_service),
):
    """Create a warehouse, assigning the listed (unassigned) items to it."""
    return await service.create_warehouse(body)


@router.get("", response_model=list[Warehouse])
async def list_warehouses(
    limit: int | None = Query(None, ge=1),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.list_warehouses(resolve_limit(limit))


@router.put("", response_model=Warehouse)
async def update_warehouse(
    service: InventoryService = Depends(get_inventory_service),
):
    """Not supported: use /{id}/add and /{id}/remove."""
    return await service.update_warehouse()


@router.get("/csv")
async def warehouses_csv(
    limit: int | None = Query(None, ge=1),
    service: InventoryService = Depends(get_inventory_service),
):
    """Export warehouses as CSV."""
    warehouses = await service.list_warehouses(resolve_limit(limit))
    return Response(content=format_warehouse_csv(warehouses), media_type="text/csv")


@router.post("/{warehouse_id}/add", response_model=Warehouse)
async def add_item(
    warehouse_id: PathRecordId,
    item_id: QueryItemId,
    service: InventoryService = Depends(get_inventory_service),
):
    """Assign an unassigned item to this warehouse."""
    return await service.assign_item(warehouse_id, item_id)


@router.post("/{warehouse_id}/remove", response_model=Warehouse)
async def remove_item(
    warehouse_id: PathRecordId,
    item_id: QueryItemId,
    service: InventoryService = Depends(get_inventory_service),
):
    """Remove an item from this warehouse."""
    return await service.unassign_item(warehouse_id, item_id)


@router.get("/{warehouse_id}/items", response_model=list[InventoryItem])
async def list_warehouse_items(
    warehouse_id: PathRecordId,
    limit: int | None = Query(None, ge=1),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.list_items_for_warehouse(warehouse_id, resolve_limit(limit))


@router.get("/{warehouse_id}", response_model=Warehouse)
async def get_warehouse(
    warehouse_id: PathRecordId,
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.get_warehouse(warehouse_id)


@router.delete("/{warehouse_id}", response_model=Warehouse)
async def delete_warehouse(
    warehouse_id: PathRecordId,
    service: InventoryService = Depends(get_inventory_service),
):
    """Delete a warehouse after removing every item it holds."""
    return await service.delete_warehouse(warehouse_id)
