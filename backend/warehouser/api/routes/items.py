"""Item Routes - CRUD and CSV export for inventory items.

Invariants:
    - /csv is registered before /{item_id} so it is never parsed as an id
    - PUT and PATCH are the same full-record update; neither can move an item
      between warehouses
    - DELETE returns the item as it was, including its former warehouse
"""

from fastapi import APIRouter, Depends, Query, Response, status

from warehouser.api.dependencies import (
    PathRecordId, get_inventory_service, resolve_limit,
)
from warehouser.core.csv_format import format_item_csv
from warehouser.schemas.inventory import InventoryItem
from warehouser.services.inventory_service import InventoryService

router = APIRouter(prefix="/api/item", tags=["items"])


@router.post(
    "", response_model=InventoryItem, status_code=status.HTTP_201_CREATED,
)
async def create_item(
    body: InventoryItem,
    service: InventoryService = Depends(get_inventory_service),
):
    """Create an item (registered with its warehouse when one is given)."""
    return await service.create_item(body)


@router.get("", response_model=list[InventoryItem])
async def list_items(
    limit: int | None = Query(None, ge=1),
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.list_items(resolve_limit(limit))


@router.get("/csv")
async def items_csv(
    limit: int | None = Query(None, ge=1),
    service: InventoryService = Depends(get_inventory_service),
):
    """Export items as CSV."""
    items = await service.list_items(resolve_limit(limit))
    return Response(content=format_item_csv(items), media_type="text/csv")


@router.put("", response_model=InventoryItem)
@router.patch("", response_model=InventoryItem)
async def update_item(
    body: InventoryItem,
    service: InventoryService = Depends(get_inventory_service),
):
    """Update an item's non-relationship fields."""
    return await service.update_item(body)


@router.get("/{item_id}", response_model=InventoryItem)
async def get_item(
    item_id: PathRecordId,
    service: InventoryService = Depends(get_inventory_service),
):
    return await service.get_item(item_id)


@router.delete("/{item_id}", response_model=InventoryItem)
async def delete_item(
    item_id: PathRecordId,
    service: InventoryService = Depends(get_inventory_service),
):
    """Delete an item, removing it from its warehouse first."""
    return await service.delete_item(item_id)
