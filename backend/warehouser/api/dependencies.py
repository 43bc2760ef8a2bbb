"""Route dependencies - one InventoryService per request, bound to the request's session.

Invariants:
    - Path and query ids are bounded to the INT column range; anything wider is
      a 400 before the store is touched
"""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from warehouser.config import get_settings
from warehouser.core.domain_types import INT_MAX, INT_MIN
from warehouser.infrastructure.database import get_db
from warehouser.services.inventory_service import InventoryService

PathRecordId = Annotated[int, Path(ge=INT_MIN, le=INT_MAX)]
QueryItemId = Annotated[int, Query(alias="id", ge=INT_MIN, le=INT_MAX)]


def get_inventory_service(db: AsyncSession = Depends(get_db)) -> InventoryService:
    return InventoryService(db)


def resolve_limit(limit: int | None) -> int:
    """Apply the configured default when a listing omits ?limit."""
    return limit if limit is not None else get_settings().default_list_limit
