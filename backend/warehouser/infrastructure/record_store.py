"""Record Store - per-table CRUD primitives over an AsyncSession.

Invariants:
    - Every method works on one record; no method commits
    - Pydantic records in, Pydantic records out: ORM rows never leave this module
    - Missing ids raise NotFoundError, duplicate ids on insert raise ConflictError
    - list() is ordered by id; list_by_ids() follows the order of the given ids

Design Decisions:
    - One generic _TableStore parameterized by row type and entity name, two thin
      subclasses that only translate between row and record
    - Writes flush so later reads in the same transaction see them; the caller
      (InventoryService) owns commit/rollback
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from warehouser.core.errors import ConflictError, ErrorContext, NotFoundError
from warehouser.db.base import Base
from warehouser.models.inventory_item import InventoryItemRow
from warehouser.models.warehouse import WarehouseRow
from warehouser.schemas.inventory import Dimensions, InventoryItem, Warehouse

RowT = TypeVar("RowT", bound=Base)
RecordT = TypeVar("RecordT", bound=BaseModel)


class _TableStore(ABC, Generic[RowT, RecordT]):
    """CRUD by integer id for one table."""

    row_type: type[RowT]
    entity: str

    def __init__(self, db: AsyncSession):
        self.db = db

    # --- row <-> record (implemented per table) ---

    @abstractmethod
    def _to_record(self, row: RowT) -> RecordT:
        ...

    @abstractmethod
    def _to_row(self, record: RecordT) -> RowT:
        ...

    @abstractmethod
    def _apply(self, row: RowT, record: RecordT) -> None:
        ...

    @abstractmethod
    def _context(self, record_id: int) -> ErrorContext:
        ...

    # --- primitives ---

    async def _row(self, record_id: int, for_update: bool = False) -> RowT:
        stmt = select(self.row_type).where(self.row_type.id == record_id)
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            raise NotFoundError(
                f"{self.entity} id {record_id} does not exist",
                self._context(record_id),
            )
        return row

    async def get(self, record_id: int, *, for_update: bool = False) -> RecordT:
        return self._to_record(await self._row(record_id, for_update))

    async def exists(self, record_id: int) -> bool:
        result = await self.db.execute(
            select(self.row_type.id).where(self.row_type.id == record_id),
        )
        return result.scalar_one_or_none() is not None

    async def list(self, limit: int) -> list[RecordT]:
        result = await self.db.execute(
            select(self.row_type).order_by(self.row_type.id).limit(limit),
        )
        return [self._to_record(row) for row in result.scalars().all()]

    async def list_by_ids(self, limit: int, ids: Sequence[int]) -> list[RecordT]:
        if not ids:
            return []
        result = await self.db.execute(
            select(self.row_type).where(self.row_type.id.in_(list(ids))),
        )
        position = {record_id: idx for idx, record_id in enumerate(ids)}
        rows = sorted(result.scalars().all(), key=lambda row: position[row.id])
        return [self._to_record(row) for row in rows[:limit]]

    async def insert(self, record: RecordT) -> RecordT:
        if await self.exists(record.id):
            raise ConflictError(
                f"{self.entity} id {record.id} already exists",
                self._context(record.id),
            )
        row = self._to_row(record)
        self.db.add(row)
        try:
            await self.db.flush()
        except IntegrityError as e:
            raise ConflictError(
                f"Uniqueness violation on {self.entity.lower()} id {record.id}: {e.orig}",
                self._context(record.id),
            ) from e
        return self._to_record(row)

    async def update(self, record: RecordT) -> RecordT:
        row = await self._row(record.id)
        self._apply(row, record)
        await self.db.flush()
        return self._to_record(row)

    async def delete(self, record_id: int) -> RecordT:
        row = await self._row(record_id)
        snapshot = self._to_record(row)
        await self.db.delete(row)
        await self.db.flush()
        return snapshot


class SqlItemStore(_TableStore[InventoryItemRow, InventoryItem]):
    """ItemStore backed by the `inventory` table."""

    row_type = InventoryItemRow
    entity = "Item"

    def _to_record(self, row: InventoryItemRow) -> InventoryItem:
        return InventoryItem(
            id=row.id,
            warehouse=row.warehouse,
            weight=row.weight,
            value=row.value,
            transport=row.transport,
            dimensions=Dimensions(
                width=row.width, height=row.height, depth=row.depth,
            ),
        )

    def _to_row(self, record: InventoryItem) -> InventoryItemRow:
        row = InventoryItemRow(id=record.id)
        self._apply(row, record)
        return row

    def _apply(self, row: InventoryItemRow, record: InventoryItem) -> None:
        row.warehouse = record.warehouse
        row.weight = record.weight
        row.value = record.value
        row.transport = record.transport
        row.width = record.dimensions.width
        row.height = record.dimensions.height
        row.depth = record.dimensions.depth

    def _context(self, record_id: int) -> ErrorContext:
        return ErrorContext(item_id=record_id)


class SqlWarehouseStore(_TableStore[WarehouseRow, Warehouse]):
    """WarehouseStore backed by the `warehouses` table."""

    row_type = WarehouseRow
    entity = "Warehouse"

    def _to_record(self, row: WarehouseRow) -> Warehouse:
        return Warehouse(id=row.id, items=list(row.items))

    def _to_row(self, record: Warehouse) -> WarehouseRow:
        return WarehouseRow(id=record.id, items=list(record.items))

    def _apply(self, row: WarehouseRow, record: Warehouse) -> None:
        row.items = list(record.items)

    def _context(self, record_id: int) -> ErrorContext:
        return ErrorContext(warehouse_id=record_id)
