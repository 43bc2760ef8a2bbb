"""CSV Formatting - renders item and warehouse listings as text/csv.

Invariants:
    - Header line is always present, even for an empty listing
    - Every line ends with a single newline
    - Item rows carry the warehouse column; empty when the item is unassigned
    - Warehouse items render as one quoted cell joined by ", "
"""

from collections.abc import Iterable

from warehouser.schemas.inventory import InventoryItem, Warehouse

ITEM_CSV_HEADER = "id,warehouse,weight,value,transport,width,height,depth"
WAREHOUSE_CSV_HEADER = "id,items"


def format_item_row(item: InventoryItem) -> str:
    warehouse = "" if item.warehouse is None else str(item.warehouse)
    dims = item.dimensions
    return (
        f"{item.id},{warehouse},{item.weight},{item.value},"
        f"{item.transport.value},{dims.width},{dims.height},{dims.depth}"
    )


def format_warehouse_row(warehouse: Warehouse) -> str:
    items = ", ".join(str(i) for i in warehouse.items)
    return f'{warehouse.id},"{items}"'


def format_item_csv(items: Iterable[InventoryItem]) -> str:
    """Render items as CSV text with header."""
    lines = [ITEM_CSV_HEADER, *(format_item_row(i) for i in items)]
    return "\n".join(lines) + "\n"


def format_warehouse_csv(warehouses: Iterable[Warehouse]) -> str:
    """Render warehouses as CSV text with header."""
    lines = [WAREHOUSE_CSV_HEADER, *(format_warehouse_row(w) for w in warehouses)]
    return "\n".join(lines) + "\n"
