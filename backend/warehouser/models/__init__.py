"""ORM Models - SQLAlchemy declarative models for items and warehouses.

Invariants:
    - All models inherit from Base (db/base.py)
    - No database-level foreign key between the tables: the item <-> warehouse
      link is maintained by services/inventory_service.py

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from warehouser.models.inventory_item import InventoryItemRow  # noqa: F401
from warehouser.models.warehouse import WarehouseRow  # noqa: F401
