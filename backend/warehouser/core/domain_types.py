"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - ItemId and WarehouseId wrap ints; never mix the two in signatures
    - SmallInt bounds match the SMALLINT columns of the inventory table

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum for Transport: serializes to JSON and CSV as its variant name
"""

from enum import Enum
from typing import NewType


# --- Identity Types -----------------------------------------------------------

ItemId = NewType("ItemId", int)
WarehouseId = NewType("WarehouseId", int)


# --- Bounds -------------------------------------------------------------------

SMALLINT_MIN = -32_768
SMALLINT_MAX = 32_767
INT_MIN = -2_147_483_648
INT_MAX = 2_147_483_647


# --- Enums --------------------------------------------------------------------

class Transport(str, Enum):
    """How an item is shipped - maps to the `transport` DB enum."""
    AIR = "Air"
    SEA = "Sea"
    LAND = "Land"
