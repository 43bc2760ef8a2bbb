"""Initial schema - inventory items, warehouses and the transport enum.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

transport = sa.Enum("Air", "Sea", "Land", name="transport")


def upgrade() -> None:
    op.create_table(
        "inventory",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("warehouse", sa.Integer, nullable=True),
        sa.Column("weight", sa.SmallInteger, nullable=False),
        sa.Column("value", sa.SmallInteger, nullable=False),
        sa.Column("transport", transport, nullable=False),
        sa.Column("width", sa.SmallInteger, nullable=False),
        sa.Column("height", sa.SmallInteger, nullable=False),
        sa.Column("depth", sa.SmallInteger, nullable=False),
    )
    op.create_index("ix_inventory_warehouse", "inventory", ["warehouse"])

    op.create_table(
        "warehouses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("items", sa.JSON, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("warehouses")
    op.drop_index("ix_inventory_warehouse", table_name="inventory")
    op.drop_table("inventory")
    transport.drop(op.get_bind(), checkfirst=True)
