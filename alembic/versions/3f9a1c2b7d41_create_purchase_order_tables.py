"""create purchase order tables

Revision ID: 3f9a1c2b7d41
Revises:
Create Date: 2025-10-19 11:04:52.318770

Creates purchase_orders, customer_pos and supplier_pos. Tables that already
exist (created by Base.metadata.create_all()) are left alone.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d41'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _table_exists(table_name):
    """Check if a table exists."""
    bind = op.get_bind()
    insp = inspect(bind)
    return table_name in insp.get_table_names()


def _priced_po_columns():
    """Columns shared by customer_pos and supplier_pos."""
    return [
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("po_number", sa.String(), nullable=True),
        sa.Column("date", sa.Date(), nullable=True),
        sa.Column("size", sa.String(), nullable=False),
        sa.Column("material", sa.String(), nullable=True),
        sa.Column("quantity", sa.Float(), nullable=True),
        sa.Column("rate", sa.Float(), nullable=True),
        sa.Column("status", sa.String(), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=True),
        sa.Column("weight_per_pc", sa.Float(), nullable=True),
        sa.Column("total_weight", sa.Float(), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("gst_18", sa.Float(), nullable=True),
        sa.Column("total_price", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    if not _table_exists("purchase_orders"):
        op.create_table(
            "purchase_orders",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("po_number", sa.String(), nullable=True),
            sa.Column("customer_name", sa.String(), nullable=True),
            sa.Column("material", sa.String(), nullable=True),
            sa.Column("quantity", sa.Float(), nullable=True),
            sa.Column("pending_qty", sa.Float(), nullable=True),
            sa.Column("date", sa.Date(), nullable=True),
            sa.Column("created_at", sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index("ix_purchase_orders_id", "purchase_orders", ["id"])
        op.create_index("ix_purchase_orders_po_number", "purchase_orders", ["po_number"])

    for table_name, party_column in [("customer_pos", "customer_name"),
                                     ("supplier_pos", "supplier_name")]:
        if _table_exists(table_name):
            continue
        op.create_table(
            table_name,
            *_priced_po_columns(),
            sa.Column(party_column, sa.String(), nullable=True),
        )
        op.create_index(f"ix_{table_name}_id", table_name, ["id"])
        op.create_index(f"ix_{table_name}_po_number", table_name, ["po_number"])
        op.create_index(f"ix_{table_name}_status", table_name, ["status"])


def downgrade() -> None:
    for table_name in ["supplier_pos", "customer_pos", "purchase_orders"]:
        if _table_exists(table_name):
            op.drop_table(table_name)
