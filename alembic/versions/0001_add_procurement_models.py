"""add purchase order and quotation models

Revision ID: 0001
Revises:
Create Date: 2025-12-02 00:00:00.000000

"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "purchase_order",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("po_number", sa.String(length=100), nullable=False, unique=True),
        sa.Column("po_date", sa.Date(), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=False),
        sa.Column("customer_name", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="active"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "purchase_order_item",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("purchase_order_id", sa.Integer(), sa.ForeignKey("purchase_order.id"), nullable=False),
        sa.Column("item_name", sa.String(length=255), nullable=False),
        sa.Column("item_code", sa.String(length=100), nullable=True),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=False),
        sa.Column("unit_price", sa.Float(), nullable=False, server_default="0"),
    )
    op.create_index("ix_purchase_order_item_item_code", "purchase_order_item", ["item_code"])

    op.create_table(
        "quotation",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("quotation_number", sa.String(length=100), nullable=False, unique=True),
        sa.Column("quotation_date", sa.Date(), nullable=False),
        sa.Column("validity_date", sa.Date(), nullable=False),
        sa.Column("customer_name", sa.String(length=255), nullable=False),
        sa.Column("status", sa.String(length=50), nullable=False, server_default="draft"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    )


def downgrade() -> None:
    op.drop_table("quotation")
    op.drop_index("ix_purchase_order_item_item_code", table_name="purchase_order_item")
    op.drop_table("purchase_order_item")
    op.drop_table("purchase_order")
