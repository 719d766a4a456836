"""create_shipping_tables

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 09:12:44.102311

"""
from __future__ import annotations

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "warehouses",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("latitude", sa.Numeric(10, 8), nullable=True),
        sa.Column("longitude", sa.Numeric(11, 8), nullable=True),
        sa.Column("phone", sa.String(length=20), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        *_timestamps(),
    )

    # province_ids / district_ids：JSON 编码的 int 数组（文本）；空 = 通配
    op.create_table(
        "shipping_zones",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "warehouse_id",
            sa.Integer(),
            sa.ForeignKey("warehouses.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("province_ids", sa.Text(), nullable=True),
        sa.Column("district_ids", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        *_timestamps(),
    )
    op.create_index("ix_shipping_zones_warehouse_id", "shipping_zones", ["warehouse_id"])

    # 距离段（km）：max_distance NULL = infinity
    op.create_table(
        "shipping_rates",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "zone_id",
            sa.Integer(),
            sa.ForeignKey("shipping_zones.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("min_distance", sa.Numeric(8, 2), nullable=False, server_default="0"),
        sa.Column("max_distance", sa.Numeric(8, 2), nullable=True),
        sa.Column("base_rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("per_km_rate", sa.Numeric(12, 2), nullable=False, server_default="0"),
        sa.Column("min_order_amount", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="1"),
        *_timestamps(),
    )
    op.create_index("ix_shipping_rates_zone_id", "shipping_rates", ["zone_id"])


def downgrade() -> None:
    op.drop_index("ix_shipping_rates_zone_id", table_name="shipping_rates")
    op.drop_table("shipping_rates")
    op.drop_index("ix_shipping_zones_warehouse_id", table_name="shipping_zones")
    op.drop_table("shipping_zones")
    op.drop_table("warehouses")
