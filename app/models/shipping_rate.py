# app/models/shipping_rate.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base


class ShippingRate(Base):
    """
    距离段运价（km）：
    - 命中语义：min_distance <= d <= max_distance（max_distance 为 NULL 视为 infinity）
    - 重叠时取 min_distance 最大的一条
    - fee = base_rate + max(0, d - min_distance) * per_km_rate
    - min_order_amount > 0 且订单金额达标 => 包邮
    """

    __tablename__ = "shipping_rates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    zone_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("shipping_zones.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    min_distance: Mapped[Decimal] = mapped_column(
        Numeric(8, 2), nullable=False, default=0, server_default="0"
    )
    max_distance: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(8, 2), nullable=True
    )  # null = infinity

    base_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    per_km_rate: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=0, server_default="0"
    )
    min_order_amount: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False, default=0, server_default="0"
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default="1"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now()
    )

    zone = relationship("ShippingZone", back_populates="rates")

    def __repr__(self) -> str:
        return (
            f"<ShippingRate id={self.id} zone_id={self.zone_id} "
            f"{self.min_distance}-{self.max_distance}km base={self.base_rate}>"
        )
