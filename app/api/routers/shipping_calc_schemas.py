# app/api/routers/shipping_calc_schemas.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ShippingCalcIn(BaseModel):
    # 必填性在路由里判（缺失 / null / 0 统一 400），这里只约束类型
    destination_province_id: Optional[int] = None
    destination_district_id: Optional[int] = None
    order_amount: Optional[float] = Field(default=0, ge=0)


class ShippingRateDetailsOut(BaseModel):
    base_rate: float
    per_km_rate: float
    min_distance: float
    max_distance: Optional[float] = None


class ShippingCalcDataOut(BaseModel):
    shipping_fee: int
    distance: float
    zone_name: str
    warehouse_name: str
    is_free_shipping: bool

    # 兜底（无 zone 命中）时不返回以下字段
    warehouse_address: Optional[str] = None
    free_shipping_threshold: Optional[float] = None
    rate_details: Optional[ShippingRateDetailsOut] = None


class ShippingCalcOut(BaseModel):
    success: bool = True
    data: ShippingCalcDataOut
