# app/api/routers/shipping_admin_schemas.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------- warehouses ----------------


class WarehouseOut(BaseModel):
    id: int
    name: str
    address: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    phone: Optional[str] = None
    is_default: bool = False
    is_active: bool = True
    created_at: Optional[datetime] = None


class WarehouseListOut(BaseModel):
    success: bool = True
    data: List[WarehouseOut]


class WarehouseCreateIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    phone: Optional[str] = Field(None, max_length=20)
    is_default: bool = False


class WarehouseCreateOut(BaseModel):
    success: bool = True
    message: str = "Warehouse created successfully"
    data: WarehouseOut


# ---------------- zones ----------------


class ShippingZoneOut(BaseModel):
    id: int
    warehouse_id: int
    name: str
    province_ids: List[int] = Field(default_factory=list)
    district_ids: List[int] = Field(default_factory=list)
    description: Optional[str] = None
    is_active: bool = True
    warehouse_name: Optional[str] = None
    warehouse_address: Optional[str] = None
    created_at: Optional[datetime] = None


class ShippingZoneListOut(BaseModel):
    success: bool = True
    data: List[ShippingZoneOut]


class ShippingZoneCreateIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    warehouse_id: int = Field(..., ge=1)
    province_ids: List[int] = Field(default_factory=list)
    district_ids: List[int] = Field(default_factory=list)
    description: Optional[str] = None


class ShippingZoneCreateOut(BaseModel):
    success: bool = True
    message: str = "Shipping zone created successfully"
    data: ShippingZoneOut


# ---------------- rates ----------------


class ShippingRateOut(BaseModel):
    id: int
    zone_id: int
    min_distance: float = 0
    max_distance: Optional[float] = None
    base_rate: float
    per_km_rate: float = 0
    min_order_amount: float = 0
    is_active: bool = True
    zone_name: Optional[str] = None
    warehouse_name: Optional[str] = None
    created_at: Optional[datetime] = None


class ShippingRateListOut(BaseModel):
    success: bool = True
    data: List[ShippingRateOut]


class ShippingRateCreateIn(BaseModel):
    zone_id: int = Field(..., ge=1)
    min_distance: Optional[float] = Field(None, ge=0)
    max_distance: Optional[float] = Field(None, ge=0)
    base_rate: float = Field(..., ge=0)
    per_km_rate: Optional[float] = Field(None, ge=0)
    min_order_amount: Optional[float] = Field(None, ge=0)


class ShippingRateCreateOut(BaseModel):
    success: bool = True
    message: str = "Shipping rate created successfully"
    data: ShippingRateOut
