# app/api/routers/shipping_admin.py
from __future__ import annotations

from fastapi import APIRouter

from app.api.routers import (
    shipping_admin_routes_rates,
    shipping_admin_routes_warehouses,
    shipping_admin_routes_zones,
)
from app.api.routers.shipping_admin_schemas import (
    ShippingRateCreateIn,
    ShippingRateOut,
    ShippingZoneCreateIn,
    ShippingZoneOut,
    WarehouseCreateIn,
    WarehouseOut,
)

router = APIRouter(prefix="/admin", tags=["shipping-admin"])


def _register_all_routes() -> None:
    shipping_admin_routes_warehouses.register(router)
    shipping_admin_routes_zones.register(router)
    shipping_admin_routes_rates.register(router)


_register_all_routes()

__all__ = [
    "router",
    "WarehouseOut",
    "WarehouseCreateIn",
    "ShippingZoneOut",
    "ShippingZoneCreateIn",
    "ShippingRateOut",
    "ShippingRateCreateIn",
]
