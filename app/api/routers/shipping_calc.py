# app/api/routers/shipping_calc.py
from __future__ import annotations

from fastapi import APIRouter

from app.api.routers import shipping_calc_routes
from app.api.routers.shipping_calc_schemas import (
    ShippingCalcDataOut,
    ShippingCalcIn,
    ShippingCalcOut,
    ShippingRateDetailsOut,
)

router = APIRouter(tags=["shipping"])


def _register_all_routes() -> None:
    shipping_calc_routes.register(router)


_register_all_routes()

__all__ = [
    "router",
    "ShippingCalcIn",
    "ShippingCalcOut",
    "ShippingCalcDataOut",
    "ShippingRateDetailsOut",
]
