# app/api/routers/shipping_admin_routes_rates.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.routers.shipping_admin_schemas import (
    ShippingRateCreateIn,
    ShippingRateCreateOut,
    ShippingRateListOut,
    ShippingRateOut,
)
from app.db.deps import get_db
from app.services.shipping_admin_service import ShippingAdminService


def register(router: APIRouter) -> None:
    @router.get("/shipping-rates", response_model=ShippingRateListOut)
    def list_shipping_rates(
        zone_id: Optional[int] = Query(default=None, ge=1),
        db: Session = Depends(get_db),
    ) -> ShippingRateListOut:
        rows = ShippingAdminService(db).list_rates(zone_id=zone_id)
        return ShippingRateListOut(data=[ShippingRateOut(**r) for r in rows])

    @router.post(
        "/shipping-rates",
        status_code=status.HTTP_201_CREATED,
        response_model=ShippingRateCreateOut,
    )
    def create_shipping_rate(
        payload: ShippingRateCreateIn,
        db: Session = Depends(get_db),
    ) -> ShippingRateCreateOut:
        row = ShippingAdminService(db).create_rate(
            zone_id=payload.zone_id,
            base_rate=payload.base_rate,
            min_distance=payload.min_distance,
            max_distance=payload.max_distance,
            per_km_rate=payload.per_km_rate,
            min_order_amount=payload.min_order_amount,
        )
        return ShippingRateCreateOut(data=ShippingRateOut(**row))
