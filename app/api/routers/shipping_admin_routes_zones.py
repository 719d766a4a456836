# app/api/routers/shipping_admin_routes_zones.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routers.shipping_admin_schemas import (
    ShippingZoneCreateIn,
    ShippingZoneCreateOut,
    ShippingZoneListOut,
    ShippingZoneOut,
)
from app.db.deps import get_db
from app.services.shipping_admin_service import ShippingAdminService


def register(router: APIRouter) -> None:
    @router.get("/shipping-zones", response_model=ShippingZoneListOut)
    def list_shipping_zones(db: Session = Depends(get_db)) -> ShippingZoneListOut:
        rows = ShippingAdminService(db).list_zones()
        return ShippingZoneListOut(data=[ShippingZoneOut(**r) for r in rows])

    @router.post(
        "/shipping-zones",
        status_code=status.HTTP_201_CREATED,
        response_model=ShippingZoneCreateOut,
    )
    def create_shipping_zone(
        payload: ShippingZoneCreateIn,
        db: Session = Depends(get_db),
    ) -> ShippingZoneCreateOut:
        row = ShippingAdminService(db).create_zone(
            name=payload.name.strip(),
            warehouse_id=payload.warehouse_id,
            province_ids=payload.province_ids,
            district_ids=payload.district_ids,
            description=payload.description,
        )
        return ShippingZoneCreateOut(data=ShippingZoneOut(**row))
