# app/api/routers/shipping_admin_routes_warehouses.py
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.routers.shipping_admin_schemas import (
    WarehouseCreateIn,
    WarehouseCreateOut,
    WarehouseListOut,
    WarehouseOut,
)
from app.db.deps import get_db
from app.services.shipping_admin_service import ShippingAdminService


def register(router: APIRouter) -> None:
    @router.get("/warehouses", response_model=WarehouseListOut)
    def list_warehouses(db: Session = Depends(get_db)) -> WarehouseListOut:
        rows = ShippingAdminService(db).list_warehouses()
        return WarehouseListOut(data=[WarehouseOut(**r) for r in rows])

    @router.post(
        "/warehouses",
        status_code=status.HTTP_201_CREATED,
        response_model=WarehouseCreateOut,
    )
    def create_warehouse(
        payload: WarehouseCreateIn,
        db: Session = Depends(get_db),
    ) -> WarehouseCreateOut:
        row = ShippingAdminService(db).create_warehouse(
            name=payload.name.strip(),
            address=payload.address.strip(),
            latitude=payload.latitude,
            longitude=payload.longitude,
            phone=payload.phone,
            is_default=payload.is_default,
        )
        return WarehouseCreateOut(data=WarehouseOut(**row))
