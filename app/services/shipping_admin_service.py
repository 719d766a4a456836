# app/services/shipping_admin_service.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy import select, update
from sqlalchemy.orm import Session, aliased

from app.api.errors import NotFoundError, ValidationError
from app.models.shipping_rate import ShippingRate
from app.models.shipping_zone import ShippingZone
from app.models.warehouse import Warehouse
from app.services.shipping_calc.types import parse_id_list

log = logging.getLogger("hacom.shipping.admin")


def _num(v) -> Optional[float]:
    return None if v is None else float(v)


def warehouse_to_dict(w: Warehouse) -> Dict[str, Any]:
    return {
        "id": w.id,
        "name": w.name,
        "address": w.address,
        "latitude": _num(w.latitude),
        "longitude": _num(w.longitude),
        "phone": w.phone,
        "is_default": bool(w.is_default),
        "is_active": bool(w.is_active),
        "created_at": w.created_at,
    }


def zone_to_dict(z: ShippingZone, wh: Optional[Warehouse]) -> Dict[str, Any]:
    # 管理端展示：解析失败的 id 列表按空数组返回
    return {
        "id": z.id,
        "warehouse_id": z.warehouse_id,
        "name": z.name,
        "province_ids": parse_id_list(z.province_ids) or [],
        "district_ids": parse_id_list(z.district_ids) or [],
        "description": z.description,
        "is_active": bool(z.is_active),
        "warehouse_name": wh.name if wh is not None else None,
        "warehouse_address": wh.address if wh is not None else None,
        "created_at": z.created_at,
    }


def rate_to_dict(r: ShippingRate, zone_name: Optional[str], warehouse_name: Optional[str]) -> Dict[str, Any]:
    return {
        "id": r.id,
        "zone_id": r.zone_id,
        "min_distance": float(r.min_distance or 0),
        "max_distance": _num(r.max_distance),
        "base_rate": float(r.base_rate),
        "per_km_rate": float(r.per_km_rate or 0),
        "min_order_amount": float(r.min_order_amount or 0),
        "is_active": bool(r.is_active),
        "zone_name": zone_name,
        "warehouse_name": warehouse_name,
        "created_at": r.created_at,
    }


class ShippingAdminService:
    """
    运费基础数据维护（仓库 / 区域 / 距离段运价）。
    写操作在这里 commit；读操作只拼展示字段。
    """

    def __init__(self, db: Session):
        self.db = db

    # ---------------- warehouses ----------------

    def list_warehouses(self) -> List[Dict[str, Any]]:
        rows = (
            self.db.execute(
                select(Warehouse).order_by(
                    Warehouse.is_default.desc(),
                    Warehouse.created_at.desc(),
                    Warehouse.id.desc(),
                )
            )
            .scalars()
            .all()
        )
        return [warehouse_to_dict(w) for w in rows]

    def create_warehouse(
        self,
        *,
        name: str,
        address: str,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        phone: Optional[str] = None,
        is_default: bool = False,
    ) -> Dict[str, Any]:
        if (latitude is None) != (longitude is None):
            raise ValidationError("latitude and longitude must be provided together")

        # 新默认仓：先清掉其它默认
        if is_default:
            self.db.execute(update(Warehouse).values(is_default=False))

        w = Warehouse(
            name=name,
            address=address,
            latitude=latitude,
            longitude=longitude,
            phone=phone,
            is_default=bool(is_default),
            is_active=True,
        )
        self.db.add(w)
        self.db.commit()
        self.db.refresh(w)

        log.info("warehouse created: id=%s name=%r default=%s", w.id, w.name, w.is_default)
        return warehouse_to_dict(w)

    # ---------------- zones ----------------

    def list_zones(self) -> List[Dict[str, Any]]:
        rows = self.db.execute(
            select(ShippingZone, Warehouse)
            .outerjoin(Warehouse, ShippingZone.warehouse_id == Warehouse.id)
            .order_by(ShippingZone.created_at.desc(), ShippingZone.id.desc())
        ).all()
        return [zone_to_dict(z, wh) for z, wh in rows]

    def create_zone(
        self,
        *,
        name: str,
        warehouse_id: int,
        province_ids: Optional[Sequence[int]] = None,
        district_ids: Optional[Sequence[int]] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        wh = self.db.get(Warehouse, int(warehouse_id))
        if wh is None:
            raise NotFoundError("Warehouse not found")

        z = ShippingZone(
            name=name,
            warehouse_id=wh.id,
            province_ids=json.dumps([int(x) for x in (province_ids or [])]),
            district_ids=json.dumps([int(x) for x in (district_ids or [])]),
            description=description or "",
            is_active=True,
        )
        self.db.add(z)
        self.db.commit()
        self.db.refresh(z)

        log.info("shipping zone created: id=%s warehouse_id=%s name=%r", z.id, z.warehouse_id, z.name)
        return zone_to_dict(z, wh)

    # ---------------- rates ----------------

    def list_rates(self, zone_id: Optional[int] = None) -> List[Dict[str, Any]]:
        wh = aliased(Warehouse)
        stmt = (
            select(ShippingRate, ShippingZone.name, wh.name)
            .outerjoin(ShippingZone, ShippingRate.zone_id == ShippingZone.id)
            .outerjoin(wh, ShippingZone.warehouse_id == wh.id)
        )
        if zone_id is not None:
            stmt = stmt.where(ShippingRate.zone_id == int(zone_id))
        stmt = stmt.order_by(ShippingRate.min_distance.asc(), ShippingRate.id.asc())

        return [rate_to_dict(r, zn, wn) for r, zn, wn in self.db.execute(stmt).all()]

    def create_rate(
        self,
        *,
        zone_id: int,
        base_rate: float,
        min_distance: Optional[float] = None,
        max_distance: Optional[float] = None,
        per_km_rate: Optional[float] = None,
        min_order_amount: Optional[float] = None,
    ) -> Dict[str, Any]:
        zone = self.db.get(ShippingZone, int(zone_id))
        if zone is None:
            raise NotFoundError("Shipping zone not found")

        mn = float(min_distance or 0)
        if max_distance is not None and float(max_distance) < mn:
            raise ValidationError("max_distance must be greater than or equal to min_distance")

        r = ShippingRate(
            zone_id=zone.id,
            min_distance=mn,
            max_distance=max_distance,
            base_rate=base_rate,
            per_km_rate=per_km_rate or 0,
            min_order_amount=min_order_amount or 0,
            is_active=True,
        )
        self.db.add(r)
        self.db.commit()
        self.db.refresh(r)

        log.info(
            "shipping rate created: id=%s zone_id=%s band=%s-%s",
            r.id,
            r.zone_id,
            r.min_distance,
            r.max_distance,
        )
        wh = self.db.get(Warehouse, zone.warehouse_id)
        return rate_to_dict(r, zone.name, wh.name if wh is not None else None)
