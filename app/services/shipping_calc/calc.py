# app/services/shipping_calc/calc.py
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.api.errors import NotFoundError
from app.core.config import AppSettings, get_settings
from app.geo.vn_registry import province_coordinates
from app.models.shipping_rate import ShippingRate
from app.models.shipping_zone import ShippingZone
from app.models.warehouse import Warehouse

from .distance import haversine_km
from .matchers import _match_rate, _match_zone
from .pricing import _calc_fee, round_half_up
from .types import Dest, JsonObject

log = logging.getLogger("hacom.shipping")


def _num(v) -> Optional[float]:
    return None if v is None else float(v)


def select_origin_warehouse(db: Session) -> Optional[Warehouse]:
    """
    起运仓：
    1) is_default 且 active（多条时取最新创建）
    2) 否则任意 active 仓（最新创建）
    """
    newest_first = (Warehouse.created_at.desc(), Warehouse.id.desc())

    wh = db.execute(
        select(Warehouse)
        .where(Warehouse.is_default.is_(True), Warehouse.is_active.is_(True))
        .order_by(*newest_first)
        .limit(1)
    ).scalar_one_or_none()
    if wh is not None:
        return wh

    return db.execute(
        select(Warehouse)
        .where(Warehouse.is_active.is_(True))
        .order_by(*newest_first)
        .limit(1)
    ).scalar_one_or_none()


def _distance_km(wh: Warehouse, dest: Dest) -> float:
    # 仓库没录坐标 => 距离按 0 计
    if wh.latitude is None or wh.longitude is None:
        return 0.0
    lat, lon = province_coordinates(dest.province_id)
    return haversine_km(float(wh.latitude), float(wh.longitude), lat, lon)


def _fallback_quote(wh: Warehouse, order_amount: float, settings: AppSettings) -> JsonObject:
    return {
        "shipping_fee": int(settings.SHIPPING_FALLBACK_FEE),
        "distance": 0.0,
        "zone_name": settings.SHIPPING_FALLBACK_ZONE_NAME,
        "warehouse_name": wh.name,
        "is_free_shipping": float(order_amount) >= settings.SHIPPING_FALLBACK_FREE_THRESHOLD,
    }


def calc_shipping(
    db: Session,
    dest: Dest,
    order_amount: float = 0,
    settings: Optional[AppSettings] = None,
) -> JsonObject:
    settings = settings or get_settings()

    wh = select_origin_warehouse(db)
    if wh is None:
        raise NotFoundError("No active warehouse found")

    zones = (
        db.execute(
            select(ShippingZone)
            .where(ShippingZone.warehouse_id == wh.id, ShippingZone.is_active.is_(True))
            .order_by(ShippingZone.id.asc())
        )
        .scalars()
        .all()
    )

    zone = _match_zone(zones, dest)
    if zone is None:
        log.info(
            "shipping calc fallback: warehouse=%s province=%s district=%s",
            wh.id,
            dest.province_id,
            dest.district_id,
        )
        return _fallback_quote(wh, order_amount, settings)

    distance = _distance_km(wh, dest)

    rates = (
        db.execute(
            select(ShippingRate).where(
                ShippingRate.zone_id == zone.id,
                ShippingRate.is_active.is_(True),
            )
        )
        .scalars()
        .all()
    )
    rate = _match_rate(rates, distance)
    if rate is None:
        raise NotFoundError("No shipping rate found for this distance")

    fee, is_free = _calc_fee(rate, distance, order_amount)

    return {
        "shipping_fee": int(round_half_up(fee)),
        "distance": float(round_half_up(distance, 2)),
        "zone_name": zone.name,
        "warehouse_name": wh.name,
        "warehouse_address": wh.address,
        "is_free_shipping": is_free,
        "free_shipping_threshold": _num(rate.min_order_amount),
        "rate_details": {
            "base_rate": _num(rate.base_rate),
            "per_km_rate": _num(rate.per_km_rate),
            "min_distance": _num(rate.min_distance),
            "max_distance": _num(rate.max_distance),
        },
    }
