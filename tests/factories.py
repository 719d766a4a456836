# tests/factories.py
import json
from typing import Optional, Sequence

from app.models.shipping_rate import ShippingRate
from app.models.shipping_zone import ShippingZone
from app.models.warehouse import Warehouse

HANOI = (21.0285, 105.8542)
HCMC = (10.8231, 106.6297)


def make_warehouse(
    db,
    name: str = "Kho Hà Nội",
    *,
    coords: Optional[tuple] = HANOI,
    is_default: bool = False,
    is_active: bool = True,
    address: str = "123 Cầu Giấy, Hà Nội",
) -> Warehouse:
    lat, lon = coords if coords is not None else (None, None)
    wh = Warehouse(
        name=name,
        address=address,
        latitude=lat,
        longitude=lon,
        is_default=is_default,
        is_active=is_active,
    )
    db.add(wh)
    db.flush()
    return wh


def make_zone(
    db,
    wh: Warehouse,
    name: str = "Miền Bắc",
    *,
    province_ids: Sequence[int] = (),
    district_ids: Sequence[int] = (),
    raw_province_ids: Optional[str] = None,
    is_active: bool = True,
) -> ShippingZone:
    z = ShippingZone(
        warehouse_id=wh.id,
        name=name,
        province_ids=raw_province_ids if raw_province_ids is not None else json.dumps(list(province_ids)),
        district_ids=json.dumps(list(district_ids)),
        is_active=is_active,
    )
    db.add(z)
    db.flush()
    return z


def make_rate(
    db,
    zone: ShippingZone,
    *,
    min_distance: float = 0,
    max_distance: Optional[float] = None,
    base_rate: float = 20000,
    per_km_rate: float = 0,
    min_order_amount: float = 0,
    is_active: bool = True,
) -> ShippingRate:
    r = ShippingRate(
        zone_id=zone.id,
        min_distance=min_distance,
        max_distance=max_distance,
        base_rate=base_rate,
        per_km_rate=per_km_rate,
        min_order_amount=min_order_amount,
        is_active=is_active,
    )
    db.add(r)
    db.flush()
    return r
