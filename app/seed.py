# app/seed.py
"""
默认运费基础数据（仓库 / 区域 / 距离段运价）。

每张表只在为空时写入，可重复执行：
    python -m app.seed
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.db.base import Base, init_models
from app.models.shipping_rate import ShippingRate
from app.models.shipping_zone import ShippingZone
from app.models.warehouse import Warehouse

log = logging.getLogger("hacom.seed")

DEFAULT_WAREHOUSES: List[Dict[str, Any]] = [
    {
        "name": "Kho chính Hà Nội",
        "address": "123 Đường ABC, Quận Cầu Giấy, Hà Nội",
        "latitude": 21.0285,
        "longitude": 105.8542,
        "is_default": True,
    },
    {
        "name": "Kho TP.HCM",
        "address": "456 Đường XYZ, Quận 1, TP Hồ Chí Minh",
        "latitude": 10.8231,
        "longitude": 106.6297,
        "is_default": False,
    },
]

NORTH_PROVINCES = [1, 33, 77, 2, 4, 6, 8, 10, 11, 12, 14, 15, 17, 19, 22, 24, 25, 27, 30, 31, 35, 36, 37, 38, 40, 42, 44, 45, 46]
SOUTH_PROVINCES = [79, 92, 70, 72, 74, 75, 77, 80, 82, 83, 84, 86, 87, 89, 91, 93, 94, 95, 96]

DEFAULT_ZONES: List[Dict[str, Any]] = [
    {"name": "Miền Bắc", "province_ids": NORTH_PROVINCES, "description": "Khu vực miền Bắc"},
    {"name": "Miền Nam", "province_ids": SOUTH_PROVINCES, "description": "Khu vực miền Nam"},
]

# (min_distance, max_distance, base_rate, per_km_rate)，包邮门槛统一 500k
DEFAULT_RATE_BANDS: List[List[tuple]] = [
    [(0, 50, 30000, 1000), (50, 200, 50000, 1500), (200, None, 80000, 2000)],
    [(0, 50, 35000, 1200), (50, 200, 55000, 1800), (200, None, 85000, 2200)],
]
FREE_SHIPPING_THRESHOLD = 500000


def _count(db: Session, model) -> int:
    return int(db.execute(select(func.count()).select_from(model)).scalar_one())


def seed_shipping_defaults(db: Session) -> Dict[str, int]:
    """返回本次各表新增行数。"""
    created = {"warehouses": 0, "shipping_zones": 0, "shipping_rates": 0}

    if _count(db, Warehouse) == 0:
        for w in DEFAULT_WAREHOUSES:
            db.add(Warehouse(is_active=True, **w))
            created["warehouses"] += 1
        db.flush()

    if _count(db, ShippingZone) == 0:
        wh_ids = db.execute(select(Warehouse.id).order_by(Warehouse.id.asc()).limit(2)).scalars().all()
        if wh_ids:
            for i, z in enumerate(DEFAULT_ZONES):
                wid = wh_ids[i] if i < len(wh_ids) else wh_ids[0]
                db.add(
                    ShippingZone(
                        name=z["name"],
                        warehouse_id=wid,
                        province_ids=json.dumps(z["province_ids"]),
                        district_ids=json.dumps([]),
                        description=z["description"],
                        is_active=True,
                    )
                )
                created["shipping_zones"] += 1
            db.flush()

    if _count(db, ShippingRate) == 0:
        zone_ids = db.execute(select(ShippingZone.id).order_by(ShippingZone.id.asc()).limit(2)).scalars().all()
        for zid, bands in zip(zone_ids, DEFAULT_RATE_BANDS):
            for mn, mx, base, per_km in bands:
                db.add(
                    ShippingRate(
                        zone_id=zid,
                        min_distance=mn,
                        max_distance=mx,
                        base_rate=base,
                        per_km_rate=per_km,
                        min_order_amount=FREE_SHIPPING_THRESHOLD,
                        is_active=True,
                    )
                )
                created["shipping_rates"] += 1

    db.commit()
    log.info("seed done: %s", created)
    return created


def main() -> None:
    from app.core.config import get_settings
    from app.core.logging import setup_logging
    from app.db.session import SessionLocal, engine

    setup_logging(get_settings().LOG_LEVEL)
    init_models()
    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        seed_shipping_defaults(db)


if __name__ == "__main__":
    main()
