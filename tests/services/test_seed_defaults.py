# tests/services/test_seed_defaults.py
from __future__ import annotations

from sqlalchemy import func, select

from app.models.shipping_rate import ShippingRate
from app.models.shipping_zone import ShippingZone
from app.models.warehouse import Warehouse
from app.seed import seed_shipping_defaults
from app.services.shipping_calc import Dest, calc_shipping


def _count(db, model) -> int:
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def test_seed_inserts_once(db):
    first = seed_shipping_defaults(db)
    assert first == {"warehouses": 2, "shipping_zones": 2, "shipping_rates": 6}

    second = seed_shipping_defaults(db)
    assert second == {"warehouses": 0, "shipping_zones": 0, "shipping_rates": 0}

    assert _count(db, Warehouse) == 2
    assert _count(db, ShippingZone) == 2
    assert _count(db, ShippingRate) == 6


def test_seeded_data_quotes_hanoi_locally(db):
    seed_shipping_defaults(db)

    data = calc_shipping(db, Dest(province_id=1), order_amount=100000)
    assert data["zone_name"] == "Miền Bắc"
    assert data["warehouse_name"] == "Kho chính Hà Nội"
    assert data["distance"] == 0.0
    assert data["shipping_fee"] == 30000

    data = calc_shipping(db, Dest(province_id=1), order_amount=500000)
    assert data["is_free_shipping"] is True
    assert data["shipping_fee"] == 0


def test_seeded_south_zone_belongs_to_second_warehouse(db):
    seed_shipping_defaults(db)

    # 默认仓是河内，南部省份不在其区域内 => 兜底
    data = calc_shipping(db, Dest(province_id=79))
    assert data["zone_name"] == "other region"
