# app/services/shipping_calc/pricing.py
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple

from app.models.shipping_rate import ShippingRate


def round_half_up(v: float, places: int = 0) -> Decimal:
    q = Decimal(1).scaleb(-places)
    return Decimal(str(v)).quantize(q, rounding=ROUND_HALF_UP)


def _calc_fee(rate: ShippingRate, distance_km: float, order_amount: float) -> Tuple[float, bool]:
    """
    fee = base_rate + (distance - min_distance) * per_km_rate（仅 per_km_rate > 0 且超出 min_distance）
    min_order_amount > 0 且订单金额达标 => 包邮，fee 归零。

    返回 (未取整 fee, is_free_shipping)。
    """
    base = float(rate.base_rate or 0)
    per_km = float(rate.per_km_rate or 0)
    mn = float(rate.min_distance or 0)
    threshold = float(rate.min_order_amount or 0)

    fee = base
    if per_km > 0 and distance_km > mn:
        fee += (distance_km - mn) * per_km

    is_free = threshold > 0 and float(order_amount) >= threshold
    if is_free:
        fee = 0.0

    return fee, is_free
