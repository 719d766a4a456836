# app/services/shipping_calc/matchers.py
from __future__ import annotations

from typing import List, Optional, Sequence

from app.models.shipping_rate import ShippingRate
from app.models.shipping_zone import ShippingZone

from .types import Dest, parse_id_list


def _match_zone(zones: Sequence[ShippingZone], dest: Dest) -> Optional[ShippingZone]:
    """
    Zone 匹配（按传入顺序，第一个命中即返回；没有 priority 字段）：

    - province_ids 为空 或 包含目的省
    - 且 district_ids 为空 / 请求未带区县 / 包含目的区县
    - province_ids / district_ids 解析失败的 zone 直接跳过（不报错，不区分“不命中”）
    """
    for z in zones:
        if not z.is_active:
            continue

        province_ids = parse_id_list(z.province_ids)
        district_ids = parse_id_list(z.district_ids)
        if province_ids is None or district_ids is None:
            continue

        province_hit = not province_ids or dest.province_id in province_ids
        district_hit = not district_ids or not dest.district_id or dest.district_id in district_ids

        if province_hit and district_hit:
            return z

    return None


def _match_rate(rates: Sequence[ShippingRate], distance_km: float) -> Optional[ShippingRate]:
    """
    距离段命中：闭区间 [min_distance, max_distance]
    - max_distance 为 NULL 视为 infinity
    - 若有重叠，选择 min_distance 最大的一条；再相同取 id 最小
    """
    d = float(distance_km)

    # 数值稳定性：避免浮点误差把边界判错
    eps = 1e-9

    candidates: List[ShippingRate] = []
    for r in rates:
        if not r.is_active:
            continue

        mn = float(r.min_distance or 0)
        mx = float(r.max_distance) if r.max_distance is not None else None

        if d + eps < mn:
            continue
        if mx is not None and d > mx + eps:
            continue

        candidates.append(r)

    if not candidates:
        return None

    candidates.sort(key=lambda r: (-float(r.min_distance or 0), int(r.id or 0)))
    return candidates[0]
