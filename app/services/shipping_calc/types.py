# app/services/shipping_calc/types.py
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

JsonObject = Dict[str, Any]


@dataclass
class Dest:
    province_id: int
    district_id: Optional[int] = None


def _to_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, str) and v.strip().isdigit():
        return int(v.strip())
    return None


def parse_id_list(raw: Optional[str]) -> Optional[List[int]]:
    """
    zone.province_ids / district_ids -> [int]
    - NULL / 空串 -> []（通配）
    - 非法 JSON、不是数组、或含非整数元素 -> None（调用方跳过该 zone）
    - 元素允许 int 或纯数字字符串
    """
    if raw is None:
        return []
    text = raw.strip()
    if not text:
        return []

    try:
        data = json.loads(text)
    except ValueError:
        return None

    if not isinstance(data, list):
        return None

    out: List[int] = []
    for x in data:
        v = _to_int(x)
        if v is None:
            return None
        out.append(v)
    return out
