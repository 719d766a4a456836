# app/metrics/__init__.py
"""
Prometheus 指标：

- shipping: 运费计算结果计数（ok / free / fallback / 各类失败）

/metrics 路由导出默认 REGISTRY。
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST, REGISTRY, generate_latest

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def metrics() -> Response:
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


__all__ = ["router"]
