# app/router_mount.py
from __future__ import annotations

from fastapi import FastAPI


def mount_routers(app: FastAPI) -> None:
    from app.api.routers.locations import router as locations_router
    from app.api.routers.shipping_admin import router as shipping_admin_router
    from app.api.routers.shipping_calc import router as shipping_calc_router
    from app.metrics import router as metrics_router

    # 前台：运费计算 / 地区
    app.include_router(shipping_calc_router)
    app.include_router(locations_router)

    # 后台：仓库 / 区域 / 运价
    app.include_router(shipping_admin_router)

    # 观测
    app.include_router(metrics_router)
