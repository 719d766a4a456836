# app/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.errors import BizError, biz_error_handler, error_body
from app.core.config import get_settings
from app.core.logging import setup_logging
from app.router_mount import mount_routers

settings = get_settings()
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("hacom")

app = FastAPI(
    title="HACOM Shipping",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def _unhandled_exc(_req: Request, exc: Exception):
    logger.exception("UNHANDLED_EXC: %s", exc)
    return JSONResponse(status_code=500, content=error_body("Internal server error"))


@app.exception_handler(BizError)
async def _biz_exc(req: Request, exc: BizError):
    return biz_error_handler(req, exc)


@app.exception_handler(RequestValidationError)
async def _validation_exc(_req: Request, exc: RequestValidationError):
    # 统一信封：请求体不合法按 400 处理
    errs = exc.errors()
    if errs:
        first = errs[0]
        loc = ".".join(str(x) for x in first.get("loc", ()) if x != "body")
        message = f"Invalid request: {loc}: {first.get('msg', 'invalid')}" if loc else "Invalid request"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content=error_body(message))


@app.exception_handler(StarletteHTTPException)
async def _http_exc(_req: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content=error_body(str(exc.detail)))


mount_routers(app)


@app.get("/")
async def root():
    return {"name": "HACOM Shipping", "version": "1.0.0"}


@app.get("/ping")
async def ping():
    return {"status": "ok"}


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
