# app/db/session.py
# 统一的同步会话工厂 + FastAPI 依赖（get_db）
from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_settings

log = logging.getLogger("hacom.db")


# ---- DSN 归一：postgres:// / postgresql:// 统一到 psycopg3 ----
def _normalize_dsn(url: str) -> str:
    url = (url or "").strip()
    # 有些环境会把值写成 '"postgresql://..."'，这里统一剥掉两侧引号
    if (url.startswith('"') and url.endswith('"')) or (url.startswith("'") and url.endswith("'")):
        url = url[1:-1].strip()
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+psycopg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def create_sync_engine(url_str: str, *, echo: bool = False) -> Engine:
    """
    后端专属参数：
    - PostgreSQL: pool_pre_ping
    - SQLite: 仅 check_same_thread=False
    """
    dsn = _normalize_dsn(url_str)
    backend = make_url(dsn).get_backend_name()

    kwargs: Dict[str, Any] = {"echo": echo, "future": True}
    if backend.startswith("postgresql"):
        kwargs["pool_pre_ping"] = True
    if backend.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}

    return create_engine(dsn, **kwargs)


_settings = get_settings()

engine = create_sync_engine(_settings.DATABASE_URL, echo=_settings.SQL_ECHO)
log.info("[DB] Using backend: %s", engine.url.get_backend_name())

SessionLocal: sessionmaker[Session] = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    class_=Session,
)


# ---- FastAPI 依赖 ----
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
