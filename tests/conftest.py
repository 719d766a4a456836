# tests/conftest.py
from __future__ import annotations

import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# ============================================================
# 在 import app.main 之前固定到内存库，避免落盘 ./hacom.db
# ============================================================
os.environ.setdefault("DATABASE_URL", "sqlite://")

from app.db.base import Base, init_models  # noqa: E402
from app.db.deps import get_db  # noqa: E402
from app.main import app  # noqa: E402


# =========================================
# 每用例独立内存库（StaticPool：TestClient 线程共享同一连接）
# =========================================
@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    init_models()
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        Base.metadata.drop_all(bind=eng)
        eng.dispose()


@pytest.fixture(scope="function")
def session_maker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, class_=Session)


@pytest.fixture(scope="function")
def db(session_maker) -> Generator[Session, None, None]:
    """
    测试直接造数用的 Session；造完数据记得 commit，路由侧用的是另一个 Session。
    """
    sess = session_maker()
    try:
        yield sess
    finally:
        sess.close()


@pytest.fixture(scope="function")
def client(session_maker) -> Generator[TestClient, None, None]:
    def _override_get_db() -> Generator[Session, None, None]:
        s = session_maker()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_db, None)
