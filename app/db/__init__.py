# app/db/__init__.py
from __future__ import annotations

from app.db.base import Base, init_models
from app.db.session import SessionLocal, engine, get_db

__all__ = ["Base", "init_models", "SessionLocal", "engine", "get_db"]
