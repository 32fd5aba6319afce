from __future__ import annotations

import os

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine


def database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    user = os.getenv("POSTGRES_USER", "scorelist")
    password = os.getenv("POSTGRES_PASSWORD", "scorelist")
    host = os.getenv("POSTGRES_HOST", "postgres")
    port = os.getenv("POSTGRES_PORT", "5432")
    db = os.getenv("POSTGRES_DB", "scorelist")
    return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{db}"


_engine: Engine | None = None
_migrated = False


def get_engine() -> Engine:
    """Get or create the process-wide engine (it owns the connection pool)."""
    global _engine
    if _engine is None:
        _engine = create_engine(database_url(), pool_pre_ping=True)
    return _engine


def create_session() -> Session:
    global _migrated
    if not _migrated:
        from scorelist_api.db.init_db import auto_migrate
        auto_migrate()
        _migrated = True
    return Session(get_engine())
