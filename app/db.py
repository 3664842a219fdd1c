"""Database engine, session factory and the FastAPI session dependency."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import get_settings

Base = declarative_base()

SessionLocal = sessionmaker(autocommit=False, autoflush=False)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Build the engine on first use so importing models never needs a driver."""
    settings = get_settings()
    url = settings.database_url_obj
    if url.get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        connect_args={"application_name": settings.app_name},
    )


def get_db() -> Iterator[Session]:
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()
