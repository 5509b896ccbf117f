"""Engine/session helpers for the secondary (SQL) talker store.

The engine is built lazily from ``DATABASE_URL`` and cached; ``reset_engine``
disposes it and drops the caches so the next call re-reads the settings.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from api.core.config import get_settings

Base = declarative_base()


def _engine_options(url: str) -> dict:
    options = {"future": True, "pool_pre_ping": True}
    if url.startswith("sqlite"):
        # route functions run in a threadpool
        options["connect_args"] = {"check_same_thread": False}
    return options


@lru_cache
def get_engine() -> Engine:
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, **_engine_options(url))


@lru_cache
def _get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), autoflush=False, future=True)


def reset_engine() -> None:
    """Dispose the cached engine (if any) and forget settings/engine caches."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    _get_sessionmaker.cache_clear()
    get_engine.cache_clear()
    get_settings.cache_clear()


@contextmanager
def get_session() -> Iterator[Session]:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
