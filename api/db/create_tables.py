"""Create (or drop) the ``talkers`` table.

Run with ``python -m api.db.create_tables``; ``scripts/seed_db.py`` calls
``create_all`` before loading rows.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from . import models  # noqa: F401  # registers Talker on Base.metadata
from .session import Base, get_engine

logger = logging.getLogger(__name__)


def create_all(engine: Optional[Engine] = None) -> None:
    engine = engine or get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Tabelas criadas: %s", ", ".join(sorted(Base.metadata.tables)))


def drop_all(engine: Optional[Engine] = None) -> None:
    Base.metadata.drop_all(bind=engine or get_engine())


if __name__ == "__main__":
    try:
        create_all()
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Falha ao criar tabelas: {exc}") from exc
    print("OK: tabelas criadas")
