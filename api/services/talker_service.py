"""
Talker use cases: listing, search, lookup and the mutating operations.

Validation happens before these methods are called; the service only deals
with existence and persistence.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional
import logging

from sqlalchemy.exc import SQLAlchemyError

from api.domain.talkers import build_talker, filter_talkers, talker_from_row
from api.repositories.json_storage import StorageError, TalkerStore
from api.repositories.sql_repository import SQLRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Pessoa palestrante não encontrada"


class TalkerNotFoundError(Exception):
    """Raised when no record matches the requested id."""

    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message)
        self.message = message


def parse_id(raw: str) -> int:
    """Numeric id from a path segment; anything else can never match."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise TalkerNotFoundError()


class TalkerService:
    """Orchestrates the JSON store (and the SQL read path) for talker routes."""

    def __init__(self, store: Optional[TalkerStore] = None, repository: Optional[SQLRepository] = None) -> None:
        self.store = store or TalkerStore()
        self.repository = repository or SQLRepository()

    def list_all(self) -> list[dict]:
        return self.store.read_all()

    def list_from_db(self) -> list[dict]:
        try:
            rows = self.repository.find_all()
        except (SQLAlchemyError, RuntimeError) as exc:
            logger.error("Falha ao consultar talkers no banco: %s", exc)
            raise StorageError(str(exc)) from exc
        return [talker_from_row(row) for row in rows]

    def search(self, q: Optional[str] = None, rate: Optional[str] = None, date: Optional[str] = None) -> list[dict]:
        return filter_talkers(self.store.read_all(), q=q, rate=rate, date=date)

    def get(self, talker_id: int) -> dict:
        talker = self.store.get(talker_id)
        if talker is None:
            raise TalkerNotFoundError()
        return talker

    def create(self, payload: Mapping[str, Any]) -> dict:
        talker = self.store.create(lambda new_id: build_talker(new_id, payload))
        logger.info("Talker %s criado", talker["id"])
        return talker

    def update(self, talker_id: int, payload: Mapping[str, Any]) -> dict:
        talker = self.store.replace(talker_id, build_talker(talker_id, payload))
        if talker is None:
            raise TalkerNotFoundError()
        logger.info("Talker %s atualizado", talker_id)
        return talker

    def update_rate(self, talker_id: int, rate: int) -> dict:
        talker = self.store.update_rate(talker_id, rate)
        if talker is None:
            raise TalkerNotFoundError()
        logger.info("Talker %s: rate=%s", talker_id, rate)
        return talker

    def delete(self, talker_id: int) -> None:
        removed = self.store.delete(talker_id)
        logger.info("Talker %s removido=%s", talker_id, removed)
