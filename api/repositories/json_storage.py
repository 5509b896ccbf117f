"""
JSON-file persistence for talker records.

The document is a single JSON array. Writes go to a temporary file next to
the target and are swapped in with ``os.replace``, so readers see either the
old or the new document. Every read-modify-write runs under one lock; two
concurrent writers are serialized instead of overwriting each other.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
import json
import logging
import os
import tempfile
import threading

from api.core.config import get_settings

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the backing document cannot be read strictly or written."""


class TalkerStore:
    """Whole-document access plus per-record operations keyed by id."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path else get_settings().talker_file
        self._lock = threading.Lock()

    # -------------------------- whole document --------------------------
    def _load(self) -> list[dict]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError(str(exc)) from exc
        if not isinstance(data, list):
            raise StorageError(f"{self.path.name} nao contem uma lista de registros")
        return data

    def read_all(self) -> list[dict]:
        """Return every record; a failed read is logged and yields []."""
        try:
            return self._load()
        except StorageError as exc:
            logger.error("Erro ao ler o arquivo %s: %s", self.path, exc)
            return []

    def overwrite(self, records: list[dict]) -> None:
        payload = json.dumps(records, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            logger.error("Erro ao gravar o arquivo %s: %s", self.path, exc)
            raise StorageError(str(exc)) from exc

    def _mutate(self, change: Callable[[list[dict]], object]):
        """Load strictly, apply ``change`` and persist, all under the lock.

        ``change`` edits the list in place and returns the operation result;
        a ``None`` result means nothing changed and the write is skipped.
        """
        with self._lock:
            records = self._load() if self.path.exists() else []
            result = change(records)
            if result is not None:
                self.overwrite(records)
            return result

    # -------------------------- per record --------------------------
    @staticmethod
    def _index_of(records: list[dict], talker_id: int) -> Optional[int]:
        for idx, record in enumerate(records):
            if record.get("id") == talker_id:
                return idx
        return None

    @staticmethod
    def next_id(records: list[dict]) -> int:
        ids = [r.get("id") for r in records if isinstance(r.get("id"), int)]
        return max(ids, default=0) + 1

    def get(self, talker_id: int) -> Optional[dict]:
        records = self.read_all()
        idx = self._index_of(records, talker_id)
        return records[idx] if idx is not None else None

    def create(self, build: Callable[[int], dict]) -> dict:
        """Append the record returned by ``build(new_id)``."""
        def change(records: list[dict]) -> dict:
            record = build(self.next_id(records))
            records.append(record)
            return record

        return self._mutate(change)

    def replace(self, talker_id: int, record: dict) -> Optional[dict]:
        def change(records: list[dict]) -> Optional[dict]:
            idx = self._index_of(records, talker_id)
            if idx is None:
                return None
            records[idx] = record
            return record

        return self._mutate(change)

    def update_rate(self, talker_id: int, rate: int) -> Optional[dict]:
        def change(records: list[dict]) -> Optional[dict]:
            idx = self._index_of(records, talker_id)
            if idx is None:
                return None
            record = records[idx]
            talk = dict(record.get("talk") or {})
            talk["rate"] = rate
            record["talk"] = talk
            return record

        return self._mutate(change)

    def delete(self, talker_id: int) -> bool:
        def change(records: list[dict]) -> bool:
            idx = self._index_of(records, talker_id)
            if idx is not None:
                del records[idx]
            return idx is not None

        # the document is rewritten even when nothing was removed
        return self._mutate(change)
