"""Data access helpers for the relational talker table, backed by SQLAlchemy."""
from __future__ import annotations

from sqlalchemy import delete, select

from api.db.models import Talker
from api.db.session import get_session


class SQLRepository:
    """Bulk read (and seed) helpers wrapping the SQLAlchemy session."""

    def find_all(self) -> list[dict]:
        """Return every row as ``{id, name, age, talk_rate, talk_watched_at}``."""
        with get_session() as session:
            rows = session.execute(select(Talker).order_by(Talker.id)).scalars().all()
            return [
                {
                    "id": row.id,
                    "name": row.name,
                    "age": row.age,
                    "talk_rate": row.talk_rate,
                    "talk_watched_at": row.talk_watched_at,
                }
                for row in rows
            ]

    def replace_all(self, records: list[dict]) -> int:
        """Replace the table contents with nested talker records."""
        with get_session() as session:
            session.execute(delete(Talker))
            for record in records:
                talk = record.get("talk") or {}
                session.add(
                    Talker(
                        id=record["id"],
                        name=record["name"],
                        age=record["age"],
                        talk_watched_at=talk.get("watchedAt"),
                        talk_rate=talk.get("rate"),
                    )
                )
            session.commit()
        return len(records)
