"""SQLAlchemy models mirroring the JSON talker records."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class Talker(Base):
    """Flattened talker row; ``talk`` fields live in their own columns."""

    __tablename__ = "talkers"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    talk_watched_at = Column(String(10), nullable=False)
    talk_rate = Column(Integer, nullable=False)
