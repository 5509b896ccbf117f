"""SQL side of the talker store: engine/session helpers and the Talker model."""

from .models import Talker
from .session import Base, get_engine, get_session, reset_engine

__all__ = ["Base", "Talker", "get_engine", "get_session", "reset_engine"]
