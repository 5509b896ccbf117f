"""Shared request dependencies: service lookup, token gate and JSON body."""
from __future__ import annotations

import json

from fastapi import Header, Request

from api.core.security import verify_token
from api.services.auth_service import AuthService
from api.services.talker_service import TalkerService


def get_talker_service(request: Request) -> TalkerService:
    svc = getattr(getattr(request.app, "state", None), "talker_service", None)
    if not svc:
        raise RuntimeError("TalkerService nao configurado")
    return svc


def get_auth_service(request: Request) -> AuthService:
    svc = getattr(getattr(request.app, "state", None), "auth_service", None)
    if not svc:
        raise RuntimeError("AuthService nao configurado")
    return svc


def require_token(authorization: str | None = Header(default=None)) -> None:
    verify_token(authorization)


async def json_body(request: Request) -> dict:
    """Parsed JSON object body; anything else is treated as ``{}``."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
