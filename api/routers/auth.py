from __future__ import annotations

from fastapi import APIRouter, Depends

from api.routers.deps import get_auth_service, json_body
from api.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/login")
def login(payload: dict = Depends(json_body), auth_service: AuthService = Depends(get_auth_service)):
    result = auth_service.login(payload)
    return {"token": result.token}
