from __future__ import annotations

import pytest

from api.core.security import verify_token
from api.domain.errors import ValidationError
from api.services.auth_service import AuthService


def test_login_issues_fresh_token_each_call():
    svc = AuthService()
    first = svc.login({"email": "a@b.com", "password": "123456"})
    second = svc.login({"email": "a@b.com", "password": "123456"})
    verify_token(first.token)
    assert first.token != second.token


def test_login_rejects_bad_payload():
    with pytest.raises(ValidationError) as info:
        AuthService().login({"email": "a@b.com"})
    assert info.value.status_code == 400


def test_login_route(client):
    response = client.post("/login", json={"email": "a@b.com", "password": "123456"})
    assert response.status_code == 200
    assert response.json()["token"]

    response = client.post("/login", json={"password": "123456"})
    assert response.status_code == 400
    assert response.json() == {"message": 'O campo "email" é obrigatório'}
