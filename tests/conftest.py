from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.app import create_app  # noqa: E402
from api.db.session import reset_engine  # noqa: E402

SAMPLE_TALKERS = [
    {"name": "Henrique Albuquerque", "age": 62, "id": 1, "talk": {"watchedAt": "23/10/2020", "rate": 5}},
    {"name": "Heloísa Albuquerque", "age": 67, "id": 2, "talk": {"watchedAt": "23/10/2020", "rate": 3}},
    {"name": "Ricardo Xavier Filho", "age": 33, "id": 3, "talk": {"watchedAt": "12/05/2021", "rate": 3}},
    {"name": "Marcos Costa", "age": 24, "id": 4, "talk": {"watchedAt": "23/10/2020", "rate": 4}},
]


@pytest.fixture()
def talker_file(tmp_path, monkeypatch):
    """Copia os talkers de exemplo para um arquivo temporário e aponta TALKER_FILE para ele."""
    path = tmp_path / "talker.json"
    path.write_text(json.dumps(SAMPLE_TALKERS, ensure_ascii=False), encoding="utf-8")
    monkeypatch.setenv("TALKER_FILE", str(path))
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    reset_engine()
    yield path
    reset_engine()


def read_file(path: Path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def client(talker_file):
    return TestClient(create_app())


@pytest.fixture()
def token(client):
    response = client.post("/login", json={"email": "a@b.com", "password": "123456"})
    assert response.status_code == 200
    return response.json()["token"]
