"""One-off seed script: JSON (talker.json) -> SQL table used by GET /talker/db."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

# Garantir que o pacote api seja importável quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from api.core.config import get_settings
from api.db.create_tables import create_all
from api.repositories.sql_repository import SQLRepository


def _load_json(path: Path) -> list[dict]:
    if not path.exists():
        raise SystemExit(f"Arquivo nao encontrado: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise SystemExit(f"{path} deve conter uma lista de talkers")
    return data


def seed(path: Path) -> int:
    create_all()
    return SQLRepository().replace_all(_load_json(path))


def main() -> None:
    ap = argparse.ArgumentParser(description="Copiar talker.json para o banco SQL")
    ap.add_argument("--file", help="Arquivo JSON de origem (default: TALKER_FILE)")
    args = ap.parse_args()
    path = Path(args.file) if args.file else get_settings().talker_file
    count = seed(path)
    print(f"OK: {count} talkers copiados para o banco")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
