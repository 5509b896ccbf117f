"""Domain rules for talker records: field checks, query checks and filters."""
from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Mapping, Optional

from api.domain.errors import ValidationError

# [0-9] rather than \d: \d also matches non-ASCII digits
DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
RATE_PARAM_PATTERN = re.compile(r"[0-9]+")
NAME_MIN_LENGTH = 3
MIN_AGE = 18
RATE_RANGE = range(1, 6)

MSG_NAME_REQUIRED = 'O campo "name" é obrigatório'
MSG_NAME_SHORT = f'O "name" deve ter pelo menos {NAME_MIN_LENGTH} caracteres'
MSG_AGE_REQUIRED = 'O campo "age" é obrigatório'
MSG_AGE_INVALID = f'O campo "age" deve ser um número inteiro igual ou maior que {MIN_AGE}'
MSG_TALK_REQUIRED = 'O campo "talk" é obrigatório'
MSG_WATCHED_AT_REQUIRED = 'O campo "watchedAt" é obrigatório'
MSG_WATCHED_AT_INVALID = 'O campo "watchedAt" deve ter o formato "dd/mm/aaaa"'
MSG_RATE_REQUIRED = 'O campo "rate" é obrigatório'
MSG_RATE_INVALID = 'O campo "rate" deve ser um número inteiro entre 1 e 5'
MSG_DATE_PARAM_INVALID = 'O parâmetro "date" deve ter o formato "dd/mm/aaaa"'


def is_valid_date(value: Any) -> bool:
    """True for strings shaped like dd/mm/yyyy."""
    return isinstance(value, str) and bool(DATE_PATTERN.fullmatch(value))


def as_integer(value: Any) -> Optional[int]:
    """Integer value of ``value``, accepting integral floats such as 5.0.

    bool is an int subclass; JSON true/false is never a number here.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def is_valid_rate(value: Any) -> bool:
    return as_integer(value) in RATE_RANGE


# -------------------------- body checks --------------------------
def validate_name(payload: Mapping[str, Any]) -> None:
    name = payload.get("name")
    if not name:
        raise ValidationError(400, MSG_NAME_REQUIRED)
    if not isinstance(name, str) or len(name) < NAME_MIN_LENGTH:
        raise ValidationError(400, MSG_NAME_SHORT)


def validate_age(payload: Mapping[str, Any]) -> None:
    age = payload.get("age")
    if age is None or age == "":
        raise ValidationError(400, MSG_AGE_REQUIRED)
    number = as_integer(age)
    if number is None or number < MIN_AGE:
        raise ValidationError(400, MSG_AGE_INVALID)


def validate_talk(payload: Mapping[str, Any]) -> None:
    if not isinstance(payload.get("talk"), dict):
        raise ValidationError(400, MSG_TALK_REQUIRED)


def validate_watched_at(payload: Mapping[str, Any]) -> None:
    watched_at = payload["talk"].get("watchedAt")
    if not watched_at:
        raise ValidationError(400, MSG_WATCHED_AT_REQUIRED)
    if not is_valid_date(watched_at):
        raise ValidationError(400, MSG_WATCHED_AT_INVALID)


def _check_rate(value: Any) -> None:
    if value is None or value == "":
        raise ValidationError(400, MSG_RATE_REQUIRED)
    if not is_valid_rate(value):
        raise ValidationError(400, MSG_RATE_INVALID)


def validate_rate(payload: Mapping[str, Any]) -> None:
    _check_rate(payload["talk"].get("rate"))


def validate_rate_patch(payload: Mapping[str, Any]) -> None:
    _check_rate(payload.get("rate"))


# order matters: talk must be checked before its nested fields
TALKER_CHECKS: tuple[Callable[[Mapping[str, Any]], None], ...] = (
    validate_name,
    validate_age,
    validate_talk,
    validate_watched_at,
    validate_rate,
)


# -------------------------- query checks --------------------------
def validate_rate_param(rate: Optional[str]) -> None:
    if rate is None:
        return
    if not RATE_PARAM_PATTERN.fullmatch(rate) or int(rate) not in RATE_RANGE:
        raise ValidationError(400, MSG_RATE_INVALID)


def validate_date_param(date: Optional[str]) -> None:
    if date is None:
        return
    if not is_valid_date(date):
        raise ValidationError(400, MSG_DATE_PARAM_INVALID)


def run_checks(checks: Iterable[Callable[[Mapping[str, Any]], None]], payload: Mapping[str, Any]) -> None:
    """Run checks in order; the first failure propagates and stops the rest."""
    for check in checks:
        check(payload)


# -------------------------- shaping/filters --------------------------
def build_talker(talker_id: int, payload: Mapping[str, Any]) -> dict:
    """Normalize a validated payload into the stored record shape."""
    talk = payload["talk"]
    return {
        "id": talker_id,
        "name": payload["name"],
        "age": as_integer(payload["age"]),
        "talk": {"watchedAt": talk["watchedAt"], "rate": as_integer(talk["rate"])},
    }


def filter_talkers(
    talkers: Iterable[dict],
    *,
    q: Optional[str] = None,
    rate: Optional[str] = None,
    date: Optional[str] = None,
) -> list[dict]:
    """Apply name, rate and date filters conjunctively, in that order."""
    result = list(talkers)
    if q:
        result = [t for t in result if q in str(t.get("name", ""))]
    if rate is not None:
        wanted = int(rate)
        result = [t for t in result if (t.get("talk") or {}).get("rate") == wanted]
    if date is not None:
        result = [t for t in result if (t.get("talk") or {}).get("watchedAt") == date]
    return result


def talker_from_row(row: Mapping[str, Any]) -> dict:
    """Reshape a flattened SQL row into the nested record shape."""
    return {
        "name": row.get("name"),
        "age": row.get("age"),
        "id": row.get("id"),
        "talk": {"watchedAt": row.get("talk_watched_at"), "rate": row.get("talk_rate")},
    }
