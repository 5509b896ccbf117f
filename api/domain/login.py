"""Validation rules for the login payload."""
from __future__ import annotations

import re
from typing import Any, Mapping

from api.domain.errors import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_MIN_LENGTH = 6


def validate_email(payload: Mapping[str, Any]) -> None:
    email = payload.get("email")
    if not email:
        raise ValidationError(400, 'O campo "email" é obrigatório')
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError(400, 'O "email" deve ter o formato "email@email.com"')


def validate_password(payload: Mapping[str, Any]) -> None:
    password = payload.get("password")
    if not password:
        raise ValidationError(400, 'O campo "password" é obrigatório')
    if len(str(password)) < PASSWORD_MIN_LENGTH:
        raise ValidationError(400, f'O "password" deve ter pelo menos {PASSWORD_MIN_LENGTH} caracteres')


LOGIN_CHECKS = (validate_email, validate_password)
