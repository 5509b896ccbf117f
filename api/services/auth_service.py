"""
Login use case: validates credentials shape and hands out a token.

There are no user accounts; any well-formed email/password pair gets a
fresh token (see ``api.core.security``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping
import logging

from api.core.security import issue_token
from api.domain.login import LOGIN_CHECKS
from api.domain.talkers import run_checks

logger = logging.getLogger(__name__)


@dataclass
class LoginSuccess:
    token: str


class AuthService:
    """Handles the login flow."""

    def login(self, payload: Mapping[str, Any]) -> LoginSuccess:
        run_checks(LOGIN_CHECKS, payload)
        logger.info("Token emitido para %s", payload["email"])
        return LoginSuccess(token=issue_token())
