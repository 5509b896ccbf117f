"""Token helpers (issue and shape verification).

Tokens are opaque random strings with no stored mapping to a user and no
expiry. ``verify_token`` only checks that the presented value looks like a
token this module would issue; it does not prove the value was ever issued.
"""

from __future__ import annotations

import secrets

from api.domain.errors import ValidationError

TOKEN_LENGTH = 16

MSG_TOKEN_MISSING = "Token não encontrado"
MSG_TOKEN_INVALID = "Token inválido"


def issue_token() -> str:
    """Return a fresh 16-char hex token."""
    return secrets.token_hex(TOKEN_LENGTH // 2)


def verify_token(token: str | None) -> None:
    if not token:
        raise ValidationError(401, MSG_TOKEN_MISSING)
    if not isinstance(token, str) or len(token) != TOKEN_LENGTH:
        raise ValidationError(401, MSG_TOKEN_INVALID)
