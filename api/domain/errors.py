"""Errors raised by request validators."""
from __future__ import annotations


class ValidationError(Exception):
    """A failed check; carries the HTTP status and the message sent back."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
