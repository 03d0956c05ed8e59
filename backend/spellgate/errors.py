# spellgate/errors.py
"""
Error kinds raised by handlers and gateways.

Every kind carries the HTTP status the router answers with; the router's
single error handler reads ``status`` and replies ``{"error": message}``.
"""
from __future__ import annotations
from typing import Optional

BAD_REQUEST     = 400
BAD_GATEWAY     = 502
GATEWAY_TIMEOUT = 504


class SpellgateError(Exception):
    status: int = BAD_REQUEST

    @property
    def message(self) -> str:
        return str(self)


class RouteError(SpellgateError):
    """Raised on purpose by a handler with an explicit client-facing status."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status


class ValidationError(SpellgateError):
    """Request body is missing a field or the field has the wrong type."""

    status = BAD_REQUEST

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"'{field}' is required")
        self.field = field


class UpstreamError(SpellgateError):
    """An external grammar/spelling capability failed or answered garbage."""

    status = BAD_GATEWAY

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class UpstreamTimeout(UpstreamError):
    status = GATEWAY_TIMEOUT


def status_for(err: BaseException) -> int:
    """HTTP status for any raised error; unknown errors fall back to 400."""
    if isinstance(err, SpellgateError):
        return err.status
    return BAD_REQUEST
