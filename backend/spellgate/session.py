# spellgate/session.py
"""
Session guard for protected views.

The cookie value is expected in itsdangerous ``Signer`` form
(``<value>.<signature>``).  Only the signature is checked; the payload is
never decoded here.
"""
from __future__ import annotations
from enum import Enum
from functools import wraps

from flask import redirect, request
from itsdangerous import BadSignature, Signer

from .settings import CookieProps

SIGNER_SALT = "spellgate.session"


class SessionStatus(Enum):
    VALID   = "valid"
    MISSING = "missing"
    INVALID = "invalid"


class SessionGuard:
    def __init__(self, cookie: CookieProps, redirect_to: str = "/"):
        self.cookie      = cookie
        self.redirect_to = redirect_to
        self._signer     = Signer(cookie.secret, salt=SIGNER_SALT)

    def verify(self, req=None) -> SessionStatus:
        req = req if req is not None else request
        raw = req.cookies.get(self.cookie.key)
        if not raw:
            return SessionStatus.MISSING
        try:
            self._signer.unsign(raw)
        except BadSignature:
            return SessionStatus.INVALID
        return SessionStatus.VALID

    def guard(self, view):
        """Wrap a view so it only runs for a valid session; redirect otherwise."""
        @wraps(view)
        def wrapper(*args, **kwargs):
            if self.verify() is not SessionStatus.VALID:
                return redirect(self.redirect_to)
            return view(*args, **kwargs)
        return wrapper
