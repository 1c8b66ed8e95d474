"""
Shared access-code gate.

There is exactly one valid session value system-wide: whoever holds the
cookie is "the user". Good enough for an internal single-user dashboard;
anything wider needs per-user credentials and a signed session token.
"""
from __future__ import annotations

import hmac
import logging

from fastapi import Depends, HTTPException, Request
from fastapi.responses import Response

from compliance.config import Settings, settings

logger = logging.getLogger(__name__)

AUTH_COOKIE = "compliance-auth"
AUTH_COOKIE_VALUE = "authenticated"
SESSION_MAX_AGE = 60 * 60 * 24 * 7  # 1 week
LOGIN_PATH = "/login"


class LoginRequired(Exception):
    """Raised when a browser-facing route is hit without a session.

    Handled in ``compliance.main`` by redirecting to the login page.
    """


class AccessGate:
    def __init__(self, config: Settings):
        self.access_code = config.ACCESS_CODE
        self.secure = config.secure_cookies

    def verify_code(self, code: str) -> bool:
        if not isinstance(code, str):
            return False
        return hmac.compare_digest(code.encode(), self.access_code.encode())

    def issue_session(self, response: Response) -> None:
        response.set_cookie(
            key=AUTH_COOKIE,
            value=AUTH_COOKIE_VALUE,
            max_age=SESSION_MAX_AGE,
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def is_authenticated(self, request: Request) -> bool:
        return request.cookies.get(AUTH_COOKIE) == AUTH_COOKIE_VALUE

    def clear_session(self, response: Response) -> None:
        response.delete_cookie(AUTH_COOKIE, httponly=True, secure=self.secure, samesite="lax")


def get_access_gate() -> AccessGate:
    return AccessGate(settings)


def require_session(request: Request, gate: AccessGate = Depends(get_access_gate)) -> None:
    """Pages and form posts: redirect anonymous callers to the login page.

    Form posts get the redirect too instead of a 401, matching the pages.
    """
    if not gate.is_authenticated(request):
        logger.info("Unauthenticated %s %s, redirecting to login", request.method, request.url.path)
        raise LoginRequired()


def require_api_session(request: Request, gate: AccessGate = Depends(get_access_gate)) -> None:
    """JSON endpoints: reject anonymous callers with 401."""
    if not gate.is_authenticated(request):
        raise HTTPException(status_code=401, detail="Authentication required")
