"""Double-submit CSRF protection for the habit grid forms."""
from __future__ import annotations

import secrets
from urllib import parse as urlparse

from fastapi import HTTPException, Request, Response

from tracker.core.config import get_settings

CSRF_COOKIE_NAME = "habits_csrf"
CSRF_FORM_FIELD = "csrf_token"
CSRF_MAX_AGE = 7 * 24 * 60 * 60


def issue_token(request: Request) -> str:
    """Reuse the token already held in the cookie, or mint a new one."""
    token = request.cookies.get(CSRF_COOKIE_NAME)
    if not token or len(token) < 16:
        token = secrets.token_urlsafe(32)
    return token


def set_csrf_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        CSRF_COOKIE_NAME,
        token,
        max_age=CSRF_MAX_AGE,
        httponly=False,
        secure=settings.app_env == "prod",
        samesite="strict",
        path="/",
    )


def _check_same_origin(request: Request) -> None:
    source = request.headers.get("origin") or request.headers.get("referer") or ""
    if not source:
        return
    try:
        parsed = urlparse.urlparse(source)
    except ValueError:
        raise HTTPException(403, "Invalid request origin.")
    host = (request.headers.get("host") or "").split(":", 1)[0].lower()
    source_host = (parsed.hostname or "").lower()
    if source_host and host and source_host != host:
        raise HTTPException(403, "Invalid request origin.")


def validate_csrf(request: Request, supplied_token: str | None) -> None:
    cookie_token = request.cookies.get(CSRF_COOKIE_NAME)
    token = (supplied_token or "").strip()
    if not cookie_token or not token:
        raise HTTPException(403, "Missing CSRF token.")
    if not secrets.compare_digest(cookie_token, token):
        raise HTTPException(403, "Invalid CSRF token.")
    _check_same_origin(request)
