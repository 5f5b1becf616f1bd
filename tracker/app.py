"""
Local web front end for the habit tracker.

Run with ``uvicorn --factory tracker.app:create_app`` and open the page on
127.0.0.1; the app serves a single user and keeps one HabitStore in memory.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from starlette.middleware.base import BaseHTTPMiddleware

from tracker.core.config import Settings, get_settings
from tracker.core.diagnostics import configure_logging
from tracker.repositories.backends import build_store
from tracker.routers import habits as habits_router
from tracker.services.habit_store import HabitStore
from tracker.services.persistence import HabitPersistence

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (CSP, anti clickjacking, referrer policy)."""

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault(
            "Content-Security-Policy",
            "default-src 'self'; style-src 'self' 'unsafe-inline'; form-action 'self'",
        )
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "same-origin")
        return response


def create_app(settings: Optional[Settings] = None, store: Optional[HabitStore] = None) -> FastAPI:
    """Factory compatible with uvicorn; tests pass a prepared store."""
    settings = settings or get_settings()
    configure_logging(settings)
    if store is None:
        store = HabitStore(HabitPersistence(build_store(settings)))

    app = FastAPI(title="Habit Tracker")
    app.add_middleware(SecurityHeadersMiddleware)
    app.state.settings = settings
    app.state.habit_store = store
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.include_router(habits_router.router)
    return app
