"""Shared FastAPI dependencies."""

from fastapi import Request

from shop_catalog.domain.sessions import Session
from shop_catalog.errors import LoginRequired


def current_session(request: Request) -> Session | None:
    """Return the session attached by the session middleware."""
    return getattr(request.state, "session", None)


async def require_login(request: Request) -> None:
    """Halt the request unless it carries a logged-in session."""
    session = current_session(request)
    if session is None or session.user is None:
        raise LoginRequired
