"""Request middleware: session attachment and navigation derivation."""

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from shop_catalog.services.navigation import navigation_for
from shop_catalog.services.sessions import SessionManager

logger = logging.getLogger(__name__)

CallNext = Callable[[Request], Awaitable[Response]]


class SessionMiddleware(BaseHTTPMiddleware):
    """Attach the signed session to ``request.state.session``.

    Valid sessions get their sliding extension before the handler runs. On
    the way out the cookie is re-issued with the refreshed expiry, or
    cleared when the handler reset the session.
    """

    def __init__(self, app: ASGIApp, manager: SessionManager) -> None:
        super().__init__(app)
        self.manager = manager

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        token = request.cookies.get(self.manager.cookie_name)
        session = self.manager.decode(token)
        if session is not None:
            self.manager.touch(session)
        request.state.session = session

        response = await call_next(request)

        session = getattr(request.state, "session", None)
        if session is None or session.user is None:
            if token:
                response.delete_cookie(self.manager.cookie_name)
            return response
        response.set_cookie(
            self.manager.cookie_name,
            self.manager.encode(session),
            max_age=self.manager.max_age(session),
            httponly=True,
            samesite="lax",
        )
        return response


class NavigationMiddleware(BaseHTTPMiddleware):
    """Derive the active route for this request before any handler runs."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request.state.navigation = navigation_for(
            request.url.path, request.query_params
        )
        return await call_next(request)
