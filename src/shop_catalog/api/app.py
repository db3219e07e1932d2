"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from shop_catalog.api.account import router as account_router
from shop_catalog.api.categories import router as categories_router
from shop_catalog.api.items import router as items_router
from shop_catalog.api.middleware import NavigationMiddleware, SessionMiddleware
from shop_catalog.api.shop import router as shop_router
from shop_catalog.api.templating import render
from shop_catalog.app_logging import configure_logging
from shop_catalog.containers import AppContainer
from shop_catalog.errors import LoginRequired

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Shop catalog ready (environment=%s)", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    # Starlette runs the last-added middleware first.
    app.add_middleware(NavigationMiddleware)
    app.add_middleware(SessionMiddleware, manager=container.session_manager)

    if STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(shop_router)
    app.include_router(items_router)
    app.include_router(categories_router)
    app.include_router(account_router)

    @app.exception_handler(LoginRequired)
    async def login_required(request: Request, exc: LoginRequired) -> Response:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    @app.exception_handler(StarletteHTTPException)
    async def not_found(request: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code != status.HTTP_404_NOT_FOUND:
            return await http_exception_handler(request, exc)
        return render(request, "404.html", status_code=status.HTTP_404_NOT_FOUND)

    return app
