"""Public storefront routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from starlette.responses import Response

from shop_catalog.api.dependencies import require_login
from shop_catalog.api.templating import render
from shop_catalog.services.aggregator import render_message, settle

if TYPE_CHECKING:
    from shop_catalog.containers import AppContainer

router = APIRouter(tags=["shop"])


@router.get("/")
async def home() -> RedirectResponse:
    """Send visitors to the shop listing."""
    return RedirectResponse("/shop", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/about")
async def about(request: Request) -> Response:
    return render(request, "about.html")


@router.get("/shop")
async def shop(request: Request, category: str | None = None) -> Response:
    """Render published items with the latest one featured."""
    container: AppContainer = request.app.state.container
    view = await container.view_aggregator.build(category=category)
    return render(request, "shop.html", {"data": view, "message": render_message(view)})


@router.get("/shop/{item_id}", dependencies=[Depends(require_login)])
async def shop_item(
    item_id: str, request: Request, category: str | None = None
) -> Response:
    """Render published items with the requested item featured."""
    container: AppContainer = request.app.state.container
    view = await container.view_aggregator.build(category=category, item_id=item_id)
    return render(request, "shop.html", {"data": view, "message": render_message(view)})


@router.get("/item/{item_id}")
async def raw_item(item_id: str, request: Request) -> Response:
    """Return the stored item as JSON, or the lookup error as plain text."""
    container: AppContainer = request.app.state.container
    result = await settle(container.catalog_service.get_item(item_id), "item lookup")
    if not result.ok:
        return PlainTextResponse(str(result.error))
    return JSONResponse(result.value.to_dict())
