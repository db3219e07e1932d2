"""Editor routes for catalog items."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.responses import Response

from shop_catalog.api.dependencies import require_login
from shop_catalog.api.forms import AddItemForm, add_item_form
from shop_catalog.api.templating import listing_context, render
from shop_catalog.errors import AssetUploadError, NotFoundError, PersistenceError
from shop_catalog.services.aggregator import settle

if TYPE_CHECKING:
    from shop_catalog.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["items"], dependencies=[Depends(require_login)])


@router.get("/items")
async def list_items(
    request: Request,
    category: str | None = None,
    min_date: str | None = Query(default=None, alias="minDate"),
) -> Response:
    """Render items filtered by category, by minimum date, or unfiltered."""
    container: AppContainer = request.app.state.container
    catalog = container.catalog_service
    if category:
        lookup = catalog.list_published_items_by_category(category)
    elif min_date:
        lookup = catalog.list_items_by_min_date(min_date)
    else:
        lookup = catalog.list_items()
    result = await settle(lookup, "items lookup")
    return render(request, "items.html", listing_context(result, "items"))


@router.get("/items/add")
async def add_item_page(request: Request) -> Response:
    container: AppContainer = request.app.state.container
    result = await settle(
        container.catalog_service.list_categories(), "categories lookup"
    )
    categories = result.value if result.ok else []
    return render(request, "add_item.html", {"categories": categories})


@router.post("/items/add")
async def add_item(
    request: Request,
    form: AddItemForm = Depends(add_item_form),
    feature_image: UploadFile = File(..., alias="featureImage"),
) -> Response:
    """Upload the feature image, store the item and go back to the listing."""
    container: AppContainer = request.app.state.container
    content = await feature_image.read()
    try:
        await container.upload_pipeline.publish(form, content, feature_image.filename)
    except AssetUploadError as exc:
        logger.error("Feature image upload failed: %s", exc)
        return JSONResponse(exc.payload, status_code=status.HTTP_502_BAD_GATEWAY)
    return RedirectResponse("/items", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/items/delete/{item_id}")
async def delete_item(item_id: str, request: Request) -> RedirectResponse:
    container: AppContainer = request.app.state.container
    try:
        await container.catalog_service.delete_item(item_id)
    except (NotFoundError, PersistenceError) as exc:
        logger.warning("Unable to remove item / Item not found: %s", exc)
    return RedirectResponse("/items", status_code=status.HTTP_303_SEE_OTHER)
