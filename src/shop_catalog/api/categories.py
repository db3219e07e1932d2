"""Editor routes for categories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from shop_catalog.api.dependencies import require_login
from shop_catalog.api.forms import AddCategoryForm, add_category_form
from shop_catalog.api.templating import listing_context, render
from shop_catalog.errors import NotFoundError, PersistenceError
from shop_catalog.services.aggregator import settle

if TYPE_CHECKING:
    from shop_catalog.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["categories"], dependencies=[Depends(require_login)])


@router.get("/categories")
async def list_categories(request: Request) -> Response:
    container: AppContainer = request.app.state.container
    result = await settle(
        container.catalog_service.list_categories(), "categories lookup"
    )
    return render(request, "categories.html", listing_context(result, "categories"))


@router.get("/categories/add")
async def add_category_page(request: Request) -> Response:
    return render(request, "add_category.html")


@router.post("/categories/add")
async def add_category(
    request: Request, form: AddCategoryForm = Depends(add_category_form)
) -> RedirectResponse:
    """Insert a category unless the name is empty."""
    container: AppContainer = request.app.state.container
    if form.category:
        await container.catalog_service.add_category(form.category)
    return RedirectResponse("/categories", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/categories/delete/{category_id}")
async def delete_category(category_id: str, request: Request) -> RedirectResponse:
    container: AppContainer = request.app.state.container
    try:
        await container.catalog_service.delete_category(category_id)
    except (NotFoundError, PersistenceError) as exc:
        logger.warning("Unable to remove category / Category not found: %s", exc)
    return RedirectResponse("/categories", status_code=status.HTTP_303_SEE_OTHER)
