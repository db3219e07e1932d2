"""Failure-isolated aggregation of catalog lookups into one render payload."""

import asyncio
import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import Generic, TypeVar

from shop_catalog.domain.catalog import CatalogItem
from shop_catalog.domain.views import ViewData
from shop_catalog.services.catalog import CatalogService

_logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_RESULTS = "no results"
EMPTY_LISTING_MESSAGE = "Please try another item / category"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of one asynchronous lookup: a value or the error it raised."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def settle(awaitable: Awaitable[T], label: str = "lookup") -> LookupResult[T]:
    """Await a lookup and capture its failure instead of raising it."""
    try:
        return LookupResult(value=await awaitable)
    except Exception as exc:  # noqa: BLE001
        _logger.warning("%s failed: %s", label, exc)
        return LookupResult(error=exc)


def sort_by_post_date(items: list[CatalogItem]) -> list[CatalogItem]:
    """Most recent first; equal dates keep their fetch order."""
    return sorted(items, key=lambda item: item.post_date, reverse=True)


def render_message(view: ViewData) -> str | None:
    """Message shown instead of the listing when nothing matched."""
    if view.items:
        return None
    return EMPTY_LISTING_MESSAGE


@dataclass
class ViewAggregator:
    """Builds ViewData from independent item, item-by-id and category lookups."""

    catalog: CatalogService

    async def build(
        self, category: str | None = None, item_id: int | str | None = None
    ) -> ViewData:
        """Run every lookup concurrently and merge the outcomes."""
        items_lookup = (
            self.catalog.list_published_items_by_category(category)
            if category
            else self.catalog.list_published_items()
        )
        lookups = [
            settle(items_lookup, "items lookup"),
            settle(self.catalog.list_categories(), "categories lookup"),
        ]
        if item_id is not None:
            lookups.append(settle(self.catalog.get_item(item_id), "item lookup"))

        items_result, categories_result, *rest = await asyncio.gather(*lookups)

        view = ViewData()
        if items_result.ok:
            view.items = sort_by_post_date(items_result.value or [])
        else:
            view.items_message = NO_RESULTS

        if item_id is None:
            view.item = view.items[0] if view.items else None
        else:
            item_result = rest[0]
            if item_result.ok:
                view.item = item_result.value
            else:
                view.items_message = NO_RESULTS

        if categories_result.ok:
            view.categories = categories_result.value or []
        else:
            view.categories_message = NO_RESULTS
        return view
