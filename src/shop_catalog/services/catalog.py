"""Catalog queries and mutations over the persistence collaborator."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from starlette.concurrency import run_in_threadpool

from shop_catalog.domain.catalog import CatalogItem, Category, NewCatalogItem
from shop_catalog.errors import NotFoundError, PersistenceError

_logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Persistence interface for catalog items and categories."""

    def list_items(self) -> list[CatalogItem]:
        """Return every item, published or not."""

    def list_published_items(self) -> list[CatalogItem]:
        """Return published items."""

    def list_published_items_by_category(self, category: str) -> list[CatalogItem]:
        """Return published items in a category."""

    def list_items_by_min_date(self, min_date: date) -> list[CatalogItem]:
        """Return items posted on or after a date."""

    def get_item(self, item_id: int) -> CatalogItem | None:
        """Return an item by id, if present."""

    def create_item(self, item: NewCatalogItem) -> CatalogItem:
        """Persist an item and return the stored record."""

    def delete_item(self, item_id: int) -> bool:
        """Delete an item, returning whether a row was removed."""

    def list_categories(self) -> list[Category]:
        """Return every category."""

    def create_category(self, name: str) -> Category:
        """Persist a category and return it."""

    def delete_category(self, category_id: int) -> bool:
        """Delete a category, returning whether a row was removed."""


@dataclass
class CatalogService:
    """Async facade over the catalog repository.

    Each call is offloaded to the threadpool so request handlers suspend at
    every persistence call instead of blocking the event loop.
    """

    repository: CatalogRepository

    async def list_items(self) -> list[CatalogItem]:
        """Return every item."""
        return await run_in_threadpool(self.repository.list_items)

    async def list_published_items(self) -> list[CatalogItem]:
        """Return published items."""
        return await run_in_threadpool(self.repository.list_published_items)

    async def list_published_items_by_category(
        self, category: str
    ) -> list[CatalogItem]:
        """Return published items in a category."""
        return await run_in_threadpool(
            self.repository.list_published_items_by_category, category
        )

    async def list_items_by_min_date(self, min_date: date | str) -> list[CatalogItem]:
        """Return items posted on or after ``min_date``."""
        if isinstance(min_date, str):
            min_date = date.fromisoformat(min_date)
        return await run_in_threadpool(self.repository.list_items_by_min_date, min_date)

    async def get_item(self, item_id: int | str) -> CatalogItem:
        """Return an item by id or raise NotFoundError."""
        key = _parse_id("item", item_id)
        item = await run_in_threadpool(self.repository.get_item, key)
        if item is None:
            raise NotFoundError("item", item_id)
        return item

    async def add_item(self, item: NewCatalogItem) -> CatalogItem:
        """Persist a new item."""
        created = await run_in_threadpool(self.repository.create_item, item)
        _logger.info("Catalog item created: id=%s title=%s", created.id, created.title)
        return created

    async def delete_item(self, item_id: int | str) -> None:
        """Delete an item.

        Raises NotFoundError for an unknown or non-integer id and
        PersistenceError when the repository rejects the delete.
        """
        key = _parse_id("item", item_id)
        deleted = await _run_delete(self.repository.delete_item, "item", key)
        if not deleted:
            raise NotFoundError("item", item_id)

    async def list_categories(self) -> list[Category]:
        """Return every category."""
        return await run_in_threadpool(self.repository.list_categories)

    async def add_category(self, name: str) -> Category:
        """Persist a new category."""
        created = await run_in_threadpool(self.repository.create_category, name)
        _logger.info("Category created: id=%s name=%s", created.id, created.name)
        return created

    async def delete_category(self, category_id: int | str) -> None:
        """Delete a category, raising like ``delete_item``."""
        key = _parse_id("category", category_id)
        deleted = await _run_delete(self.repository.delete_category, "category", key)
        if not deleted:
            raise NotFoundError("category", category_id)


def _parse_id(entity: str, raw: int | str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise NotFoundError(entity, raw) from exc


async def _run_delete(delete: Callable[[int], bool], entity: str, key: int) -> bool:
    try:
        return await run_in_threadpool(delete, key)
    except Exception as exc:
        raise PersistenceError(f"Unable to remove {entity} {key}: {exc}") from exc
