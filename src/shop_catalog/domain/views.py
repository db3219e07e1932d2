"""Transient models handed to the template layer."""

from dataclasses import dataclass, field

from shop_catalog.domain.catalog import CatalogItem, Category


@dataclass(frozen=True)
class NavigationContext:
    """Per-request navigation state used to highlight the active menu entry."""

    active_route: str
    viewing_category: str | None = None


@dataclass
class ViewData:
    """Render payload assembled for a catalog listing."""

    items: list[CatalogItem] = field(default_factory=list)
    item: CatalogItem | None = None
    categories: list[Category] = field(default_factory=list)
    items_message: str | None = None
    categories_message: str | None = None
