"""Supabase implementation for catalog items and categories."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from shop_catalog.domain.catalog import CatalogItem, Category, NewCatalogItem
from shop_catalog.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed repository for the shop catalog."""

    client: Client

    def list_items(self) -> list[CatalogItem]:
        """Return every item."""
        response = self.client.table("items").select("*").order("id").execute()
        return [_parse_item(row) for row in response.data or []]

    def list_published_items(self) -> list[CatalogItem]:
        """Return published items."""
        response = (
            self.client.table("items")
            .select("*")
            .eq("published", True)
            .order("id")
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def list_published_items_by_category(self, category: str) -> list[CatalogItem]:
        """Return published items in a category."""
        response = (
            self.client.table("items")
            .select("*")
            .eq("published", True)
            .eq("category", category)
            .order("id")
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def list_items_by_min_date(self, min_date: date) -> list[CatalogItem]:
        """Return items posted on or after a date."""
        response = (
            self.client.table("items")
            .select("*")
            .gte("post_date", min_date.isoformat())
            .order("id")
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def get_item(self, item_id: int) -> CatalogItem | None:
        """Return an item by id, if present."""
        response = (
            self.client.table("items")
            .select("*")
            .eq("id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def create_item(self, item: NewCatalogItem) -> CatalogItem:
        """Insert an item and return the stored row."""
        response = (
            self.client.table("items")
            .insert(
                {
                    "title": item.title,
                    "body": item.body,
                    "post_date": item.post_date.isoformat(),
                    "category": item.category,
                    "feature_image": item.feature_image,
                    "published": item.published,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create catalog item")
        return _parse_item(response.data[0])

    def delete_item(self, item_id: int) -> bool:
        """Delete an item by id."""
        response = self.client.table("items").delete().eq("id", item_id).execute()
        return bool(response.data)

    def list_categories(self) -> list[Category]:
        """Return every category."""
        response = self.client.table("categories").select("*").order("id").execute()
        return [_parse_category(row) for row in response.data or []]

    def create_category(self, name: str) -> Category:
        """Insert a category and return it."""
        response = self.client.table("categories").insert({"category": name}).execute()
        if not response.data:
            raise RuntimeError("Failed to create category")
        return _parse_category(response.data[0])

    def delete_category(self, category_id: int) -> bool:
        """Delete a category by id."""
        response = (
            self.client.table("categories").delete().eq("id", category_id).execute()
        )
        return bool(response.data)


def _parse_item(row: dict[str, object]) -> CatalogItem:
    """Parse an items row into a domain model."""
    category = row.get("category")
    return CatalogItem(
        id=int(row["id"]),
        title=str(row.get("title") or ""),
        body=str(row.get("body") or ""),
        post_date=date.fromisoformat(str(row["post_date"])[:10]),
        category=None if category is None else str(category),
        feature_image=str(row.get("feature_image") or ""),
        published=bool(row.get("published", False)),
    )


def _parse_category(row: dict[str, object]) -> Category:
    """Parse a categories row into a domain model."""
    return Category(id=int(row["id"]), name=str(row.get("category") or ""))
