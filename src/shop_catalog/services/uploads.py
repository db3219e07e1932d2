"""Upload pipeline turning an in-memory image into a persisted catalog item."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from shop_catalog.domain.catalog import CatalogItem, NewCatalogItem, UploadResult
from shop_catalog.services.catalog import CatalogService

_logger = logging.getLogger(__name__)


class AssetStore(Protocol):
    """Remote store that keeps uploaded images and returns reference URLs."""

    async def upload(self, content: bytes, filename: str | None = None) -> UploadResult:
        """Store the bytes and return their reference, or raise AssetUploadError."""


class ItemDraft(Protocol):
    """Form fields needed to build a catalog item."""

    title: str
    body: str
    category: str | None
    published: bool


@dataclass
class UploadPipeline:
    """Uploads the feature image first, then persists the item."""

    asset_store: AssetStore
    catalog: CatalogService

    async def publish(
        self,
        draft: ItemDraft,
        content: bytes,
        filename: str | None = None,
        today: date | None = None,
    ) -> CatalogItem | None:
        """Run the pipeline and return the stored item.

        Returns None without persisting when the title is empty. Upload
        failures propagate as AssetUploadError before anything is stored.
        """
        post_date = today or date.today()
        uploaded = await self.asset_store.upload(content, filename)
        _logger.info("Feature image uploaded: public_id=%s", uploaded.public_id)
        item = NewCatalogItem(
            title=draft.title,
            body=draft.body,
            post_date=post_date,
            category=draft.category,
            feature_image=uploaded.url,
            published=draft.published,
        )
        if not item.title:
            _logger.info("Skipping item without a title")
            return None
        return await self.catalog.add_item(item)
