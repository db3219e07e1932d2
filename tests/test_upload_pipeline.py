"""Tests for the upload pipeline."""

import asyncio
from dataclasses import dataclass
from datetime import date

import pytest

from shop_catalog.errors import AssetUploadError
from shop_catalog.services.catalog import CatalogService
from shop_catalog.services.uploads import UploadPipeline
from tests.conftest import FakeAssetStore, InMemoryCatalogRepository


@dataclass
class Draft:
    title: str = "Hammer"
    body: str = "<p>Steel head</p>"
    category: str | None = "tools"
    published: bool = True


def _pipeline(
    store: FakeAssetStore, repository: InMemoryCatalogRepository
) -> UploadPipeline:
    return UploadPipeline(asset_store=store, catalog=CatalogService(repository))


def test_publish_persists_item_with_uploaded_url() -> None:
    store = FakeAssetStore(url="https://res.cloudinary.test/hammer.jpg")
    repository = InMemoryCatalogRepository()

    created = asyncio.run(
        _pipeline(store, repository).publish(
            Draft(), b"bytes", "hammer.jpg", today=date(2024, 4, 2)
        )
    )

    assert created is not None
    assert list(repository.items.values()) == [created]
    assert created.feature_image == "https://res.cloudinary.test/hammer.jpg"
    assert created.post_date == date(2024, 4, 2)
    assert created.category == "tools"
    assert store.uploads == [(b"bytes", "hammer.jpg")]


def test_publish_defaults_post_date_to_today() -> None:
    repository = InMemoryCatalogRepository()

    pipeline = _pipeline(FakeAssetStore(), repository)

    created = asyncio.run(pipeline.publish(Draft(), b"x"))

    assert created is not None
    assert created.post_date == date.today()


def test_upload_failure_persists_nothing() -> None:
    store = FakeAssetStore(error=AssetUploadError("Invalid image file"))
    repository = InMemoryCatalogRepository()

    with pytest.raises(AssetUploadError):
        asyncio.run(_pipeline(store, repository).publish(Draft(), b"x"))

    assert repository.items == {}


def test_empty_title_persists_nothing() -> None:
    repository = InMemoryCatalogRepository()

    created = asyncio.run(
        _pipeline(FakeAssetStore(), repository).publish(Draft(title=""), b"x")
    )

    assert created is None
    assert repository.items == {}
