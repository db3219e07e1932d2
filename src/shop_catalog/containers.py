"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from shop_catalog.adapters.cloudinary_asset_store import CloudinaryAssetStore
from shop_catalog.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from shop_catalog.adapters.supabase_user_repository import SupabaseUserRepository
from shop_catalog.config import Settings
from shop_catalog.services.aggregator import ViewAggregator
from shop_catalog.services.auth import AuthService
from shop_catalog.services.catalog import CatalogService
from shop_catalog.services.sessions import SessionManager
from shop_catalog.services.uploads import UploadPipeline


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_manager: SessionManager
    catalog_service: CatalogService
    auth_service: AuthService
    view_aggregator: ViewAggregator
    upload_pipeline: UploadPipeline
    close_resources: Callable[[], Awaitable[None]]


def build_session_manager(settings: Settings) -> SessionManager:
    """Create the session manager from configured durations."""
    return SessionManager(
        secret=settings.session_secret,
        duration=timedelta(seconds=settings.session_duration_seconds),
        active_duration=timedelta(seconds=settings.session_active_duration_seconds),
        cookie_name=settings.session_cookie_name,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_service = CatalogService(SupabaseCatalogRepository(supabase_client))
    auth_service = AuthService(SupabaseUserRepository(supabase_client))
    asset_store = CloudinaryAssetStore.create(
        cloud_name=resolved_settings.cloudinary_cloud_name,
        api_key=resolved_settings.cloudinary_api_key,
        api_secret=resolved_settings.cloudinary_api_secret,
        secure=resolved_settings.cloudinary_secure,
    )

    async def close_resources() -> None:
        await asset_store.close()

    return AppContainer(
        settings=resolved_settings,
        session_manager=build_session_manager(resolved_settings),
        catalog_service=catalog_service,
        auth_service=auth_service,
        view_aggregator=ViewAggregator(catalog_service),
        upload_pipeline=UploadPipeline(
            asset_store=asset_store, catalog=catalog_service
        ),
        close_resources=close_resources,
    )
