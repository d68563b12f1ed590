"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_catalog.adapters.catalog_client import CatalogClient, HttpxCatalogClient
from food_catalog.adapters.supabase_kv_store import SupabaseKeyValueStore
from food_catalog.app_logging import configure_logging
from food_catalog.config import Settings, parse_storage_backend
from food_catalog.services.catalog import CatalogSession
from food_catalog.services.favorites import FavoriteStore
from food_catalog.services.favorites_listing import FavoritesListing
from food_catalog.services.projection import FavoriteStateProjection
from food_catalog.services.storage import InMemoryKeyValueStore, KeyValueStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies.

    Screens get their own projection, session and listing; all of them share
    the single favorite store.
    """

    settings: Settings
    catalog_client: CatalogClient
    storage: KeyValueStore
    favorite_store: FavoriteStore
    close_resources: Callable[[], Awaitable[None]]

    def new_projection(self) -> FavoriteStateProjection:
        """Create a favorite state projection for one screen."""
        return FavoriteStateProjection(self.favorite_store)

    def new_catalog_session(self) -> CatalogSession:
        """Create a catalog session with its own projection."""
        return CatalogSession(
            client=self.catalog_client,
            projection=self.new_projection(),
        )

    def new_favorites_listing(self) -> FavoritesListing:
        """Create the favorites screen listing."""
        return FavoritesListing(self.favorite_store)


def build_storage(settings: Settings) -> KeyValueStore:
    """Create the configured key-value backend."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "memory":
        return InMemoryKeyValueStore()
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError(
            "Supabase storage requires supabase_url and supabase_service_key"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return SupabaseKeyValueStore(client, table=settings.supabase_kv_table)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    configure_logging()
    resolved_settings = settings or Settings()
    storage = build_storage(resolved_settings)
    catalog_client = HttpxCatalogClient.create(
        url=resolved_settings.catalog_url,
        timeout_seconds=resolved_settings.catalog_timeout_seconds,
    )
    favorite_store = FavoriteStore(
        storage=storage,
        key=resolved_settings.favorites_storage_key,
    )

    async def close_resources() -> None:
        await catalog_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_client=catalog_client,
        storage=storage,
        favorite_store=favorite_store,
        close_resources=close_resources,
    )
