"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from luxor.adapters.supabase_favorite_repository import SupabaseFavoriteRepository
from luxor.adapters.unsplash_client import HttpxUnsplashClient
from luxor.client.favorites_state import FavoritesState
from luxor.client.identity import FileIdentityStorage, IdentityProvider, IdentityStorage
from luxor.client.remote import HttpxLuxorClient, PhotoSearchRemote
from luxor.config import ClientSettings, Settings
from luxor.services.favorites import FavoriteService
from luxor.services.search import PhotoSearchService


@dataclass
class AppContainer:
    """Holds server-wide dependencies."""

    settings: Settings
    favorite_service: FavoriteService
    photo_search_service: PhotoSearchService
    close_resources: Callable[[], Awaitable[None]]


@dataclass
class ClientSession:
    """Holds the state owned by one client session."""

    settings: ClientSettings
    user_id: str
    search: PhotoSearchRemote
    favorites: FavoritesState
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default server dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    favorite_service = FavoriteService(SupabaseFavoriteRepository(supabase_client))
    unsplash_client = HttpxUnsplashClient.create(
        access_key=resolved_settings.unsplash_access_key,
        base_url=resolved_settings.unsplash_base_url,
        utm_source=resolved_settings.unsplash_utm_source,
    )
    photo_search_service = PhotoSearchService(
        client=unsplash_client,
        default_per_page=resolved_settings.default_per_page,
        max_per_page=resolved_settings.max_per_page,
    )

    async def close_resources() -> None:
        await unsplash_client.close()

    return AppContainer(
        settings=resolved_settings,
        favorite_service=favorite_service,
        photo_search_service=photo_search_service,
        close_resources=close_resources,
    )


def build_client_session(
    settings: ClientSettings | None = None,
    storage: IdentityStorage | None = None,
) -> ClientSession:
    """Create a client session scoped to this profile's identifier."""
    resolved_settings = settings or ClientSettings()
    identity = IdentityProvider(
        storage or FileIdentityStorage(resolved_settings.identity_path)
    )
    user_id = identity.get_or_create_identifier()
    api_client = HttpxLuxorClient.create(
        base_url=resolved_settings.api_url,
        user_id=user_id,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )

    async def close_resources() -> None:
        await api_client.close()

    return ClientSession(
        settings=resolved_settings,
        user_id=user_id,
        search=api_client,
        favorites=FavoritesState(api_client),
        close_resources=close_resources,
    )
