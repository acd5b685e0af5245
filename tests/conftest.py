"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime, timedelta

import pytest

from luxor.adapters.unsplash_client import UnsplashClient
from luxor.client.remote import FavoritesRemote, RemoteResult
from luxor.config import Settings
from luxor.containers import AppContainer
from luxor.domain.favorites import FavoriteRecord
from luxor.domain.photos import PhotoRecord
from luxor.services.favorites import FavoriteRepository, FavoriteService
from luxor.services.search import PhotoSearchService

USER_ID = "550e8400-e29b-41d4-a716-446655440000"
OTHER_USER_ID = "9b2f6a1e-3c4d-4e5f-a678-90abcdef1234"


def make_photo_payload(photo_id: str = "p1", **overrides: object) -> dict[str, object]:
    """Return a photo payload shaped like an Unsplash search result."""
    payload: dict[str, object] = {
        "id": photo_id,
        "width": 4000,
        "height": 3000,
        "description": "Mountain lake at dawn",
        "alt_description": "lake surrounded by mountains",
        "urls": {
            "raw": f"https://images.unsplash.com/{photo_id}?raw",
            "full": f"https://images.unsplash.com/{photo_id}?full",
            "regular": f"https://images.unsplash.com/{photo_id}?regular",
            "small": f"https://images.unsplash.com/{photo_id}?small",
            "thumb": f"https://images.unsplash.com/{photo_id}?thumb",
        },
        "links": {
            "self": f"https://api.unsplash.com/photos/{photo_id}",
            "html": f"https://unsplash.com/photos/{photo_id}",
            "download": f"https://unsplash.com/photos/{photo_id}/download",
        },
        "user": {
            "id": "u1",
            "username": "jdoe",
            "name": "John Doe",
            "portfolio_url": None,
            "profile_image": "https://images.unsplash.com/profile-jdoe",
        },
        "created_at": "2024-05-01T10:00:00Z",
    }
    payload.update(overrides)
    return payload


def make_photo(photo_id: str = "p1") -> PhotoRecord:
    return PhotoRecord.from_payload(make_photo_payload(photo_id))


def make_favorite_payload(
    photo_id: str = "p1", favorite_id: int = 1, user_id: str = USER_ID
) -> dict[str, object]:
    """Return a favorite as served by GET /favorites."""
    return {
        "id": favorite_id,
        "user_id": user_id,
        "photo_id": photo_id,
        "photo_data": make_photo_payload(photo_id),
        "created_at": "2025-01-01T12:00:00+00:00",
        "updated_at": "2025-01-01T12:00:00+00:00",
    }


@dataclass
class InMemoryFavoriteRepository(FavoriteRepository):
    """In-memory favorites repository for tests."""

    rows: dict[tuple[str, str], FavoriteRecord] = field(default_factory=dict)
    next_id: int = 1
    clock: datetime = field(
        default_factory=lambda: datetime(2025, 1, 1, 12, 0, tzinfo=UTC)
    )
    calls: int = 0

    def list_favorites(self, user_id: str) -> list[FavoriteRecord]:
        self.calls += 1
        owned = [row for (owner, _), row in self.rows.items() if owner == user_id]
        return sorted(owned, key=lambda row: row.created_at, reverse=True)

    def find_by_photo_id(self, user_id: str, photo_id: str) -> FavoriteRecord | None:
        self.calls += 1
        return self.rows.get((user_id, photo_id))

    def save_favorite(self, user_id: str, photo: PhotoRecord) -> FavoriteRecord:
        self.calls += 1
        self.clock += timedelta(minutes=1)
        existing = self.rows.get((user_id, photo.id))
        if existing is not None:
            updated = replace(existing, photo=photo, updated_at=self.clock)
            self.rows[(user_id, photo.id)] = updated
            return updated
        created = FavoriteRecord(
            id=self.next_id,
            user_id=user_id,
            photo_id=photo.id,
            photo=photo,
            created_at=self.clock,
            updated_at=self.clock,
        )
        self.next_id += 1
        self.rows[(user_id, photo.id)] = created
        return created

    def delete_favorite(self, favorite_id: int) -> None:
        self.calls += 1
        for key, row in list(self.rows.items()):
            if row.id == favorite_id:
                del self.rows[key]


@dataclass
class FailingFavoriteRepository(FavoriteRepository):
    """Repository whose every call fails."""

    def list_favorites(self, user_id: str) -> list[FavoriteRecord]:
        raise RuntimeError("database unavailable")

    def find_by_photo_id(self, user_id: str, photo_id: str) -> FavoriteRecord | None:
        raise RuntimeError("database unavailable")

    def save_favorite(self, user_id: str, photo: PhotoRecord) -> FavoriteRecord:
        raise RuntimeError("database unavailable")

    def delete_favorite(self, favorite_id: int) -> None:
        raise RuntimeError("database unavailable")


@dataclass
class FakeUnsplashClient(UnsplashClient):
    """Fake Unsplash client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "total": 2,
            "total_pages": 1,
            "results": [
                make_photo_payload(
                    "p1",
                    user={
                        "id": "u1",
                        "username": "jdoe",
                        "name": "John Doe",
                        "profile_image": {
                            "small": "https://images.unsplash.com/s",
                            "medium": "https://images.unsplash.com/m",
                            "large": "https://images.unsplash.com/l",
                        },
                    },
                ),
                make_photo_payload("p2"),
            ],
        }
    )
    error: Exception | None = None
    calls: list[tuple[str, int, int]] = field(default_factory=list)

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 12
    ) -> dict[str, object]:
        self.calls.append((query, page, per_page))
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeFavoritesRemote(FavoritesRemote):
    """Fake favorites store behaving like the Luxor API."""

    store: list[dict[str, object]] = field(default_factory=list)
    list_result: RemoteResult | None = None
    add_result: RemoteResult | None = None
    remove_result: RemoteResult | None = None
    error: Exception | None = None
    gate: asyncio.Event | None = None
    write_gate: asyncio.Event | None = None
    calls: list[tuple[str, str | None]] = field(default_factory=list)
    next_id: int = 100

    async def list_favorites(self) -> RemoteResult:
        self.calls.append(("list", None))
        await self._settle()
        if self.list_result is not None:
            return self.list_result
        return RemoteResult(success=True, data=list(self.store))

    async def add_favorite(self, photo: PhotoRecord) -> RemoteResult:
        self.calls.append(("add", photo.id))
        await self._settle(writes=True)
        if self.add_result is not None:
            return self.add_result
        record = {
            **make_favorite_payload(photo.id, favorite_id=self.next_id),
            "photo_data": photo.to_payload(),
        }
        self.next_id += 1
        self.store = [
            record,
            *(item for item in self.store if item["photo_id"] != photo.id),
        ]
        return RemoteResult(
            success=True, data=record, message="Photo added to favorites"
        )

    async def remove_favorite(self, photo_id: str) -> RemoteResult:
        self.calls.append(("remove", photo_id))
        await self._settle(writes=True)
        if self.remove_result is not None:
            return self.remove_result
        remaining = [item for item in self.store if item["photo_id"] != photo_id]
        if len(remaining) == len(self.store):
            return RemoteResult(success=False, message="Favorite not found")
        self.store = remaining
        return RemoteResult(success=True, message="Photo removed from favorites")

    async def _settle(self, writes: bool = False) -> None:
        if self.gate is not None:
            await self.gate.wait()
        if writes and self.write_gate is not None:
            await self.write_gate.wait()
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        unsplash_access_key="unsplash-key",
        environment="test",
    )


@pytest.fixture
def favorite_repository() -> InMemoryFavoriteRepository:
    return InMemoryFavoriteRepository()


@pytest.fixture
def unsplash_client() -> FakeUnsplashClient:
    return FakeUnsplashClient()


@pytest.fixture
def container(
    settings: Settings,
    favorite_repository: InMemoryFavoriteRepository,
    unsplash_client: FakeUnsplashClient,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        favorite_service=FavoriteService(favorite_repository),
        photo_search_service=PhotoSearchService(unsplash_client),
        close_resources=close_resources,
    )


@pytest.fixture
def headers() -> dict[str, str]:
    return {"X-User-ID": USER_ID}
