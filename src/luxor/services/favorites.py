"""Favorites business logic."""

from dataclasses import dataclass, replace
from typing import Protocol

from luxor.domain.favorites import FavoriteRecord
from luxor.domain.photos import PhotoRecord


class FavoriteRepository(Protocol):
    """Persistence interface for favorites."""

    def list_favorites(self, user_id: str) -> list[FavoriteRecord]:
        """Return the owner's favorites, newest first."""

    def find_by_photo_id(self, user_id: str, photo_id: str) -> FavoriteRecord | None:
        """Return the owner's favorite for a photo, if present."""

    def save_favorite(self, user_id: str, photo: PhotoRecord) -> FavoriteRecord:
        """Create the favorite or overwrite the existing snapshot."""

    def delete_favorite(self, favorite_id: int) -> None:
        """Delete a favorite row permanently."""


@dataclass
class FavoriteService:
    """Application service for favorites CRUD."""

    repository: FavoriteRepository

    def list_favorites(self, user_id: str) -> list[FavoriteRecord]:
        """Return the owner's favorites in the store's order."""
        return self.repository.list_favorites(user_id)

    def save_favorite(
        self, user_id: str, photo_id: str, photo_data: dict[str, object]
    ) -> FavoriteRecord:
        """Save a photo snapshot for the owner, updating it in place on repeats."""
        photo = PhotoRecord.from_payload({"id": photo_id, **photo_data})
        if photo.id != photo_id:
            photo = replace(photo, id=photo_id)
        return self.repository.save_favorite(user_id, photo)

    def remove_favorite(self, user_id: str, photo_id: str) -> bool:
        """Remove the owner's favorite for a photo.

        Returns False when the owner has no favorite for that photo.
        """
        favorite = self.repository.find_by_photo_id(user_id, photo_id)
        if favorite is None or favorite.id is None:
            return False
        self.repository.delete_favorite(favorite.id)
        return True
