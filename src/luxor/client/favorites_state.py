"""Client-side favorites state with optimistic toggling.

``FavoritesState`` owns the favorites known for the current session. Membership
changes are applied to ``member_ids`` before the remote call is awaited. When
the call settles, membership of the toggled photo is restated from
``favorites``, which reverts the flip on failure and keeps ``member_ids`` equal
to the set of ``photo_id`` values in ``favorites`` even when a reload completed
in the meantime.

A toggle for a photo whose previous toggle is still in flight is ignored, so at
most one remote call per photo is outstanding at any time.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Literal

from luxor.client.remote import FavoritesRemote
from luxor.domain.favorites import FavoriteRecord
from luxor.domain.photos import PhotoRecord

LOAD_FAILED_MESSAGE = "Unable to load favorites."
LOAD_UNEXPECTED_MESSAGE = "An unexpected error occurred while loading favorites."
UPDATE_UNEXPECTED_MESSAGE = "An unexpected error occurred while updating favorites."

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Toast:
    """Transient notification for the presentation layer."""

    id: str
    message: str
    kind: Literal["success", "error", "info"]


@dataclass
class FavoritesState:
    """Session-scoped favorites synchronized with the remote store."""

    remote: FavoritesRemote
    favorites: list[FavoriteRecord] = field(default_factory=list)
    member_ids: set[str] = field(default_factory=set)
    is_loading: bool = False
    error: str | None = None
    toasts: list[Toast] = field(default_factory=list)
    _in_flight: set[str] = field(default_factory=set, init=False, repr=False)

    def is_favorite(self, photo_id: str) -> bool:
        """Return true when the photo is currently shown as a favorite."""
        return photo_id in self.member_ids

    def is_pending(self, photo_id: str) -> bool:
        """Return true while a toggle for the photo has not settled."""
        return photo_id in self._in_flight

    async def reload(self) -> None:
        """Replace local state with the store's list of favorites."""
        self.is_loading = True
        self.error = None
        try:
            result = await self.remote.list_favorites()
            if result.success and isinstance(result.data, list):
                self._replace(_parse_favorites(result.data))
            else:
                self._replace([])
                self.error = result.message or LOAD_FAILED_MESSAGE
        except Exception:
            _logger.exception("Failed to load favorites")
            self._replace([])
            self.error = LOAD_UNEXPECTED_MESSAGE
        finally:
            self.is_loading = False

    async def toggle_favorite(self, photo: PhotoRecord) -> bool:
        """Add or remove a photo, optimistically.

        Returns True when the change was committed by the store and False when
        it was rolled back or ignored because a toggle for the same photo is
        already in flight.
        """
        if photo.id in self._in_flight:
            _logger.debug(
                "Ignoring toggle while in flight", extra={"photo_id": photo.id}
            )
            return False

        was_favorite = photo.id in self.member_ids
        action = "remove" if was_favorite else "add"
        self._set_member(photo.id, present=not was_favorite)
        self._in_flight.add(photo.id)
        try:
            try:
                if was_favorite:
                    result = await self.remote.remove_favorite(photo.id)
                else:
                    result = await self.remote.add_favorite(photo)
            except Exception:
                _logger.exception(
                    "Failed to %s favorite", action, extra={"photo_id": photo.id}
                )
                self.error = UPDATE_UNEXPECTED_MESSAGE
                return False

            if not result.success:
                self.error = result.message or f"Unable to {action} favorite."
                return False

            if was_favorite:
                self.favorites = [
                    favorite
                    for favorite in self.favorites
                    if favorite.photo_id != photo.id
                ]
                self._notify("Photo removed from favorites", "success")
            else:
                created = _created_record(result.data, photo)
                self.favorites = [
                    created,
                    *(
                        favorite
                        for favorite in self.favorites
                        if favorite.photo_id != created.photo_id
                    ),
                ]
                self._notify("Photo added to favorites", "success")
            return True
        finally:
            # A reload may have replaced the records while the call was pending.
            self._set_member(photo.id, present=self._holds(photo.id))
            self._in_flight.discard(photo.id)

    def clear_error(self) -> None:
        """Dismiss the current error."""
        self.error = None

    def remove_toast(self, toast_id: str) -> None:
        """Dismiss a notification."""
        self.toasts = [toast for toast in self.toasts if toast.id != toast_id]

    def _replace(self, favorites: list[FavoriteRecord]) -> None:
        self.favorites = favorites
        self.member_ids = {favorite.photo_id for favorite in favorites}

    def _holds(self, photo_id: str) -> bool:
        return any(favorite.photo_id == photo_id for favorite in self.favorites)

    def _set_member(self, photo_id: str, *, present: bool) -> None:
        if present:
            self.member_ids.add(photo_id)
        else:
            self.member_ids.discard(photo_id)

    def _notify(self, message: str, kind: Literal["success", "error", "info"]) -> None:
        self.toasts.append(Toast(id=uuid.uuid4().hex, message=message, kind=kind))


def _parse_favorites(items: list[object]) -> list[FavoriteRecord]:
    """Parse favorites from the store, dropping entries that are not records."""
    favorites: list[FavoriteRecord] = []
    for item in items:
        try:
            favorites.append(FavoriteRecord.from_payload(item))
        except ValueError:
            _logger.warning("Skipping malformed favorite record")
    return favorites


def _created_record(data: object, photo: PhotoRecord) -> FavoriteRecord:
    """Return the record echoed by the store, or a local one for the photo.

    Only a single favorite object for the toggled photo is accepted; lists,
    empty bodies and records for another photo fall back to a placeholder.
    """
    if isinstance(data, dict):
        try:
            created = FavoriteRecord.from_payload(data)
        except ValueError:
            _logger.warning(
                "Store echoed a malformed favorite", extra={"photo_id": photo.id}
            )
        else:
            if created.photo_id == photo.id:
                return created
    return FavoriteRecord.placeholder(photo)
