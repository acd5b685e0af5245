"""Supabase-backed favorites repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from luxor.domain.favorites import FavoriteRecord, parse_timestamp
from luxor.domain.photos import PhotoLinks, PhotoRecord, PhotoUrls, PhotoUser
from luxor.services.favorites import FavoriteRepository

_TABLE = "favorites"


@dataclass
class SupabaseFavoriteRepository(FavoriteRepository):
    """Supabase implementation for favorites persistence."""

    client: Client

    def list_favorites(self, user_id: str) -> list[FavoriteRecord]:
        """Return the owner's favorites, newest first."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_favorite(row) for row in response.data or []]

    def find_by_photo_id(self, user_id: str, photo_id: str) -> FavoriteRecord | None:
        """Return the owner's favorite for a photo, if present."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("user_id", user_id)
            .eq("photo_id", photo_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_favorite(response.data[0])

    def save_favorite(self, user_id: str, photo: PhotoRecord) -> FavoriteRecord:
        """Insert the favorite or overwrite the snapshot of the existing row."""
        response = (
            self.client.table(_TABLE)
            .upsert(
                {
                    "user_id": user_id,
                    "photo_id": photo.id,
                    **photo_to_columns(photo),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id,photo_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save favorite")
        return _parse_favorite(response.data[0])

    def delete_favorite(self, favorite_id: int) -> None:
        """Delete a favorite row."""
        self.client.table(_TABLE).delete().eq("id", favorite_id).execute()


def photo_to_columns(photo: PhotoRecord) -> dict[str, object]:
    """Flatten a photo snapshot into the favorites table columns."""
    return {
        "width": photo.width,
        "height": photo.height,
        "description": photo.description,
        "alt_description": photo.alt_description,
        "url_raw": photo.urls.raw,
        "url_full": photo.urls.full,
        "url_regular": photo.urls.regular,
        "url_small": photo.urls.small,
        "url_thumb": photo.urls.thumb,
        "link_self": photo.links.self,
        "link_html": photo.links.html,
        "link_download": photo.links.download,
        "user_unsplash_id": photo.user.id,
        "user_username": photo.user.username,
        "user_name": photo.user.name,
        "user_portfolio_url": photo.user.portfolio_url,
        "user_profile_image": photo.user.profile_image,
        "photo_created_at": photo.created_at,
    }


def photo_from_columns(row: dict[str, object]) -> PhotoRecord:
    """Rebuild a photo snapshot from a favorites row.

    Rows written before the column split keep their snapshot in a
    ``photo_data`` JSON blob; empty columns fall back to that blob.
    """
    legacy = row.get("photo_data")
    if isinstance(legacy, dict):
        snapshot = PhotoRecord.from_payload({**legacy, "id": row["photo_id"]})
        row = {
            **row,
            **{
                column: value
                for column, value in photo_to_columns(snapshot).items()
                if row.get(column) is None
            },
        }
    return PhotoRecord(
        id=str(row["photo_id"]),
        width=row.get("width"),
        height=row.get("height"),
        description=row.get("description"),
        alt_description=row.get("alt_description"),
        urls=PhotoUrls(
            raw=row.get("url_raw"),
            full=row.get("url_full"),
            regular=row.get("url_regular"),
            small=row.get("url_small"),
            thumb=row.get("url_thumb"),
        ),
        links=PhotoLinks(
            self=row.get("link_self"),
            html=row.get("link_html"),
            download=row.get("link_download"),
        ),
        user=PhotoUser(
            id=row.get("user_unsplash_id"),
            username=row.get("user_username"),
            name=row.get("user_name"),
            portfolio_url=row.get("user_portfolio_url"),
            profile_image=row.get("user_profile_image"),
        ),
        created_at=row.get("photo_created_at"),
    )


def _parse_favorite(row: dict[str, object]) -> FavoriteRecord:
    """Parse a favorites row into a domain model."""
    return FavoriteRecord(
        id=int(row["id"]),
        user_id=str(row["user_id"]),
        photo_id=str(row["photo_id"]),
        photo=photo_from_columns(row),
        created_at=parse_timestamp(row.get("created_at")),
        updated_at=parse_timestamp(row.get("updated_at")),
    )
