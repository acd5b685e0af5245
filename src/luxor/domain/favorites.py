"""Domain models for favorites."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from luxor.domain.photos import PhotoRecord


@dataclass(frozen=True)
class FavoriteRecord:
    """A photo snapshot saved by one anonymous owner."""

    id: int | None
    user_id: str | None
    photo_id: str
    photo: PhotoRecord
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_payload(cls, payload: object) -> "FavoriteRecord":
        """Parse a favorite from its wire representation.

        Raises ValueError when the payload is not an object, has no photo_id
        or carries an invalid photo_data snapshot.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Favorite payload must be an object")
        photo_id = payload.get("photo_id")
        if not isinstance(photo_id, str) or not photo_id:
            raise ValueError("Favorite payload must contain a photo_id")
        photo_data = payload.get("photo_data")
        if isinstance(photo_data, Mapping) and not photo_data.get("id"):
            photo_data = {**photo_data, "id": photo_id}
        raw_id = payload.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raw_id = None
        user_id = payload.get("user_id")
        return cls(
            id=raw_id,
            user_id=user_id if isinstance(user_id, str) else None,
            photo_id=photo_id,
            photo=PhotoRecord.from_payload(photo_data),
            created_at=parse_timestamp(payload.get("created_at")),
            updated_at=parse_timestamp(payload.get("updated_at")),
        )

    @classmethod
    def placeholder(cls, photo: PhotoRecord) -> "FavoriteRecord":
        """Return a local record for a photo the store has not echoed back."""
        return cls(
            id=None,
            user_id=None,
            photo_id=photo.id,
            photo=photo,
            created_at=None,
            updated_at=None,
        )

    def to_payload(self) -> dict[str, object]:
        """Return the JSON representation used on the wire."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "photo_id": self.photo_id,
            "photo_data": self.photo.to_payload(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


def parse_timestamp(value: object) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None for anything else."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None
