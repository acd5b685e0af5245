"""Domain models for photo snapshots.

A photo record is the metadata of a remote photo captured at the moment it was
retrieved or favorited. Records are built from loosely typed JSON payloads only
through ``PhotoRecord.from_payload`` so every other layer can rely on the
field types below.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class PhotoUrls:
    """Image URLs at the fixed resolution tiers."""

    raw: str | None = None
    full: str | None = None
    regular: str | None = None
    small: str | None = None
    thumb: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "PhotoUrls":
        data = _as_mapping(payload)
        return cls(
            raw=_optional_str(data.get("raw")),
            full=_optional_str(data.get("full")),
            regular=_optional_str(data.get("regular")),
            small=_optional_str(data.get("small")),
            thumb=_optional_str(data.get("thumb")),
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "raw": self.raw,
            "full": self.full,
            "regular": self.regular,
            "small": self.small,
            "thumb": self.thumb,
        }


@dataclass(frozen=True)
class PhotoLinks:
    """Outbound links for a photo."""

    self: str | None = None
    html: str | None = None
    download: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "PhotoLinks":
        data = _as_mapping(payload)
        return cls(
            self=_optional_str(data.get("self")),
            html=_optional_str(data.get("html")),
            download=_optional_str(data.get("download")),
        )

    def to_payload(self) -> dict[str, object]:
        return {"self": self.self, "html": self.html, "download": self.download}


@dataclass(frozen=True)
class PhotoUser:
    """Attribution for the photographer."""

    id: str | None = None
    username: str | None = None
    name: str | None = None
    portfolio_url: str | None = None
    profile_image: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "PhotoUser":
        """Parse attribution, collapsing Unsplash's profile image sizes."""
        data = _as_mapping(payload)
        profile_image = data.get("profile_image")
        if isinstance(profile_image, Mapping):
            profile_image = profile_image.get("medium")
        return cls(
            id=_optional_str(data.get("id")),
            username=_optional_str(data.get("username")),
            name=_optional_str(data.get("name")),
            portfolio_url=_optional_str(data.get("portfolio_url")),
            profile_image=_optional_str(profile_image),
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "portfolio_url": self.portfolio_url,
            "profile_image": self.profile_image,
        }


@dataclass(frozen=True)
class PhotoRecord:
    """Immutable snapshot of a remote photo's metadata."""

    id: str
    width: int | None = None
    height: int | None = None
    description: str | None = None
    alt_description: str | None = None
    urls: PhotoUrls = field(default_factory=PhotoUrls)
    links: PhotoLinks = field(default_factory=PhotoLinks)
    user: PhotoUser = field(default_factory=PhotoUser)
    created_at: str | None = None

    @classmethod
    def from_payload(cls, payload: object) -> "PhotoRecord":
        """Build a record from a JSON mapping.

        Unknown keys are ignored and missing optional fields default to None.
        Raises ValueError when the payload is not a mapping or has no id.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Photo payload must be an object")
        photo_id = _optional_str(payload.get("id"))
        if not photo_id:
            raise ValueError("Photo payload must contain an id")
        return cls(
            id=photo_id,
            width=_optional_int(payload.get("width")),
            height=_optional_int(payload.get("height")),
            description=_optional_str(payload.get("description")),
            alt_description=_optional_str(payload.get("alt_description")),
            urls=PhotoUrls.from_payload(payload.get("urls")),
            links=PhotoLinks.from_payload(payload.get("links")),
            user=PhotoUser.from_payload(payload.get("user")),
            created_at=_optional_str(payload.get("created_at")),
        )

    def to_payload(self) -> dict[str, object]:
        """Return the JSON representation used on the wire."""
        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "description": self.description,
            "alt_description": self.alt_description,
            "urls": self.urls.to_payload(),
            "links": self.links.to_payload(),
            "user": self.user.to_payload(),
            "created_at": self.created_at,
        }


@dataclass(frozen=True)
class PhotoSearchPage:
    """One page of photo search results."""

    results: list[PhotoRecord]
    total: int
    total_pages: int

    @classmethod
    def from_payload(cls, payload: object) -> "PhotoSearchPage":
        """Parse a search page, skipping results that are not valid photos."""
        data = _as_mapping(payload)
        raw_results = data.get("results")
        results: list[PhotoRecord] = []
        if isinstance(raw_results, list):
            for item in raw_results:
                try:
                    results.append(PhotoRecord.from_payload(item))
                except ValueError:
                    continue
        return cls(
            results=results,
            total=_optional_int(data.get("total")) or 0,
            total_pages=_optional_int(data.get("total_pages")) or 0,
        )

    def to_payload(self) -> dict[str, object]:
        return {
            "results": [photo.to_payload() for photo in self.results],
            "total": self.total,
            "total_pages": self.total_pages,
        }


def _as_mapping(value: object) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        return value
    return {}


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _optional_int(value: object) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
