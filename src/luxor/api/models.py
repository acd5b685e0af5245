"""Request models for the Luxor API."""

from pydantic import BaseModel, Field


class PhotoUrlsIn(BaseModel):
    """Image URLs submitted with a favorite."""

    raw: str | None = None
    full: str | None = None
    regular: str
    small: str | None = None
    thumb: str | None = None


class PhotoLinksIn(BaseModel):
    """Outbound links submitted with a favorite."""

    self_link: str | None = Field(default=None, alias="self")
    html: str | None = None
    download: str | None = None


class PhotoUserIn(BaseModel):
    """Photographer attribution submitted with a favorite."""

    id: str | None = None
    username: str | None = None
    name: str
    portfolio_url: str | None = None
    profile_image: str | None = None


class PhotoDataIn(BaseModel):
    """Photo snapshot submitted with a favorite."""

    id: str = Field(min_length=1)
    width: int | None = None
    height: int | None = None
    description: str | None = None
    alt_description: str | None = None
    created_at: str | None = None
    urls: PhotoUrlsIn
    links: PhotoLinksIn | None = None
    user: PhotoUserIn


class StoreFavoriteRequest(BaseModel):
    """Body of POST /api/favorites."""

    photo_id: str = Field(min_length=1)
    photo_data: PhotoDataIn
