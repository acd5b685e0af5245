"""HTTP adapters for the Luxor favorites and search endpoints.

Every call resolves to a ``RemoteResult``; transport errors, non-JSON bodies and
error statuses are folded into ``success=False`` results so callers never
branch on httpx exceptions.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import quote

import httpx

from luxor.domain.photos import PhotoRecord, PhotoSearchPage

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteResult:
    """Uniform outcome of a remote call."""

    success: bool
    data: object = None
    message: str | None = None
    error: str | None = None


class FavoritesRemote(Protocol):
    """Interface for the favorites store."""

    async def list_favorites(self) -> RemoteResult:
        """List the owner's favorites."""

    async def add_favorite(self, photo: PhotoRecord) -> RemoteResult:
        """Create or refresh a favorite for the photo."""

    async def remove_favorite(self, photo_id: str) -> RemoteResult:
        """Delete the owner's favorite for a photo."""


class PhotoSearchRemote(Protocol):
    """Interface for the photo search proxy."""

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 12
    ) -> RemoteResult:
        """Search photos; data is a PhotoSearchPage on success."""


@dataclass
class HttpxLuxorClient(FavoritesRemote, PhotoSearchRemote):
    """Luxor API client implemented with httpx."""

    base_url: str
    user_id: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, user_id: str, timeout_seconds: float = 10.0
    ) -> "HttpxLuxorClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            user_id=user_id,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def list_favorites(self) -> RemoteResult:
        """List favorites via GET /favorites."""
        return await self._request(
            "GET", "/favorites", failure_message="Failed to fetch favorites"
        )

    async def add_favorite(self, photo: PhotoRecord) -> RemoteResult:
        """Create a favorite via POST /favorites with the full snapshot."""
        return await self._request(
            "POST",
            "/favorites",
            failure_message="Failed to add favorite",
            json={"photo_id": photo.id, "photo_data": photo.to_payload()},
        )

    async def remove_favorite(self, photo_id: str) -> RemoteResult:
        """Delete a favorite via DELETE /favorites/{photo_id}."""
        return await self._request(
            "DELETE",
            f"/favorites/{quote(photo_id, safe='')}",
            failure_message="Failed to remove favorite",
        )

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 12
    ) -> RemoteResult:
        """Search photos via GET /unsplash/search."""
        result = await self._request(
            "GET",
            "/unsplash/search",
            failure_message="Failed to search photos",
            params={"query": query, "page": page, "per_page": per_page},
        )
        if not result.success:
            return result
        return RemoteResult(
            success=True,
            data=PhotoSearchPage.from_payload(result.data),
            message=result.message,
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        failure_message: str,
        json: dict[str, object] | None = None,
        params: dict[str, object] | None = None,
    ) -> RemoteResult:
        try:
            response = await self.http_client.request(
                method,
                f"{self.base_url}{path}",
                headers={
                    "Content-Type": "application/json",
                    "X-User-ID": self.user_id,
                },
                json=json,
                params=params,
                timeout=self.timeout_seconds,
            )
            payload = response.json()
        except Exception as exc:
            _logger.warning(
                "%s: %s",
                failure_message,
                exc,
                extra={"method": method, "path": path},
            )
            return RemoteResult(
                success=False,
                message=failure_message,
                error=str(exc) or type(exc).__name__,
            )
        return _normalize(payload, response.status_code, failure_message)


def _normalize(
    payload: object, status_code: int, failure_message: str
) -> RemoteResult:
    """Convert a JSON envelope into a RemoteResult."""
    if not isinstance(payload, Mapping):
        return RemoteResult(
            success=False,
            message=failure_message,
            error=f"Unexpected response body (status {status_code})",
        )
    message = payload.get("message")
    error = payload.get("error")
    succeeded = payload.get("success") is True and 200 <= status_code < 300
    if not succeeded and not isinstance(error, str) and status_code >= 400:
        error = f"HTTP {status_code}"
    return RemoteResult(
        success=succeeded,
        data=payload.get("data"),
        message=message if isinstance(message, str) else None,
        error=error if isinstance(error, str) else None,
    )
