"""Unsplash API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class UnsplashClient(Protocol):
    """Interface for Unsplash API interactions."""

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 12
    ) -> dict[str, object]:
        """Search photos by query and return raw API data."""


@dataclass
class HttpxUnsplashClient(UnsplashClient):
    """HTTPX-backed Unsplash client."""

    access_key: str
    base_url: str
    utm_source: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(
        cls, access_key: str, base_url: str, utm_source: str
    ) -> "HttpxUnsplashClient":
        """Create an Unsplash client with a managed httpx session."""
        return cls(
            access_key=access_key,
            base_url=base_url,
            utm_source=utm_source,
            http_client=httpx.AsyncClient(),
        )

    async def search_photos(
        self, query: str, page: int = 1, per_page: int = 12
    ) -> dict[str, object]:
        """Search photos using Unsplash's /search/photos endpoint."""
        if not self.access_key:
            raise RuntimeError("Unsplash access key is not configured")
        url = f"{self.base_url}/search/photos"
        response = await self.http_client.get(
            url,
            params={
                "query": query,
                "page": page,
                "per_page": per_page,
                "utm_source": self.utm_source,
            },
            headers={
                "Authorization": f"Client-ID {self.access_key}",
                "Accept-Version": "v1",
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
