"""Photo search service proxying Unsplash."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from luxor.adapters.unsplash_client import UnsplashClient
from luxor.domain.photos import PhotoSearchPage

_logger = logging.getLogger(__name__)


@dataclass
class PhotoSearchService:
    """Service for photo searches normalized into photo records."""

    client: UnsplashClient
    default_per_page: int = 12
    max_per_page: int = 30

    async def search(
        self, query: str, page: int = 1, per_page: int | None = None
    ) -> PhotoSearchPage:
        """Search photos, clamping pagination to the supported range."""
        resolved_page = max(1, page)
        resolved_per_page = min(
            max(1, per_page or self.default_per_page), self.max_per_page
        )
        try:
            payload = await self.client.search_photos(
                query, page=resolved_page, per_page=resolved_per_page
            )
        except Exception:
            _logger.exception(
                "Unsplash search failed",
                extra={
                    "query": query,
                    "page": resolved_page,
                    "per_page": resolved_per_page,
                },
            )
            raise
        result = PhotoSearchPage.from_payload(payload)
        raw_results = (
            payload.get("results") if isinstance(payload, Mapping) else None
        )
        if isinstance(raw_results, list):
            skipped = len(raw_results) - len(result.results)
            if skipped:
                _logger.warning(
                    "Skipped malformed Unsplash results",
                    extra={"query": query, "skipped": skipped},
                )
        return result
