"""Photo search endpoint proxying Unsplash."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse  # noqa: TC002

from luxor.api.identity import require_user_id
from luxor.api.responses import error_detail, failure, success

if TYPE_CHECKING:
    from luxor.containers import AppContainer

router = APIRouter(
    prefix="/api/unsplash",
    tags=["search"],
    dependencies=[Depends(require_user_id)],
)

_logger = logging.getLogger(__name__)


@router.get("/search")
async def search_photos(
    request: Request,
    query: str = Query(min_length=1, max_length=255),
    page: int = 1,
    per_page: int | None = Query(default=None, ge=1, le=30),
) -> JSONResponse:
    """Search Unsplash photos with pagination."""
    container: AppContainer = request.app.state.container
    try:
        result = await container.photo_search_service.search(
            query, page=page, per_page=per_page
        )
    except Exception as exc:
        _logger.exception("Failed to search photos", extra={"query": query})
        return failure(
            "Failed to search photos",
            error_detail(exc, container.settings.environment),
        )
    return success(result.to_payload())
