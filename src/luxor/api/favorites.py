"""Favorites API endpoints scoped by the X-User-ID header."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse  # noqa: TC002

from luxor.api.identity import require_user_id
from luxor.api.models import StoreFavoriteRequest  # noqa: TC001
from luxor.api.responses import error_detail, failure, success

if TYPE_CHECKING:
    from luxor.containers import AppContainer

router = APIRouter(prefix="/api/favorites", tags=["favorites"])

_logger = logging.getLogger(__name__)


@router.get("")
async def list_favorites(
    request: Request, user_id: str = Depends(require_user_id)
) -> JSONResponse:
    """Return the caller's favorites, newest first."""
    container: AppContainer = request.app.state.container
    try:
        favorites = container.favorite_service.list_favorites(user_id)
    except Exception as exc:
        _logger.exception("Failed to fetch favorites", extra={"user_id": user_id})
        return failure(
            "Failed to fetch favorites",
            error_detail(exc, container.settings.environment),
        )
    return success([favorite.to_payload() for favorite in favorites])


@router.post("")
async def store_favorite(
    body: StoreFavoriteRequest,
    request: Request,
    user_id: str = Depends(require_user_id),
) -> JSONResponse:
    """Add a photo to the caller's favorites, updating the snapshot on repeats."""
    container: AppContainer = request.app.state.container
    try:
        favorite = container.favorite_service.save_favorite(
            user_id,
            body.photo_id,
            body.photo_data.model_dump(by_alias=True),
        )
    except Exception as exc:
        _logger.exception(
            "Failed to add favorite",
            extra={"user_id": user_id, "photo_id": body.photo_id},
        )
        return failure(
            "Failed to add favorite",
            error_detail(exc, container.settings.environment),
        )
    return success(
        favorite.to_payload(),
        "Photo added to favorites",
        status.HTTP_201_CREATED,
    )


@router.delete("/{photo_id}")
async def destroy_favorite(
    photo_id: str, request: Request, user_id: str = Depends(require_user_id)
) -> JSONResponse:
    """Remove a photo from the caller's favorites."""
    container: AppContainer = request.app.state.container
    try:
        removed = container.favorite_service.remove_favorite(user_id, photo_id)
    except Exception as exc:
        _logger.exception(
            "Failed to remove favorite",
            extra={"user_id": user_id, "photo_id": photo_id},
        )
        return failure(
            "Failed to remove favorite",
            error_detail(exc, container.settings.environment),
        )
    if not removed:
        return failure("Favorite not found", status_code=status.HTTP_404_NOT_FOUND)
    return success(None, "Photo removed from favorites")
