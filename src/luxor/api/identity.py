"""Anonymous owner identification via the X-User-ID header."""

from fastapi import Header, status

from luxor.api.responses import ApiError
from luxor.domain.identity import is_valid_user_id


async def require_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Return the caller's identifier, rejecting missing or malformed headers."""
    if not x_user_id:
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Missing X-User-ID header",
            "The X-User-ID header is required",
        )
    if not is_valid_user_id(x_user_id):
        raise ApiError(
            status.HTTP_400_BAD_REQUEST,
            "Invalid X-User-ID format",
            "X-User-ID must be a valid UUID",
        )
    return x_user_id
