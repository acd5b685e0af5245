"""Response envelope helpers and exception handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

_logger = logging.getLogger(__name__)

_VALIDATION_STATUS = 422


class ApiError(Exception):
    """Error rendered as a failure envelope."""

    def __init__(
        self, status_code: int, message: str, error: str | None = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


def success(
    data: object = None, message: str | None = None, status_code: int = 200
) -> JSONResponse:
    """Return a success envelope."""
    payload: dict[str, object] = {"success": True, "data": data}
    if message is not None:
        payload["message"] = message
    return JSONResponse(payload, status_code=status_code)


def failure(
    message: str, error: str | None = None, status_code: int = 500
) -> JSONResponse:
    """Return a failure envelope."""
    return JSONResponse(_failure_payload(message, error), status_code=status_code)


def error_detail(exc: Exception, environment: str) -> str:
    """Describe an exception for the failure envelope."""
    if environment == "local":
        return f"{type(exc).__name__}: {exc}".strip()
    return str(exc)


def register_error_handlers(app: FastAPI) -> None:
    """Render API errors and validation errors as failure envelopes."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return failure(exc.message, exc.error, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"]),
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        _logger.warning(
            "Request validation failed",
            extra={"path": request.url.path, "errors": errors},
        )
        payload = _failure_payload(
            "Validation failed",
            "; ".join(f"{item['field']}: {item['message']}" for item in errors),
        )
        payload["errors"] = errors
        return JSONResponse(payload, status_code=_VALIDATION_STATUS)


def _failure_payload(message: str, error: str | None) -> dict[str, object]:
    payload: dict[str, object] = {"success": False, "message": message}
    if error is not None:
        payload["error"] = error
    return payload
