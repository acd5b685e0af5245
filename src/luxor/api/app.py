"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from luxor.api.favorites import router as favorites_router
from luxor.api.responses import register_error_handlers
from luxor.api.search import router as search_router
from luxor.app_logging import configure_logging
from luxor.config import parse_allowed_origins
from luxor.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Luxor API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_allowed_origins(container.settings.cors_allowed_origins),
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-User-ID"],
        max_age=86400,
    )
    register_error_handlers(app)

    app.include_router(search_router)
    app.include_router(favorites_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {
            "status": "ok",
            "service": "Luxor API",
            "timestamp": datetime.now(tz=UTC).isoformat(),
        }

    return app
