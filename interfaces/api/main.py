"""Main FastAPI application."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from application.ports.blob_store import BlobStore
from application.ports.catalog_store import CatalogStore
from infrastructure.blob_stores.supabase_blob_store import SupabaseBlobStore
from infrastructure.catalog_stores.sqlalchemy_catalog_store import SqlAlchemyCatalogStore
from infrastructure.config import settings
from infrastructure.logging import setup_logging
from interfaces.api.routes.auth_routes import router as auth_router
from interfaces.api.routes.genre_routes import content_router as genre_content_router
from interfaces.api.routes.genre_routes import router as genre_router
from interfaces.api.routes.song_routes import content_router as song_content_router
from interfaces.api.routes.song_routes import router as song_router
from interfaces.dependencies import get_container

# Configure structured logging
setup_logging()

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:  # noqa: ARG001
    """Handle application startup and shutdown."""
    logger.info("app_starting", env=settings.app_env, blob_backend=settings.blob_backend)

    # Make sure the catalog tables exist before serving requests
    try:
        catalog_store = get_container()[CatalogStore]
        if isinstance(catalog_store, SqlAlchemyCatalogStore):
            catalog_store.create_schema()
            logger.info("catalog_schema_ready")
    except Exception as e:  # noqa: BLE001
        logger.warning("catalog_schema_initialization_failed", error=str(e))
        # Don't fail startup - requests will report the store as unavailable

    logger.info("app_ready")

    yield

    logger.info("app_shutting_down")

    container = get_container()
    blob_store = container[BlobStore]
    if isinstance(blob_store, SupabaseBlobStore):
        blob_store.close()
    catalog_store = container[CatalogStore]
    if isinstance(catalog_store, SqlAlchemyCatalogStore):
        catalog_store.engine.dispose()

    logger.info("app_stopped")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Music catalog API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Origin",
            "Content-Type",
            "Authorization",
            "Accept",
            "X-Principal-Id",
            "X-Principal-Role",
        ],
    )

    # Public routes
    app.include_router(song_router)
    app.include_router(genre_router)

    # Authenticated routes
    app.include_router(auth_router)
    app.include_router(song_content_router)
    app.include_router(genre_content_router)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Create app instance
app = create_app()


def run() -> None:
    """Serve the API on ``API_HOST``:``API_PORT``."""
    logger.info("api_server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    run()
