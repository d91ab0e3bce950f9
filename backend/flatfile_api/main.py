"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flatfile_api.application.schemas import MessageEnvelope
from flatfile_api.config import Settings, get_settings
from flatfile_api.infrastructure.logging.access_logger import AccessLogger
from flatfile_api.infrastructure.logging.log_config import setup_logging
from flatfile_api.infrastructure.storage.json_collection_store import JsonCollectionStore
from flatfile_api.presentation.api.error_handlers import ErrorEnvelopeHandler
from flatfile_api.presentation.api.middleware import (
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from flatfile_api.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, make sure collections exist."""
    settings = get_settings()
    setup_logging(settings)

    if settings.seed_empty_collections:
        store = JsonCollectionStore(settings.data_dir)
        created = store.ensure_collections([settings.users_file, settings.products_file])
        if created:
            logger.info("Seeded empty collections: %s", ", ".join(created))

    logger.info(
        "%s %s running in %s mode (data dir: %s)",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.data_dir,
    )
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Middleware (last added runs first)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        RequestLoggingMiddleware,
        access_logger=AccessLogger(colored=settings.is_development),
    )

    # One error handler, one envelope shape. Unexpected exceptions are answered
    # by the outermost ServerErrorMiddleware, so those 500s carry no security
    # headers; the access log still records them.
    ErrorEnvelopeHandler(include_stack_trace=settings.show_stack_trace).register(app)

    @app.get("/", response_model=MessageEnvelope, response_model_exclude_none=True, tags=["Health"])
    async def welcome() -> MessageEnvelope:
        return MessageEnvelope(message="Welcome to the API")

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "flatfile_api.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
