"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, docindex.api, docindex.observability, docindex.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docindex import __version__
from docindex.api.deps import get_service_cache
from docindex.api.errors import register_exception_handlers
from docindex.api.routers import documents_router, health_router
from docindex.configs import get_settings
from docindex.observability.logger import configure_logging
from docindex.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and builds the embedding provider, vector index and
    service once, so configuration errors surface at startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup: logging configured",
        extra={"environment": settings.environment, "debug": settings.debug},
    )

    cache = get_service_cache()
    try:
        if not settings.auth.token:
            logger.warning("AUTH_TOKEN is not set; every document request will be rejected")
        _ = cache.document_service
        logger.info(
            "Document service initialized",
            extra={
                "embedding_provider": settings.embedding.provider,
                "store_type": settings.vector_store.store_type,
            },
        )
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    cache.clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="DocIndex API",
        description="Store text, search it semantically, delete it by content ID",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Added first = runs innermost; request logs carry the correlation ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.service.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(documents_router)

    return app


app = create_app()


def run() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("docindex.main:app", host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
