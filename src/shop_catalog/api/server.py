"""FastAPI application server."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import redis.asyncio as redis
from fastapi import FastAPI, Request
from starlette.responses import JSONResponse

from shop_catalog.api.middleware import RequestLoggingMiddleware
from shop_catalog.api.routes import router
from shop_catalog.browser import CatalogBrowser
from shop_catalog.catalog_source import CatalogSource, InMemoryCatalogSource, JsonFileCatalogSource
from shop_catalog.config import Settings, get_settings
from shop_catalog.engine import CatalogQueryEngine
from shop_catalog.exceptions import CatalogError
from shop_catalog.observability.logging import configure_logging
from shop_catalog.state import CatalogStateStore
from shop_catalog.storage import FilterStateStore, InMemoryFilterStateStore, RedisFilterStateStore

logger = logging.getLogger(__name__)


def build_browser(settings: Settings, redis_client: redis.Redis | None = None) -> CatalogBrowser:
    """
    Wire a catalog browser from settings.

    Falls back to in-memory filter storage when Redis is requested but
    no client is available.
    """
    storage: FilterStateStore
    if settings.filter_state_backend == "redis" and redis_client is not None:
        storage = RedisFilterStateStore(
            redis_client=redis_client,
            ttl_seconds=settings.filter_state_ttl_seconds,
        )
        logger.info("Filter state store: redis backend")
    else:
        if settings.filter_state_backend == "redis":
            logger.warning("Redis unavailable; filter state will not survive restarts")
        storage = InMemoryFilterStateStore()
        logger.info("Filter state store: memory backend")

    source: CatalogSource
    if settings.catalog_data_path:
        source = JsonFileCatalogSource(settings.catalog_data_path)
    else:
        source = InMemoryCatalogSource()
        logger.warning("CATALOG_DATA_PATH not set; serving an empty catalog")

    return CatalogBrowser(
        source=source,
        state=CatalogStateStore(storage, key=settings.filter_state_key),
        engine=CatalogQueryEngine(
            default_page_size=settings.default_page_size,
            free_shipping_threshold=settings.free_shipping_threshold,
        ),
        page_size=settings.catalog_page_size,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Initializes and shuts down:
    - Structured logging
    - Redis connection (only for the redis filter state backend)
    - Catalog browser
    """
    settings = get_settings()

    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service=settings.api_title,
        environment=settings.service_environment,
    )

    logger.info("Starting Shop Catalog...")

    redis_client: redis.Redis | None = None
    if settings.filter_state_backend == "redis":
        try:
            redis_client = redis.from_url(settings.redis_url, decode_responses=True)
            await redis_client.ping()
            logger.info("Redis connected")
        except (redis.ConnectionError, OSError) as e:
            logger.warning("Redis not available: %s", e, exc_info=True)
            redis_client = None

    app.state.browser = build_browser(settings, redis_client)
    logger.info("Shop Catalog ready")

    yield

    logger.info("Shutting down Shop Catalog...")
    if redis_client:
        await redis_client.aclose()
        logger.info("Redis disconnected")
    logger.info("Shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Product catalog filtering, sorting and pagination with shared filter state.",
        lifespan=lifespan,
    )

    # Domain exception handler: map CatalogError to JSON response
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "healthy", "version": settings.api_version}

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shop_catalog.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
