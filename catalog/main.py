"""FastAPI application entry point"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api import items as items_router
from catalog.api import system as system_router
from catalog.core.config import Settings, settings
from catalog.core.metrics import set_app_info
from catalog.core.middleware import RequestTracingMiddleware
from catalog.modules.items import CatalogStore, RandomFaultPolicy, default_catalog
from catalog.shared.errors.handlers import setup_exception_handlers
from catalog.shared.logging import get_logger, setup_logger

logger = get_logger(__name__)


def build_store(config: Settings) -> CatalogStore:
    """Create the catalog store described by the configuration."""
    store = CatalogStore(fault_policy=RandomFaultPolicy(config.store.failure_rate))
    if config.store.seed_on_startup:
        store.seed(default_catalog())
    return store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown events."""
    setup_logger(settings)
    logger.info(f"Starting {settings.app.name}...")

    if app.state.store is None:
        app.state.store = build_store(settings)
    logger.info(
        "Catalog store ready",
        items=app.state.store.count(),
        fault_policy=repr(app.state.store.fault_policy),
    )

    yield

    logger.info("Shutting down...")


def create_app(store: CatalogStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Pre-built store to serve; built from settings at startup when omitted

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.app.name,
        description="CRUD and search over an in-memory item catalog",
        version=settings.app.version,
        debug=settings.app.debug,
        lifespan=lifespan,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redirect_slashes=False,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.app.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTracingMiddleware)

    setup_exception_handlers(app)

    app.include_router(items_router.router, prefix="/api")
    app.include_router(system_router.router)

    set_app_info(settings.app.name, settings.app.version)

    return app


# Create the application instance
app = create_app()
