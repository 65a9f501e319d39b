"""FastAPI application factory for the dev REST server.

Serves the mock backend over the same REST contract the HTTP backend
speaks, so ``ApiClient`` can run against a real server locally.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cms.application.interfaces import KeyValueStore
from cms.config import get_settings
from cms.infrastructure.dependencies import build_key_value_store
from cms.infrastructure.logging.log_config import setup_logging
from cms.infrastructure.mock import MockArticleBackend, MockAuthBackend, MockCategoryBackend
from cms.presentation.api.error_handlers import register_exception_handlers
from cms.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_collections(store: KeyValueStore) -> None:
    """Load each mock collection once so an empty store gets its defaults."""
    articles = await MockArticleBackend(store).ensure_seeded()
    categories = await MockCategoryBackend(store).ensure_seeded()
    users = await MockAuthBackend(store).ensure_seeded()
    logger.info("Store ready: %d articles, %d categories, %d users", articles, categories, users)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: seed the mock store before serving."""
    await _seed_collections(app.state.store)
    yield
    logger.info("Dev server shutting down")


def create_app(store: KeyValueStore | None = None) -> FastAPI:
    """Build the app around ``store`` (or the one configured in settings)."""
    settings = get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_key_value_store(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    logger.info("Serving mock backend from %s", type(app.state.store).__name__)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cms.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
