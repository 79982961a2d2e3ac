"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recipe_nutrition.api.foods import router as foods_router
from recipe_nutrition.api.recipes import router as recipes_router
from recipe_nutrition.app_logging import configure_logging
from recipe_nutrition.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if not container.settings.fdc_configured:
            logger.warning("FDC_API_KEY is not set; food lookups will fail")
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Recipe Nutrition", lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(recipes_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
