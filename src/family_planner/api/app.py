"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from family_planner.api.activities import router as activities_router
from family_planner.api.meal_plans import router as meal_plans_router
from family_planner.api.meals import router as meals_router
from family_planner.api.shopping import items_router, lists_router
from family_planner.api.users import router as users_router
from family_planner.app_logging import configure_logging
from family_planner.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Family planner starting",
            extra={"environment": container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(users_router)
    app.include_router(meals_router)
    app.include_router(meal_plans_router)
    app.include_router(activities_router)
    app.include_router(lists_router)
    app.include_router(items_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
