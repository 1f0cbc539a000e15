"""Application lifespan event handlers.

This module defines the lifespan context manager that handles:
- Application startup: build the cache, clients and services
- Application shutdown: close HTTP connections
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from meal_planner.cache import ApiCache
from meal_planner.clients import SpoonacularClient, TastyClient, TheMealDBClient
from meal_planner.core.config import RecipeSource, Settings, config_manager, get_settings
from meal_planner.llm.client import create_meal_generator
from meal_planner.observability.logging import get_logger, setup_logging
from meal_planner.services.jobs import JobTracker
from meal_planner.services.recipes import RecipeService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from meal_planner.clients import RecipeSourceClient
    from meal_planner.llm.client.protocol import MealGeneratorProtocol

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.
    """
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    recipe_clients = await _init_recipe_clients(settings)

    meal_generator = await _init_meal_generator(settings)

    cache: ApiCache[object] = ApiCache(
        ttl=config_manager.get_config().cache_ttl_seconds,
        max_size=settings.cache.max_size,
    )

    app.state.config_manager = config_manager
    app.state.recipe_clients = recipe_clients
    app.state.spoonacular_client = recipe_clients[RecipeSource.SPOONACULAR]
    app.state.meal_generator = meal_generator
    app.state.recipe_service = RecipeService(
        config_manager=config_manager,
        cache=cache,
        sources=recipe_clients,
        meal_generator=meal_generator,
        coalesce_requests=settings.cache.coalesce_requests,
    )
    app.state.job_tracker = JobTracker(finished_ttl=settings.jobs.finished_ttl)

    logger.info("Application startup complete")


async def _init_recipe_clients(
    settings: Settings,
) -> dict[RecipeSource, RecipeSourceClient]:
    """Create and initialize one client per recipe source."""
    sources = settings.recipe_sources
    clients: dict[RecipeSource, RecipeSourceClient] = {
        RecipeSource.SPOONACULAR: SpoonacularClient(
            api_key=settings.RAPIDAPI_KEY,
            host=sources.spoonacular.host,
            timeout=sources.spoonacular.timeout,
        ),
        RecipeSource.TASTY: TastyClient(
            api_key=settings.RAPIDAPI_KEY,
            host=sources.tasty.host,
            timeout=sources.tasty.timeout,
        ),
        RecipeSource.THEMEALDB: TheMealDBClient(
            base_url=sources.themealdb.base_url,
            timeout=sources.themealdb.timeout,
        ),
    }
    for client in clients.values():
        await client.initialize()

    if not settings.RAPIDAPI_KEY:
        logger.warning(
            "RAPIDAPI_KEY not set - Spoonacular and Tasty requests will fall back to AI"
        )
    return clients


async def _init_meal_generator(settings: Settings) -> MealGeneratorProtocol | None:
    """Create the AI meal generator (optional - non-critical)."""
    if not settings.llm.enabled:
        logger.info("AI meal generation disabled")
        return None

    try:
        generator = create_meal_generator(settings.llm.provider, settings)
        await generator.initialize()
    except Exception:
        logger.exception("Failed to initialize meal generator - AI fallback unavailable")
        return None

    logger.info("Meal generator initialized", provider=settings.llm.provider)
    return generator


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services.

    Args:
        app: The FastAPI application instance.
    """
    logger.info("Shutting down application")

    meal_generator = getattr(app.state, "meal_generator", None)
    if meal_generator is not None:
        await meal_generator.shutdown()

    for client in getattr(app.state, "recipe_clients", {}).values():
        await client.shutdown()

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings the app was created with, falling back to the
    cached application settings.

    Args:
        app: The FastAPI application instance.

    Yields:
        None - control returns to the application to handle requests.
    """
    settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    yield
    await _shutdown(app)
