"""Integration test configuration.

The full FastAPI app runs in-process behind httpx's ASGITransport. The
transport does not run the lifespan, so services are placed on app.state
by the fixtures here, with the recipe API and AI provider mocked.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

import httpx
import pytest

from meal_planner.factory import create_app
from meal_planner.services.jobs import JobTracker
from meal_planner.services.recipes import RecipeService


if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from fastapi import FastAPI

    from meal_planner.cache import ApiCache
    from meal_planner.core.config import ConfigManager, Settings


pytestmark = pytest.mark.integration

API_PREFIX = "/api/v1/meal-planner"


@pytest.fixture
def app(
    test_settings: Settings,
    config_manager: ConfigManager,
    cache: ApiCache[object],
    mock_recipe_client: MagicMock,
    mock_meal_generator: MagicMock,
) -> FastAPI:
    """App with mocked recipe sources on app.state."""
    application = create_app(test_settings)
    application.state.config_manager = config_manager
    application.state.spoonacular_client = mock_recipe_client
    application.state.meal_generator = mock_meal_generator
    application.state.recipe_service = RecipeService(
        config_manager=config_manager,
        cache=cache,
        sources={"spoonacular": mock_recipe_client},
        meal_generator=mock_meal_generator,
    )
    application.state.job_tracker = JobTracker()
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url=f"http://test{API_PREFIX}"
    ) as http_client:
        yield http_client
