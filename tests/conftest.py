"""Shared test fixtures for the meal planner tests."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest

from meal_planner.cache import ApiCache
from meal_planner.core.config import (
    ConfigManager,
    RecipeApiConfig,
    Settings,
    get_settings,
)
from meal_planner.schemas import (
    PantryItem,
    Recipe,
    RecipeIngredient,
    ResultSource,
    UserProfile,
)


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests: no keys, no metrics, no fallback."""
    return Settings(
        APP_ENV="test",
        RAPIDAPI_KEY="",
        OPENAI_API_KEY="",
        GEMINI_API_KEY="",
        observability={"metrics": {"enabled": False}},
        llm={"fallback": {"enabled": False}},
    )


@pytest.fixture
def config_manager() -> ConfigManager:
    """A fresh policy store with default values."""
    return ConfigManager(RecipeApiConfig())


@pytest.fixture
def cache() -> ApiCache[object]:
    """An empty result cache."""
    return ApiCache(ttl=3600, max_size=100)


@pytest.fixture
def pantry() -> list[PantryItem]:
    """A small pantry."""
    return [
        PantryItem(name="Chicken Breast", quantity=2, unit="piece", category="protein"),
        PantryItem(name=" rice ", quantity=500, unit="g", category="grain"),
        PantryItem(name="broccoli", quantity=1, unit="head", category="vegetable"),
    ]


@pytest.fixture
def profile() -> UserProfile:
    """A profile with hard constraints and targets."""
    return UserProfile(
        id="user-1",
        dietary_restrictions=["gluten-free"],
        dietary_preferences=["high-protein"],
        allergies=["peanuts"],
        calorie_target=2200,
        protein_target=150,
    )


@pytest.fixture
def api_recipe() -> Recipe:
    """A recipe as mapped from the recipe API."""
    return Recipe(
        id="632660",
        name="Apricot Glazed Apple Tart",
        ingredients=[
            RecipeIngredient(name="apples", amount=6, unit="large"),
            RecipeIngredient(name="butter", amount=0.5, unit="cup"),
        ],
        source=ResultSource.SPOONACULAR,
        used_ingredient_count=1,
        missed_ingredient_count=1,
        match_percentage=50,
        missing_ingredients=["butter"],
    )


@pytest.fixture
def mock_recipe_client() -> MagicMock:
    """Recipe API client mock; every lookup returns nothing by default."""
    client = MagicMock()
    client.initialize = AsyncMock()
    client.shutdown = AsyncMock()
    client.is_configured = True
    client.find_by_ingredients = AsyncMock(return_value=[])
    client.complex_search = AsyncMock(return_value=[])
    client.get_recipe_details = AsyncMock()
    client.generate_meal_plan = AsyncMock()
    return client


@pytest.fixture
def mock_meal_generator() -> MagicMock:
    """AI meal generator mock."""
    generator = MagicMock()
    generator.initialize = AsyncMock()
    generator.shutdown = AsyncMock()
    generator.generate_meal_json = AsyncMock()
    return generator


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Keep environment-dependent settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
