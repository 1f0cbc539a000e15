"""External recipe API clients."""

from meal_planner.clients.exceptions import (
    RecipeSourceError,
    RecipeSourceFetchError,
    RecipeSourceNotConfiguredError,
    RecipeSourceResponseError,
    RecipeSourceUnavailableError,
    RecipeSourceUnsupportedError,
)
from meal_planner.clients.matching import compute_match_percentage
from meal_planner.clients.protocol import RecipeSourceClient
from meal_planner.clients.spoonacular import SpoonacularClient
from meal_planner.clients.tasty import TastyClient
from meal_planner.clients.themealdb import TheMealDBClient


__all__ = [
    "RecipeSourceClient",
    "RecipeSourceError",
    "RecipeSourceFetchError",
    "RecipeSourceNotConfiguredError",
    "RecipeSourceResponseError",
    "RecipeSourceUnavailableError",
    "RecipeSourceUnsupportedError",
    "SpoonacularClient",
    "TastyClient",
    "TheMealDBClient",
    "compute_match_percentage",
]
