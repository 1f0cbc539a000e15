"""Recipe service package.

Resolves recipe and meal plan requests across the in-memory cache, the
configured recipe API and AI generation.
"""

from meal_planner.services.recipes.exceptions import (
    NoUsableResultError,
    RecipeServiceError,
    RecipeSourcesExhaustedError,
)
from meal_planner.services.recipes.service import (
    RecipeService,
    normalize_ingredient_names,
)
from meal_planner.services.recipes.validation import (
    RecipeValidator,
    is_valid_recipe,
    standardize_recipe,
)


__all__ = [
    "NoUsableResultError",
    "RecipeService",
    "RecipeServiceError",
    "RecipeSourcesExhaustedError",
    "RecipeValidator",
    "is_valid_recipe",
    "normalize_ingredient_names",
    "standardize_recipe",
]
