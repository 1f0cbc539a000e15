"""Recipe validation and standardization.

The validator is a plain predicate so callers can plug in stricter rules;
standardization only cleans up values, it never rejects a recipe.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from meal_planner.schemas import RecipeIngredient


if TYPE_CHECKING:
    from meal_planner.schemas import Recipe


type RecipeValidator = Callable[[Recipe], bool]


def is_valid_recipe(recipe: Recipe) -> bool:
    """Require a non-blank name and non-blank ingredient names."""
    if not recipe.name.strip():
        return False
    return all(ingredient.name.strip() for ingredient in recipe.ingredients)


def standardize_recipe(recipe: Recipe) -> Recipe:
    """Return a cleaned-up copy of a recipe.

    - names trimmed (blank names get a placeholder)
    - ingredient names and units lower-cased
    - blank instruction steps dropped
    - nutrition clamped to >= 0, servings to >= 1
    """
    ingredients = [
        RecipeIngredient(
            name=ingredient.name.strip().lower() or "unknown ingredient",
            amount=max(0.0, ingredient.amount),
            unit=ingredient.unit.strip().lower() or "unit",
            category=ingredient.category.strip() or "other",
        )
        for ingredient in recipe.ingredients
    ]
    instructions = [step.strip() for step in recipe.instructions if step.strip()]

    return recipe.model_copy(
        update={
            "name": recipe.name.strip() or "Untitled Recipe",
            "ingredients": ingredients,
            "instructions": instructions,
            "calories": max(0.0, recipe.calories),
            "protein": max(0.0, recipe.protein),
            "carbs": max(0.0, recipe.carbs),
            "fat": max(0.0, recipe.fat),
            "fiber": max(0.0, recipe.fiber),
            "servings": max(1, recipe.servings),
            "tags": [tag.strip().lower() for tag in recipe.tags if tag.strip()],
        }
    )
