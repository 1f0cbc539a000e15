"""Meal generation prompts.

Plain templates: pantry contents, profile constraints and the expected JSON
shape. Hard rules (allergies, restrictions) are listed before preferences.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Final

from meal_planner.llm.models import GeneratedMealList, GeneratedMealPlan

from .base import BasePrompt


if TYPE_CHECKING:
    from collections.abc import Sequence

    from meal_planner.schemas import (
        MealPlanRequest,
        PantryItem,
        RecipeSearchFilters,
        UserProfile,
    )


MEAL_JSON_SHAPE: Final[str] = (
    '{"name": str, "ingredients": [{"name": str, "amount": number, '
    '"unit": str, "category": str}], "instructions": [str], '
    '"calories": number, "protein": number, "carbs": number, "fat": number, '
    '"fiber": number, "prepTime": minutes, "cookTime": minutes, '
    '"servings": int, "category": str, "tags": [str], '
    '"matchPercentage": 0-100, "missingIngredients": [str]}'
)


def _profile_rules(profile: UserProfile | None) -> list[str]:
    if profile is None:
        return []

    lines: list[str] = []
    if profile.allergies:
        lines.append(f"HARD: never use these allergens: {', '.join(profile.allergies)}.")
    if profile.dietary_restrictions:
        lines.append(
            f"HARD: follow these restrictions: {', '.join(profile.dietary_restrictions)}."
        )
    if profile.dietary_preferences:
        lines.append(f"Prefer: {', '.join(profile.dietary_preferences)}.")
    for macro, target in profile.macro_targets.items():
        unit = "kcal" if macro == "calories" else "g"
        lines.append(f"Daily {macro} target: {target} {unit}.")
    return lines


def _pantry_line(pantry: Sequence[PantryItem]) -> str:
    if not pantry:
        return "The pantry is empty; use common ingredients."
    items = ", ".join(f"{item.name} ({item.quantity:g} {item.unit})" for item in pantry)
    return f"Pantry: {items}."


class MealGenerationPrompt(BasePrompt[GeneratedMealList]):
    """Meals built mainly from the user's pantry."""

    output_schema = GeneratedMealList

    def format(self, **kwargs: Any) -> str:
        """Render the prompt.

        Args:
            pantry: Sequence of ``PantryItem``.
            profile: Optional ``UserProfile``.
            meal_type: Meal slot, e.g. ``dinner``.
            number: How many meals to suggest.
        """
        pantry: Sequence[PantryItem] = kwargs["pantry"]
        profile: UserProfile | None = kwargs.get("profile")
        meal_type: str = kwargs.get("meal_type", "dinner")
        number: int = kwargs.get("number", 1)

        lines = [
            f"Suggest {number} {meal_type} recipe(s) that use as many pantry "
            "ingredients as possible.",
            _pantry_line(pantry),
            *_profile_rules(profile),
            f'Respond with {{"meals": [{MEAL_JSON_SHAPE}]}}.',
        ]
        return "\n".join(lines)


class RecipeSearchPrompt(BasePrompt[GeneratedMealList]):
    """Recipes matching search filters."""

    output_schema = GeneratedMealList

    def format(self, **kwargs: Any) -> str:
        """Render the prompt.

        Args:
            filters: ``RecipeSearchFilters``.
            profile: Optional ``UserProfile``.
        """
        filters: RecipeSearchFilters = kwargs["filters"]
        profile: UserProfile | None = kwargs.get("profile")

        criteria = filters.model_dump(
            exclude={"number", "offset", "add_recipe_information", "fill_ingredients"},
            exclude_none=True,
            by_alias=False,
        )
        described = "; ".join(f"{name}: {value}" for name, value in criteria.items())

        lines = [
            f"Suggest {filters.number} recipe(s) matching: {described or 'any recipe'}.",
            *_profile_rules(profile),
            f'Respond with {{"meals": [{MEAL_JSON_SHAPE}]}}.',
        ]
        return "\n".join(lines)


class MealPlanPrompt(BasePrompt[GeneratedMealPlan]):
    """A day or week of meals."""

    output_schema = GeneratedMealPlan

    def format(self, **kwargs: Any) -> str:
        """Render the prompt.

        Args:
            request: ``MealPlanRequest``.
            pantry: Sequence of ``PantryItem``.
            profile: Optional ``UserProfile``.
        """
        request: MealPlanRequest = kwargs["request"]
        pantry: Sequence[PantryItem] = kwargs.get("pantry", ())
        profile: UserProfile | None = kwargs.get("profile")

        span = "7 days (monday to sunday)" if request.time_frame == "week" else "1 day"
        lines = [
            f"Plan breakfast, lunch and dinner for {span}.",
            _pantry_line(pantry),
        ]
        if request.target_calories is not None:
            lines.append(f"HARD: about {request.target_calories} kcal per day.")
        if request.diet:
            lines.append(f"HARD: diet: {request.diet}.")
        if request.exclude:
            lines.append(f"HARD: exclude: {', '.join(request.exclude)}.")
        lines.extend(_profile_rules(profile))
        lines.append(
            f'Respond with {{"days": [{{"day": str, "meals": [{MEAL_JSON_SHAPE}]}}]}}.'
        )
        return "\n".join(lines)
