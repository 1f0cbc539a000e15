"""TheMealDB response payloads.

TheMealDB flattens ingredients into numbered ``strIngredientN`` and
``strMeasureN`` slots. They are kept as model extras and read back in slot
order by ``MealDbMeal.ingredient_lines``.
"""

from __future__ import annotations

from typing import Final

from pydantic import ConfigDict

from meal_planner.schemas.base import DownstreamResponse


MAX_INGREDIENT_SLOTS: Final[int] = 20


class MealDbMealSummary(DownstreamResponse):
    """Entry of a ``filter.php`` result."""

    id_meal: str
    str_meal: str = ""
    str_meal_thumb: str | None = None


class MealDbMeal(DownstreamResponse):
    """Full meal from ``lookup.php`` or ``search.php``."""

    model_config = ConfigDict(extra="allow")

    id_meal: str
    str_meal: str = ""
    str_category: str | None = None
    str_area: str | None = None
    str_instructions: str | None = None
    str_meal_thumb: str | None = None
    str_tags: str | None = None
    str_source: str | None = None

    def ingredient_lines(self) -> list[tuple[str, str]]:
        """Non-empty ``(ingredient, measure)`` pairs in slot order."""
        extras = self.model_extra or {}
        lines: list[tuple[str, str]] = []
        for slot in range(1, MAX_INGREDIENT_SLOTS + 1):
            name = (extras.get(f"strIngredient{slot}") or "").strip()
            if not name:
                continue
            measure = (extras.get(f"strMeasure{slot}") or "").strip()
            lines.append((name, measure))
        return lines


class MealDbFilterResponse(DownstreamResponse):
    """``filter.php`` result; ``meals`` is null when nothing matches."""

    meals: list[MealDbMealSummary] | None = None


class MealDbMealsResponse(DownstreamResponse):
    """``lookup.php`` and ``search.php`` result."""

    meals: list[MealDbMeal] | None = None
