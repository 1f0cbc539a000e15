"""Recipe source client Protocol definition.

Defines the interface an external recipe API client must implement so the
recipe service can be pointed at any registered source.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from collections.abc import Sequence

    from meal_planner.schemas import (
        MealPlan,
        MealPlanRequest,
        Recipe,
        RecipeSearchFilters,
    )


@runtime_checkable
class RecipeSourceClient(Protocol):
    """Protocol for external recipe API clients.

    Every method raises a ``RecipeSourceError`` subclass on failure; an
    empty list is a successful response with no matches.
    """

    async def initialize(self) -> None:
        """Initialize client resources (HTTP connections, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def find_by_ingredients(
        self,
        ingredients: Sequence[str],
        *,
        number: int = 10,
        ranking: int = 1,
        ignore_pantry: bool = False,
    ) -> list[Recipe]:
        """Find recipes that use the given ingredients."""
        ...

    async def get_recipe_details(self, recipe_id: str) -> Recipe:
        """Fetch one recipe with ingredients, instructions and nutrition."""
        ...

    async def complex_search(self, filters: RecipeSearchFilters) -> list[Recipe]:
        """Search recipes with filters and pagination."""
        ...

    async def generate_meal_plan(self, request: MealPlanRequest) -> MealPlan:
        """Generate a day or week meal plan."""
        ...
