"""TheMealDB recipe API client.

The public test key is part of the base URL, so no credentials are sent.
Ingredient filtering returns only ids and names; each hit is looked up to
score it against the pantry.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Final

from meal_planner.clients.base import HTTPRecipeClient
from meal_planner.clients.exceptions import (
    RecipeSourceFetchError,
    RecipeSourceUnsupportedError,
)
from meal_planner.clients.matching import rank_matches, score_pantry_match
from meal_planner.clients.themealdb.models import (
    MealDbFilterResponse,
    MealDbMeal,
    MealDbMealsResponse,
)
from meal_planner.mappers import recipe_from_mealdb
from meal_planner.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from meal_planner.schemas import (
        MealPlan,
        MealPlanRequest,
        Recipe,
        RecipeSearchFilters,
    )


logger = get_logger(__name__)

# Share of pantry items a lookup must use to count as a match.
MIN_PANTRY_COVERAGE: Final[float] = 0.5


class TheMealDBClient(HTTPRecipeClient):
    """Async client for TheMealDB JSON API.

    Attributes:
        timeout: HTTP request timeout in seconds.
    """

    DEFAULT_BASE_URL: Final[str] = "https://www.themealdb.com/api/json/v1/1"
    display_name = "TheMealDB"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(timeout=timeout, http_client=http_client)
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self._base_url

    async def _lookup(self, meal_id: str) -> MealDbMeal:
        path = "/lookup.php"
        payload = await self._get(path, {"i": meal_id})
        response = self._parse(MealDbMealsResponse, payload, path)
        if not response.meals:
            msg = f"TheMealDB has no meal {meal_id}"
            raise RecipeSourceFetchError(404, msg)
        return response.meals[0]

    async def find_by_ingredients(
        self,
        ingredients: Sequence[str],
        *,
        number: int = 10,
        ranking: int = 1,
        ignore_pantry: bool = False,
    ) -> list[Recipe]:
        """Find meals that use at least half of the given ingredients.

        TheMealDB filters on a single ingredient, so the first one selects
        candidates and the rest only affect scoring. ``ignore_pantry`` is
        accepted for interface parity.
        """
        if not ingredients:
            return []

        path = "/filter.php"
        payload = await self._get(path, {"i": ingredients[0].strip().replace(" ", "_")})
        candidates = self._parse(MealDbFilterResponse, payload, path).meals or []
        meals = await asyncio.gather(
            *(self._lookup(candidate.id_meal) for candidate in candidates[: number * 2])
        )

        matches = []
        for meal in meals:
            recipe, coverage = score_pantry_match(recipe_from_mealdb(meal), ingredients)
            if coverage >= MIN_PANTRY_COVERAGE:
                matches.append(recipe)

        logger.debug(
            "TheMealDB ingredient matches",
            ingredients=len(ingredients),
            candidates=len(candidates),
            results=len(matches),
        )
        return rank_matches(matches, ranking)[:number]

    async def get_recipe_details(self, recipe_id: str) -> Recipe:
        """Fetch one meal by its TheMealDB id.

        Raises:
            RecipeSourceFetchError: Status 404 when the id is unknown;
                TheMealDB itself answers 200 with ``meals: null``.
        """
        return recipe_from_mealdb(await self._lookup(recipe_id))

    async def complex_search(self, filters: RecipeSearchFilters) -> list[Recipe]:
        """Search meals by name.

        ``cuisine`` matches the meal's area and ``type`` its category, both
        case-insensitively; pagination is applied to the filtered list.
        """
        path = "/search.php"
        payload = await self._get(path, {"s": filters.query or ""})
        meals = self._parse(MealDbMealsResponse, payload, path).meals or []

        if filters.cuisine:
            cuisine = filters.cuisine.lower()
            meals = [m for m in meals if (m.str_area or "").lower() == cuisine]
        if filters.type:
            dish_type = filters.type.lower()
            meals = [m for m in meals if (m.str_category or "").lower() == dish_type]

        page = meals[filters.offset : filters.offset + filters.number]
        logger.debug("TheMealDB search", results=len(page), total_results=len(meals))
        return [recipe_from_mealdb(meal) for meal in page]

    async def generate_meal_plan(self, request: MealPlanRequest) -> MealPlan:
        msg = "TheMealDB does not generate meal plans"
        raise RecipeSourceUnsupportedError(msg)
