"""Spoonacular recipe API client (via RapidAPI).

Covers the four recipe lookups the meal planner needs: pantry matching,
recipe details, filtered search and meal plan generation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from meal_planner.clients.base import HTTPRecipeClient
from meal_planner.clients.exceptions import RecipeSourceResponseError
from meal_planner.clients.matching import compute_match_percentage
from meal_planner.clients.spoonacular.models import (
    SpoonacularIngredientMatch,
    SpoonacularPlanDay,
    SpoonacularRecipe,
    SpoonacularSearchResponse,
    SpoonacularWeekPlan,
)
from meal_planner.mappers import (
    meal_plan_day_from_spoonacular,
    recipe_from_ingredient_match,
    recipe_from_spoonacular,
)
from meal_planner.observability.logging import get_logger
from meal_planner.schemas import MealPlan, TimeFrame


if TYPE_CHECKING:
    from collections.abc import Sequence

    import httpx

    from meal_planner.schemas import MealPlanRequest, Recipe, RecipeSearchFilters


__all__ = ["SpoonacularClient", "compute_match_percentage"]

logger = get_logger(__name__)

_MATCHES_ADAPTER: Final = TypeAdapter(list[SpoonacularIngredientMatch])


class SpoonacularClient(HTTPRecipeClient):
    """Async client for the Spoonacular API on RapidAPI.

    Attributes:
        api_key: RapidAPI key sent as ``X-RapidAPI-Key``.
        host: RapidAPI host sent as ``X-RapidAPI-Host``.
        timeout: HTTP request timeout in seconds.
    """

    DEFAULT_HOST: Final[str] = "spoonacular-recipe-food-nutrition-v1.p.rapidapi.com"
    display_name = "Spoonacular"

    def __init__(
        self,
        api_key: str,
        host: str = DEFAULT_HOST,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: RapidAPI key; an empty key makes every call fail with
                ``RecipeSourceNotConfiguredError``.
            host: RapidAPI host of the Spoonacular API.
            timeout: HTTP request timeout in seconds.
            http_client: HTTP client for API requests.
        """
        super().__init__(timeout=timeout, http_client=http_client)
        self.api_key = api_key
        self.host = host

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return f"https://{self.host}"

    @property
    def is_configured(self) -> bool:
        """Whether an API key is set."""
        return bool(self.api_key)

    def _auth_headers(self) -> dict[str, str]:
        return {"X-RapidAPI-Key": self.api_key, "X-RapidAPI-Host": self.host}

    async def find_by_ingredients(
        self,
        ingredients: Sequence[str],
        *,
        number: int = 10,
        ranking: int = 1,
        ignore_pantry: bool = False,
    ) -> list[Recipe]:
        """Find recipes that use the given ingredients.

        Args:
            ingredients: Ingredient names.
            number: Maximum number of results.
            ranking: 1 maximizes used ingredients, 2 minimizes missing ones.
            ignore_pantry: Ignore pantry staples such as water and salt.

        Returns:
            Recipes with used/missed counts and a match percentage.
        """
        path = "/recipes/findByIngredients"
        payload = await self._get(
            path,
            {
                "ingredients": ",".join(ingredients),
                "number": number,
                "ranking": ranking,
                "ignorePantry": "true" if ignore_pantry else "false",
            },
        )
        try:
            matches = _MATCHES_ADAPTER.validate_python(payload)
        except ValidationError as e:
            msg = f"Unexpected Spoonacular payload for {path}: {e.error_count()} error(s)"
            raise RecipeSourceResponseError(msg) from e

        recipes = [
            recipe_from_ingredient_match(
                match,
                compute_match_percentage(
                    match.used_ingredient_count, match.missed_ingredient_count
                ),
            )
            for match in matches
        ]
        logger.debug(
            "Spoonacular ingredient matches",
            ingredients=len(ingredients),
            results=len(recipes),
        )
        return recipes

    async def get_recipe_details(self, recipe_id: str) -> Recipe:
        """Fetch one recipe including nutrition.

        Args:
            recipe_id: Spoonacular recipe id.

        Returns:
            The normalized recipe.
        """
        path = f"/recipes/{quote(recipe_id, safe='')}/information"
        payload = await self._get(path, {"includeNutrition": "true"})
        return recipe_from_spoonacular(self._parse(SpoonacularRecipe, payload, path))

    async def complex_search(self, filters: RecipeSearchFilters) -> list[Recipe]:
        """Search recipes with filters and pagination."""
        path = "/recipes/complexSearch"
        payload = await self._get(path, filters.to_query_params())
        response = self._parse(SpoonacularSearchResponse, payload, path)
        logger.debug(
            "Spoonacular search",
            results=len(response.results),
            total_results=response.total_results,
        )
        return [recipe_from_spoonacular(recipe) for recipe in response.results]

    async def generate_meal_plan(self, request: MealPlanRequest) -> MealPlan:
        """Generate a day or week meal plan.

        A ``day`` plan yields a single day labelled ``day``; a ``week`` plan
        yields one entry per weekday in upstream order.
        """
        path = "/mealplanner/generate"
        params: dict[str, Any] = {"timeFrame": request.time_frame}
        if request.target_calories is not None:
            params["targetCalories"] = request.target_calories
        if request.diet:
            params["diet"] = request.diet
        if request.exclude:
            params["exclude"] = ",".join(request.exclude)

        payload = await self._get(path, params)

        if request.time_frame == TimeFrame.WEEK:
            week = self._parse(SpoonacularWeekPlan, payload, path)
            days = [
                meal_plan_day_from_spoonacular(name, plan_day)
                for name, plan_day in week.week.items()
            ]
        else:
            plan_day = self._parse(SpoonacularPlanDay, payload, path)
            days = [meal_plan_day_from_spoonacular("day", plan_day)]

        return MealPlan(days=days)
