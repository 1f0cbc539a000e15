"""Tasty recipe API client (via RapidAPI).

Tasty has no pantry search, so ``find_by_ingredients`` searches by the
first ingredient and scores the results against the whole pantry locally.
It has no meal planner either.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from meal_planner.clients.base import HTTPRecipeClient
from meal_planner.clients.exceptions import RecipeSourceUnsupportedError
from meal_planner.clients.matching import rank_matches, score_pantry_match
from meal_planner.clients.tasty.models import TastyListResponse, TastyRecipe
from meal_planner.mappers import recipe_from_tasty
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

# Share of pantry items a search hit must use to count as a match.
MIN_PANTRY_COVERAGE: Final[float] = 0.3
_MAX_PAGE_SIZE: Final[int] = 40


class TastyClient(HTTPRecipeClient):
    """Async client for the Tasty API on RapidAPI.

    Attributes:
        api_key: RapidAPI key sent as ``X-RapidAPI-Key``.
        host: RapidAPI host sent as ``X-RapidAPI-Host``.
        timeout: HTTP request timeout in seconds.
    """

    DEFAULT_HOST: Final[str] = "tasty.p.rapidapi.com"
    display_name = "Tasty"

    def __init__(
        self,
        api_key: str,
        host: str = DEFAULT_HOST,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
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

    async def _list(self, params: dict[str, Any]) -> list[TastyRecipe]:
        path = "/recipes/list"
        page = self._parse(TastyListResponse, await self._get(path, params), path)
        # Compilations share the result list but carry no ingredients.
        return [recipe for recipe in page.results if recipe.sections]

    async def find_by_ingredients(
        self,
        ingredients: Sequence[str],
        *,
        number: int = 10,
        ranking: int = 1,
        ignore_pantry: bool = False,
    ) -> list[Recipe]:
        """Find recipes that use at least 30% of the given ingredients.

        ``ignore_pantry`` is accepted for interface parity; Tasty has no
        notion of pantry staples.
        """
        if not ingredients:
            return []

        hits = await self._list(
            {"q": ingredients[0], "from": 0, "size": min(number * 2, _MAX_PAGE_SIZE)}
        )
        matches = []
        for hit in hits:
            recipe, coverage = score_pantry_match(recipe_from_tasty(hit), ingredients)
            if coverage >= MIN_PANTRY_COVERAGE:
                matches.append(recipe)

        logger.debug(
            "Tasty ingredient matches",
            ingredients=len(ingredients),
            candidates=len(hits),
            results=len(matches),
        )
        return rank_matches(matches, ranking)[:number]

    async def get_recipe_details(self, recipe_id: str) -> Recipe:
        """Fetch one recipe by its Tasty id."""
        path = "/recipes/get-more-info"
        payload = await self._get(path, {"id": recipe_id})
        return recipe_from_tasty(self._parse(TastyRecipe, payload, path))

    async def complex_search(self, filters: RecipeSearchFilters) -> list[Recipe]:
        """Search recipes by query with pagination.

        The diet filter is sent as a Tasty tag (``"low carb"`` becomes
        ``low_carb``); other filters have no Tasty equivalent.
        """
        params: dict[str, Any] = {
            "from": filters.offset,
            "size": min(filters.number, _MAX_PAGE_SIZE),
        }
        query = filters.query or filters.include_ingredients
        if query:
            params["q"] = query
        if filters.diet:
            params["tags"] = filters.diet.lower().replace(" ", "_")

        recipes = [recipe_from_tasty(hit) for hit in await self._list(params)]
        logger.debug("Tasty search", results=len(recipes))
        return recipes

    async def generate_meal_plan(self, request: MealPlanRequest) -> MealPlan:
        msg = "Tasty does not generate meal plans"
        raise RecipeSourceUnsupportedError(msg)
