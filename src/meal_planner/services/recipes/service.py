"""Recipe service: cache, recipe API and AI generation behind one call.

Provides methods for:
- Pantry-based recipe matching
- Filtered recipe search
- Meal plan generation
- Recipe details lookup

Every request is resolved the same way:
1. Look up the in-memory cache
2. Ask the configured recipe API (when the policy prefers it)
3. Fall back to AI generation (when the policy allows it)
4. Validate, cache and return the result
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from meal_planner.cache import ApiCache
from meal_planner.clients.exceptions import (
    RecipeSourceError,
    RecipeSourceNotConfiguredError,
)
from meal_planner.llm.exceptions import LLMConfigurationError, LLMError
from meal_planner.llm.parsing import parse_meal_payload, parse_meal_plan_payload
from meal_planner.llm.prompts import (
    MealGenerationPrompt,
    MealPlanPrompt,
    RecipeSearchPrompt,
)
from meal_planner.observability.logging import get_logger
from meal_planner.observability.metrics import record_cache_lookup, record_source_attempt
from meal_planner.schemas import MealPlan, MealPlanDay, Recipe
from meal_planner.services.recipes.constants import (
    AI_SOURCE,
    DETAILS_REQUEST,
    MAX_AI_MEALS,
    MEAL_PLAN_REQUEST,
    PANTRY_RECIPES_REQUEST,
    SEARCH_REQUEST,
)
from meal_planner.services.recipes.exceptions import (
    NoUsableResultError,
    RecipeSourcesExhaustedError,
)
from meal_planner.services.recipes.validation import is_valid_recipe, standardize_recipe


if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence

    from meal_planner.clients.protocol import RecipeSourceClient
    from meal_planner.core.config import ConfigManager, RecipeApiConfig
    from meal_planner.llm.client.protocol import MealGeneratorProtocol
    from meal_planner.schemas import (
        MealPlanRequest,
        PantryItem,
        RecipeSearchFilters,
        UserProfile,
    )
    from meal_planner.services.recipes.validation import RecipeValidator


logger = get_logger(__name__)


def normalize_ingredient_names(pantry: Iterable[PantryItem]) -> list[str]:
    """Lower-case, strip, de-duplicate and sort pantry ingredient names."""
    return sorted({item.name.strip().lower() for item in pantry if item.name.strip()})


def _profile_params(profile: UserProfile | None) -> dict[str, Any] | None:
    """Profile fields that change results, in a stable order."""
    if profile is None:
        return None
    return {
        "allergies": sorted(profile.allergies),
        "preferences": sorted(profile.dietary_preferences),
        "restrictions": sorted(profile.dietary_restrictions),
        "targets": profile.macro_targets,
    }


def _has_results(result: Any) -> bool:
    if isinstance(result, MealPlan):
        return bool(result.meals)
    if isinstance(result, list):
        return bool(result)
    return result is not None


class RecipeService:
    """Resolves recipe requests across cache, recipe API and AI generation.

    Orchestrates:
    1. Cache lookups keyed by request type and normalized parameters
    2. The recipe API registered for the configured default source
    3. AI generation when the API fails, returns nothing usable, or is
       not preferred
    4. Standardization of AI recipes and validation of all results

    Concurrent identical requests share one in-flight resolution when
    ``coalesce_requests`` is enabled.
    """

    def __init__(
        self,
        config_manager: ConfigManager,
        cache: ApiCache[Any],
        sources: Mapping[str, RecipeSourceClient],
        meal_generator: MealGeneratorProtocol | None = None,
        validator: RecipeValidator = is_valid_recipe,
        *,
        coalesce_requests: bool = True,
    ) -> None:
        """Initialize the service.

        Args:
            config_manager: Source policy store; snapshotted per request.
            cache: Result cache shared by all request types.
            sources: Recipe API clients keyed by ``RecipeSource`` value.
            meal_generator: AI provider; None disables the AI path.
            validator: Predicate a recipe must satisfy to be returned.
            coalesce_requests: Share in-flight work between identical
                concurrent requests.
        """
        self._config_manager = config_manager
        self._cache = cache
        self._sources = dict(sources)
        self._meal_generator = meal_generator
        self._validator = validator
        self._coalesce_requests = coalesce_requests
        self._pending: dict[str, asyncio.Task[Any]] = {}
        self._meal_prompt = MealGenerationPrompt()
        self._search_prompt = RecipeSearchPrompt()
        self._plan_prompt = MealPlanPrompt()

    @property
    def cache(self) -> ApiCache[Any]:
        """The result cache."""
        return self._cache

    @property
    def has_meal_generator(self) -> bool:
        """Whether an AI provider is configured."""
        return self._meal_generator is not None

    # =========================================================================
    # Operations
    # =========================================================================

    async def find_recipes_for_pantry(
        self,
        pantry: Sequence[PantryItem],
        profile: UserProfile | None = None,
        *,
        number: int = 10,
        ranking: int = 1,
        ignore_pantry: bool = False,
        meal_type: str = "dinner",
    ) -> list[Recipe]:
        """Find recipes that use what is in the pantry.

        Args:
            pantry: Pantry contents.
            profile: Optional dietary profile (used for AI generation).
            number: Maximum number of API results.
            ranking: 1 maximizes used ingredients, 2 minimizes missing ones.
            ignore_pantry: Ignore pantry staples such as water and salt.
            meal_type: Meal slot for AI generation.

        Returns:
            Recipes with match information.

        Raises:
            RecipeSourceError: API failed and AI fallback is disabled.
            NoUsableResultError: Nothing usable and AI fallback is disabled.
            RecipeSourcesExhaustedError: AI generation failed.
        """
        config = self._config_manager.get_config()
        ingredients = normalize_ingredient_names(pantry)
        params = {
            "ignorePantry": ignore_pantry,
            "ingredients": ingredients,
            "mealType": meal_type,
            "number": number,
            "profile": _profile_params(profile),
            "ranking": ranking,
        }

        async def from_api(client: RecipeSourceClient) -> list[Recipe]:
            return await client.find_by_ingredients(
                ingredients,
                number=number,
                ranking=ranking,
                ignore_pantry=ignore_pantry,
            )

        async def from_ai(generator: MealGeneratorProtocol) -> list[Recipe]:
            prompt = self._meal_prompt.format(
                pantry=pantry,
                profile=profile,
                meal_type=meal_type,
                number=min(number, MAX_AI_MEALS),
            )
            return parse_meal_payload(await generator.generate_meal_json(prompt))

        return await self._resolve(
            PANTRY_RECIPES_REQUEST,
            params,
            config,
            from_api=from_api,
            from_ai=from_ai,
            refine=self._refine_recipes,
        )

    async def search_recipes(
        self,
        filters: RecipeSearchFilters,
        profile: UserProfile | None = None,
    ) -> list[Recipe]:
        """Search recipes by free text and filters.

        Raises:
            RecipeSourceError: API failed and AI fallback is disabled.
            NoUsableResultError: Nothing usable and AI fallback is disabled.
            RecipeSourcesExhaustedError: AI generation failed.
        """
        config = self._config_manager.get_config()
        params = {
            "filters": filters.model_dump(mode="json", exclude_none=True),
            "profile": _profile_params(profile),
        }

        async def from_api(client: RecipeSourceClient) -> list[Recipe]:
            return await client.complex_search(filters)

        async def from_ai(generator: MealGeneratorProtocol) -> list[Recipe]:
            prompt = self._search_prompt.format(filters=filters, profile=profile)
            return parse_meal_payload(await generator.generate_meal_json(prompt))

        return await self._resolve(
            SEARCH_REQUEST,
            params,
            config,
            from_api=from_api,
            from_ai=from_ai,
            refine=self._refine_recipes,
        )

    async def generate_meal_plan(
        self,
        request: MealPlanRequest,
        pantry: Sequence[PantryItem] = (),
        profile: UserProfile | None = None,
    ) -> MealPlan:
        """Generate a day or week meal plan.

        Raises:
            RecipeSourceError: API failed and AI fallback is disabled.
            NoUsableResultError: Nothing usable and AI fallback is disabled.
            RecipeSourcesExhaustedError: AI generation failed.
        """
        config = self._config_manager.get_config()
        request_params = request.model_dump(mode="json")
        request_params["exclude"] = sorted(item.strip().lower() for item in request.exclude)
        params = {
            "ingredients": normalize_ingredient_names(pantry),
            "profile": _profile_params(profile),
            "request": request_params,
        }

        async def from_api(client: RecipeSourceClient) -> MealPlan:
            return await client.generate_meal_plan(request)

        async def from_ai(generator: MealGeneratorProtocol) -> MealPlan:
            prompt = self._plan_prompt.format(request=request, pantry=pantry, profile=profile)
            return parse_meal_plan_payload(await generator.generate_meal_json(prompt))

        return await self._resolve(
            MEAL_PLAN_REQUEST,
            params,
            config,
            from_api=from_api,
            from_ai=from_ai,
            refine=self._refine_plan,
        )

    async def get_recipe_details(self, recipe_id: str) -> Recipe:
        """Fetch one recipe from the configured recipe API.

        Recipe ids are source-specific, so there is no AI fallback and the
        API is asked even when the policy does not prefer it.

        Raises:
            RecipeSourceError: The API failed.
            NoUsableResultError: The recipe was rejected by the validator.
        """
        config = self._config_manager.get_config()
        params = {"id": recipe_id, "source": config.default_api_source}

        async def from_api(client: RecipeSourceClient) -> Recipe:
            return await client.get_recipe_details(recipe_id)

        return await self._resolve(
            DETAILS_REQUEST,
            params,
            config,
            from_api=from_api,
            from_ai=None,
            refine=self._refine_recipe,
        )

    # =========================================================================
    # Resolution
    # =========================================================================

    async def _resolve[R](
        self,
        request_type: str,
        params: Mapping[str, Any],
        config: RecipeApiConfig,
        *,
        from_api: Callable[[RecipeSourceClient], Awaitable[R]],
        from_ai: Callable[[MealGeneratorProtocol], Awaitable[R]] | None,
        refine: Callable[[R, RecipeApiConfig, bool], R | None],
    ) -> R:
        """Serve from cache, or fetch (sharing in-flight work if enabled)."""
        key = ApiCache.generate_key(request_type, params)

        cached = self._cache.get(key)
        record_cache_lookup(request_type, hit=cached is not None)
        if cached is not None:
            logger.debug("Cache hit", request_type=request_type, key=key)
            return cached

        fetch = self._fetch(request_type, key, config, from_api, from_ai, refine)
        if not self._coalesce_requests:
            return await fetch

        pending = self._pending.get(key)
        if pending is not None:
            fetch.close()
            logger.debug("Joining in-flight request", request_type=request_type, key=key)
            return await asyncio.shield(pending)

        task = asyncio.create_task(fetch)
        self._pending[key] = task
        task.add_done_callback(lambda done: self._forget_pending(key, done))
        return await asyncio.shield(task)

    def _forget_pending(self, key: str, task: asyncio.Task[Any]) -> None:
        if self._pending.get(key) is task:
            del self._pending[key]

    async def _fetch[R](
        self,
        request_type: str,
        key: str,
        config: RecipeApiConfig,
        from_api: Callable[[RecipeSourceClient], Awaitable[R]],
        from_ai: Callable[[MealGeneratorProtocol], Awaitable[R]] | None,
        refine: Callable[[R, RecipeApiConfig, bool], R | None],
    ) -> R:
        """Run the API then AI chain for a cache miss."""
        causes: list[Exception] = []
        use_api = config.prefer_api or from_ai is None
        may_fall_back = config.fallback_to_ai and from_ai is not None

        if use_api:
            source = str(config.default_api_source)
            try:
                raw = await from_api(self._client_for(source))
            except RecipeSourceError as e:
                record_source_attempt(source, "error")
                logger.warning(
                    "Recipe source failed",
                    request_type=request_type,
                    source=source,
                    error=str(e),
                    fallback=may_fall_back,
                )
                if not may_fall_back:
                    raise
                causes.append(e)
            else:
                result = refine(raw, config, False)
                if result is not None:
                    record_source_attempt(source, "success")
                    return self._store(request_type, key, result, config, source)

                outcome = "rejected" if _has_results(raw) else "empty"
                record_source_attempt(source, outcome)
                logger.info(
                    "Recipe source returned nothing usable",
                    request_type=request_type,
                    source=source,
                    outcome=outcome,
                    fallback=may_fall_back,
                )
                error = NoUsableResultError(
                    f"{source} returned no usable results", request_type
                )
                if not may_fall_back:
                    raise error
                causes.append(error)

        assert from_ai is not None

        if self._meal_generator is None:
            causes.append(LLMConfigurationError("No AI meal generator configured"))
            raise RecipeSourcesExhaustedError(
                f"All recipe sources failed for {request_type}",
                request_type,
                causes,
            )

        try:
            raw = await from_ai(self._meal_generator)
        except LLMError as e:
            record_source_attempt(AI_SOURCE, "error")
            logger.warning(
                "AI meal generation failed",
                request_type=request_type,
                error=str(e),
            )
            causes.append(e)
            raise RecipeSourcesExhaustedError(
                f"All recipe sources failed for {request_type}",
                request_type,
                causes,
            ) from e

        result = refine(raw, config, True)
        if result is None:
            record_source_attempt(AI_SOURCE, "rejected")
            causes.append(
                NoUsableResultError("AI generated no usable results", request_type)
            )
            raise RecipeSourcesExhaustedError(
                f"All recipe sources failed for {request_type}",
                request_type,
                causes,
            )

        record_source_attempt(AI_SOURCE, "success")
        return self._store(request_type, key, result, config, AI_SOURCE)

    def _client_for(self, source: str) -> RecipeSourceClient:
        client = self._sources.get(source)
        if client is None:
            msg = f"No client registered for recipe source {source!r}"
            raise RecipeSourceNotConfiguredError(msg)
        return client

    def _store[R](
        self,
        request_type: str,
        key: str,
        result: R,
        config: RecipeApiConfig,
        source: str,
    ) -> R:
        self._cache.set(key, result, ttl=config.cache_ttl_seconds)
        logger.info(
            "Recipe request resolved",
            request_type=request_type,
            source=source,
            ttl=config.cache_ttl_seconds,
        )
        return result

    # =========================================================================
    # Standardization / Validation
    # =========================================================================

    def _prepare(self, recipe: Recipe, config: RecipeApiConfig, from_ai: bool) -> Recipe | None:
        if from_ai and config.enhance_ai_recipes:
            recipe = standardize_recipe(recipe)
        if config.validate_results and not self._validator(recipe):
            logger.debug("Recipe rejected by validator", recipe_id=recipe.id)
            return None
        return recipe

    def _refine_recipes(
        self,
        recipes: list[Recipe],
        config: RecipeApiConfig,
        from_ai: bool,
    ) -> list[Recipe] | None:
        kept = [
            prepared
            for recipe in recipes
            if (prepared := self._prepare(recipe, config, from_ai)) is not None
        ]
        return kept or None

    def _refine_recipe(
        self,
        recipe: Recipe,
        config: RecipeApiConfig,
        from_ai: bool,
    ) -> Recipe | None:
        return self._prepare(recipe, config, from_ai)

    def _refine_plan(
        self,
        plan: MealPlan,
        config: RecipeApiConfig,
        from_ai: bool,
    ) -> MealPlan | None:
        days = [
            MealPlanDay(
                day=day.day,
                meals=[
                    prepared
                    for meal in day.meals
                    if (prepared := self._prepare(meal, config, from_ai)) is not None
                ],
                nutrients=day.nutrients,
            )
            for day in plan.days
        ]
        refined = MealPlan(days=[day for day in days if day.meals])
        return refined if refined.days else None
