"""Recipe endpoints.

Pantry matching, free-form search and recipe details. Every result is
normalized to the same recipe shape whether it came from the recipe API or
from AI generation.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from meal_planner.api.dependencies import get_recipe_service
from meal_planner.api.errors import recipe_error_to_http
from meal_planner.clients.exceptions import RecipeSourceError
from meal_planner.observability.logging import get_logger
from meal_planner.schemas import PantryRecipesRequest, Recipe, RecipeSearchFilters
from meal_planner.services.recipes import RecipeService, RecipeServiceError


logger = get_logger(__name__)

router = APIRouter(prefix="/recipes", tags=["Recipes"])

_ERROR_RESPONSES: dict[int | str, dict[str, str]] = {
    404: {"description": "No usable recipes found"},
    422: {"description": "Request validation error"},
    502: {"description": "Recipe API returned an error"},
    503: {"description": "No recipe source available"},
}


@router.post(
    "/pantry-matches",
    response_model=list[Recipe],
    summary="Find recipes for pantry contents",
    description=(
        "Finds recipes that use the given pantry items. Results include how many "
        "recipe ingredients are already in the pantry and which are missing."
    ),
    responses=_ERROR_RESPONSES,
)
async def find_pantry_recipes(
    request_body: PantryRecipesRequest,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> list[Recipe]:
    """Find recipes matching the pantry.

    Args:
        request_body: Pantry items, optional profile and ranking options.
        service: Recipe orchestration service.

    Returns:
        Matching recipes.
    """
    logger.debug("Pantry match requested", items=len(request_body.pantry_items))
    try:
        return await service.find_recipes_for_pantry(
            request_body.pantry_items,
            request_body.profile,
            number=request_body.number,
            ranking=request_body.ranking,
            ignore_pantry=request_body.ignore_pantry,
            meal_type=str(request_body.meal_type),
        )
    except (RecipeSourceError, RecipeServiceError) as e:
        raise recipe_error_to_http(e) from e


@router.post(
    "/search",
    response_model=list[Recipe],
    summary="Search recipes",
    responses=_ERROR_RESPONSES,
)
async def search_recipes(
    filters: RecipeSearchFilters,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> list[Recipe]:
    """Search recipes by free text and filters."""
    try:
        return await service.search_recipes(filters)
    except (RecipeSourceError, RecipeServiceError) as e:
        raise recipe_error_to_http(e) from e


@router.get(
    "/{recipe_id}",
    response_model=Recipe,
    summary="Get recipe details",
    description="Full recipe information from the configured recipe API.",
    responses=_ERROR_RESPONSES,
)
async def get_recipe(
    recipe_id: Annotated[
        str,
        Path(pattern=r"^\d+$", description="Numeric recipe id of the recipe API"),
    ],
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> Recipe:
    """Get a single recipe with ingredients, instructions and nutrition."""
    try:
        return await service.get_recipe_details(recipe_id)
    except (RecipeSourceError, RecipeServiceError) as e:
        raise recipe_error_to_http(e) from e
