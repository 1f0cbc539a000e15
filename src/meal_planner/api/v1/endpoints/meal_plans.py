"""Meal plan endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from meal_planner.api.dependencies import get_recipe_service
from meal_planner.api.errors import recipe_error_to_http
from meal_planner.clients.exceptions import RecipeSourceError
from meal_planner.schemas import MealPlan, MealPlanGenerationRequest
from meal_planner.services.recipes import RecipeService, RecipeServiceError


router = APIRouter(prefix="/meal-plans", tags=["Meal Plans"])


@router.post(
    "",
    response_model=MealPlan,
    summary="Generate a meal plan",
    description="Generates a day or week of meals with per-day nutrient totals.",
    responses={
        404: {"description": "No usable meal plan produced"},
        502: {"description": "Recipe API returned an error"},
        503: {"description": "No recipe source available"},
    },
)
async def generate_meal_plan(
    request_body: MealPlanGenerationRequest,
    service: Annotated[RecipeService, Depends(get_recipe_service)],
) -> MealPlan:
    """Generate a meal plan for the requested time frame."""
    try:
        return await service.generate_meal_plan(
            request_body.request,
            request_body.pantry_items,
            request_body.profile,
        )
    except (RecipeSourceError, RecipeServiceError) as e:
        raise recipe_error_to_http(e) from e
