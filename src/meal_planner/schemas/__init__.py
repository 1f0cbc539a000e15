"""Pydantic schemas for inputs, results and upstream payloads."""

# Base classes
from meal_planner.schemas.base import APIRequest, APIResponse, DownstreamResponse

# Enums
from meal_planner.schemas.enums import JobState, MealType, ResultSource, TimeFrame

# Health schemas
from meal_planner.schemas.health import HealthResponse

# Job schemas
from meal_planner.schemas.jobs import CreateJobRequest, JobStatus, JobUpdateRequest

# Meal plan schemas
from meal_planner.schemas.meal_plan import (
    MealPlan,
    MealPlanDay,
    MealPlanGenerationRequest,
    MealPlanNutrients,
    MealPlanRequest,
)

# Pantry schemas
from meal_planner.schemas.pantry import PantryItem, UserProfile

# Recipe schemas
from meal_planner.schemas.recipe import (
    PantryRecipesRequest,
    Recipe,
    RecipeIngredient,
    RecipeSearchFilters,
)


__all__ = [
    "APIRequest",
    "APIResponse",
    "CreateJobRequest",
    "DownstreamResponse",
    "HealthResponse",
    "JobState",
    "JobStatus",
    "JobUpdateRequest",
    "MealPlan",
    "MealPlanDay",
    "MealPlanGenerationRequest",
    "MealPlanNutrients",
    "MealPlanRequest",
    "MealType",
    "PantryItem",
    "PantryRecipesRequest",
    "Recipe",
    "RecipeIngredient",
    "RecipeSearchFilters",
    "ResultSource",
    "TimeFrame",
    "UserProfile",
]
