"""Meal plan schemas."""

from __future__ import annotations

from pydantic import Field

from meal_planner.schemas.base import APIRequest, APIResponse
from meal_planner.schemas.enums import TimeFrame
from meal_planner.schemas.pantry import PantryItem, UserProfile
from meal_planner.schemas.recipe import Recipe


class MealPlanRequest(APIRequest):
    """Parameters for generating a day or week of meals."""

    time_frame: TimeFrame = Field(default=TimeFrame.DAY)
    target_calories: int | None = Field(default=None, ge=0)
    diet: str | None = None
    exclude: list[str] = Field(
        default_factory=list,
        description="Ingredients to leave out of every meal",
    )


class MealPlanNutrients(APIResponse):
    """Nutrient totals for one day of a plan."""

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0


class MealPlanDay(APIResponse):
    """Meals planned for a single day."""

    day: str = Field(..., description="Day label, e.g. 'monday' or 'day'")
    meals: list[Recipe] = Field(default_factory=list)
    nutrients: MealPlanNutrients = Field(default_factory=MealPlanNutrients)


class MealPlan(APIResponse):
    """A generated meal plan."""

    days: list[MealPlanDay] = Field(default_factory=list)

    @property
    def meals(self) -> list[Recipe]:
        """Every meal in the plan, in day order."""
        return [meal for day in self.days for meal in day.meals]


class MealPlanGenerationRequest(APIRequest):
    """Body for meal plan generation."""

    request: MealPlanRequest = Field(default_factory=MealPlanRequest)
    pantry_items: list[PantryItem] = Field(default_factory=list)
    profile: UserProfile | None = None
