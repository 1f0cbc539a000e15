"""Spoonacular response payloads.

Only the fields the service maps are declared; everything else in the
upstream JSON is ignored.
"""

from __future__ import annotations

from pydantic import Field

from meal_planner.schemas.base import DownstreamResponse


class SpoonacularIngredient(DownstreamResponse):
    """Ingredient entry (``extendedIngredients``, ``missedIngredients``...)."""

    name: str = ""
    name_clean: str | None = None
    original: str | None = None
    amount: float = 0.0
    unit: str = ""
    aisle: str | None = None


class SpoonacularStep(DownstreamResponse):
    """One analyzed instruction step."""

    number: int = 0
    step: str = ""


class SpoonacularInstructions(DownstreamResponse):
    """A block of analyzed instructions."""

    name: str = ""
    steps: list[SpoonacularStep] = Field(default_factory=list)


class SpoonacularNutrient(DownstreamResponse):
    """A nutrient amount."""

    name: str
    amount: float = 0.0
    unit: str = ""


class SpoonacularNutrition(DownstreamResponse):
    """Nutrition block attached when ``includeNutrition`` is set."""

    nutrients: list[SpoonacularNutrient] = Field(default_factory=list)

    def amount_of(self, name: str) -> float:
        """Amount of a nutrient by its Spoonacular name, or 0."""
        for nutrient in self.nutrients:
            if nutrient.name == name:
                return nutrient.amount
        return 0.0


class SpoonacularRecipe(DownstreamResponse):
    """Recipe as returned by ``information`` and ``complexSearch``."""

    id: int
    title: str = ""
    image: str | None = None
    servings: int | None = None
    ready_in_minutes: int | None = None
    source_url: str | None = None
    instructions: str | None = None
    analyzed_instructions: list[SpoonacularInstructions] = Field(default_factory=list)
    extended_ingredients: list[SpoonacularIngredient] = Field(default_factory=list)
    missed_ingredients: list[SpoonacularIngredient] = Field(default_factory=list)
    used_ingredients: list[SpoonacularIngredient] = Field(default_factory=list)
    used_ingredient_count: int | None = None
    missed_ingredient_count: int | None = None
    nutrition: SpoonacularNutrition | None = None
    dish_types: list[str] = Field(default_factory=list)
    diets: list[str] = Field(default_factory=list)
    cuisines: list[str] = Field(default_factory=list)


class SpoonacularIngredientMatch(DownstreamResponse):
    """Result item of ``findByIngredients``."""

    id: int
    title: str = ""
    image: str | None = None
    used_ingredient_count: int = 0
    missed_ingredient_count: int = 0
    used_ingredients: list[SpoonacularIngredient] = Field(default_factory=list)
    missed_ingredients: list[SpoonacularIngredient] = Field(default_factory=list)


class SpoonacularSearchResponse(DownstreamResponse):
    """Envelope of ``complexSearch``."""

    results: list[SpoonacularRecipe] = Field(default_factory=list)
    offset: int = 0
    number: int = 0
    total_results: int = 0


class SpoonacularPlannedMeal(DownstreamResponse):
    """Meal entry of a generated plan (summary only)."""

    id: int
    title: str = ""
    image_type: str | None = None
    ready_in_minutes: int | None = None
    servings: int | None = None
    source_url: str | None = None


class SpoonacularPlanNutrients(DownstreamResponse):
    """Daily nutrient totals of a generated plan."""

    calories: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbohydrates: float = 0.0


class SpoonacularPlanDay(DownstreamResponse):
    """One day of a generated plan (also the whole ``day`` response)."""

    meals: list[SpoonacularPlannedMeal] = Field(default_factory=list)
    nutrients: SpoonacularPlanNutrients = Field(
        default_factory=SpoonacularPlanNutrients
    )


class SpoonacularWeekPlan(DownstreamResponse):
    """``week`` response of the meal planner."""

    week: dict[str, SpoonacularPlanDay] = Field(default_factory=dict)
