"""Recipe schemas.

This module contains the normalized recipe shape returned by every source
(recipe API or AI generation) and the filters accepted by recipe search.
"""

from __future__ import annotations

from pydantic import Field

from meal_planner.schemas.base import APIRequest, APIResponse
from meal_planner.schemas.enums import MealType, ResultSource
from meal_planner.schemas.pantry import PantryItem, UserProfile


# =============================================================================
# Recipe Schemas
# =============================================================================


class RecipeIngredient(APIResponse):
    """A single ingredient line of a recipe."""

    name: str = Field(default="", description="Ingredient name")
    amount: float = Field(default=0.0, description="Quantity required")
    unit: str = Field(default="", description="Unit of the amount")
    category: str = Field(default="other", description="Ingredient category")


class Recipe(APIResponse):
    """Normalized recipe or meal.

    Source-specific payloads are mapped into this shape so callers never
    have to care whether a recipe came from a recipe API or an AI provider.
    """

    id: str = Field(..., description="Source-specific recipe identifier")
    name: str = Field(default="", description="Recipe title")
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)

    calories: float = Field(default=0.0, description="Calories per serving")
    protein: float = Field(default=0.0, description="Protein in grams")
    carbs: float = Field(default=0.0, description="Carbohydrates in grams")
    fat: float = Field(default=0.0, description="Fat in grams")
    fiber: float = Field(default=0.0, description="Fiber in grams")

    ready_in_minutes: int | None = Field(default=None, ge=0)
    servings: int = Field(default=1, description="Number of servings")
    category: str | None = Field(default=None, description="Meal category")
    tags: list[str] = Field(default_factory=list)
    image: str | None = Field(default=None, description="Image URL")
    source_url: str | None = Field(default=None, description="Original page")
    source: ResultSource = Field(
        default=ResultSource.SPOONACULAR,
        description="Where this recipe came from",
    )

    used_ingredient_count: int = Field(default=0, ge=0)
    missed_ingredient_count: int = Field(default=0, ge=0)
    match_percentage: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Share of recipe ingredients already in the pantry",
    )
    missing_ingredients: list[str] = Field(default_factory=list)


class RecipeSearchFilters(APIRequest):
    """Filters for a free-form recipe search.

    Field names map one-to-one to the recipe API's complex search query
    parameters (camelCase on the wire).
    """

    query: str | None = Field(default=None, description="Free-text query")
    cuisine: str | None = None
    diet: str | None = None
    intolerances: str | None = None
    type: str | None = Field(default=None, description="Dish type")
    include_ingredients: str | None = None
    exclude_ingredients: str | None = None
    max_ready_time: int | None = Field(default=None, ge=0)
    sort: str | None = None
    number: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    add_recipe_information: bool = True
    fill_ingredients: bool = True

    def to_query_params(self) -> dict[str, str | int]:
        """Render the filters as upstream query parameters.

        Unset filters are omitted; booleans use JSON spelling.
        """
        params: dict[str, str | int] = {}
        for name, value in self.model_dump(by_alias=True).items():
            if value is None:
                continue
            if isinstance(value, bool):
                params[name] = "true" if value else "false"
            else:
                params[name] = value
        return params


class PantryRecipesRequest(APIRequest):
    """Body for pantry-based recipe matching."""

    pantry_items: list[PantryItem] = Field(..., min_length=1)
    profile: UserProfile | None = None
    number: int = Field(default=10, ge=1, le=100)
    ranking: int = Field(default=1, ge=1, le=2)
    ignore_pantry: bool = False
    meal_type: MealType = MealType.DINNER
