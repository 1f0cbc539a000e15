"""Unit tests for request and response schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from meal_planner.schemas import (
    JobStatus,
    MealPlan,
    MealPlanDay,
    PantryItem,
    PantryRecipesRequest,
    Recipe,
    RecipeSearchFilters,
)


pytestmark = pytest.mark.unit


class TestRecipeSearchFilters:
    """Tests for RecipeSearchFilters."""

    def test_query_params_skip_unset_filters(self) -> None:
        """Should render camelCase params and JSON booleans."""
        filters = RecipeSearchFilters(query="pasta", max_ready_time=20, number=5)

        assert filters.to_query_params() == {
            "query": "pasta",
            "maxReadyTime": 20,
            "number": 5,
            "offset": 0,
            "addRecipeInformation": "true",
            "fillIngredients": "true",
        }

    def test_accepts_camel_case(self) -> None:
        """Should accept wire names."""
        filters = RecipeSearchFilters.model_validate({"excludeIngredients": "nuts"})

        assert filters.exclude_ingredients == "nuts"

    def test_number_bounds(self) -> None:
        """Should reject more than 100 results."""
        with pytest.raises(ValidationError):
            RecipeSearchFilters(number=101)


class TestRecipe:
    """Tests for Recipe."""

    def test_serializes_camel_case(self) -> None:
        """Should dump with camelCase keys."""
        recipe = Recipe(id="1", name="Soup", match_percentage=75)

        dumped = recipe.model_dump()

        assert dumped["matchPercentage"] == 75
        assert dumped["source"] == "spoonacular"

    def test_match_percentage_bounds(self) -> None:
        """Should reject percentages above 100."""
        with pytest.raises(ValidationError):
            Recipe(id="1", match_percentage=101)


class TestPantryRecipesRequest:
    """Tests for PantryRecipesRequest."""

    def test_requires_items(self) -> None:
        """Should reject an empty pantry."""
        with pytest.raises(ValidationError):
            PantryRecipesRequest(pantry_items=[])

    def test_rejects_blank_item_name(self) -> None:
        """Should reject items without a name."""
        with pytest.raises(ValidationError):
            PantryItem(name="")


class TestMealPlan:
    """Tests for MealPlan."""

    def test_meals_in_day_order(self) -> None:
        """Should flatten meals across days."""
        plan = MealPlan(
            days=[
                MealPlanDay(day="monday", meals=[Recipe(id="1"), Recipe(id="2")]),
                MealPlanDay(day="tuesday", meals=[Recipe(id="3")]),
            ]
        )

        assert [meal.id for meal in plan.meals] == ["1", "2", "3"]


class TestJobStatus:
    """Tests for JobStatus."""

    @pytest.mark.parametrize(
        ("status", "finished"),
        [
            ("analyzing", False),
            ("validating", False),
            ("saving", False),
            ("completed", True),
            ("failed", True),
        ],
    )
    def test_is_finished(self, status: str, finished: bool) -> None:
        """Should treat completed and failed as terminal."""
        assert JobStatus(job_id="job-1", status=status).is_finished is finished
