"""Unit tests for meal generation prompts."""

from __future__ import annotations

import pytest

from meal_planner.llm.models import GeneratedMealList, GeneratedMealPlan
from meal_planner.llm.prompts import (
    MealGenerationPrompt,
    MealPlanPrompt,
    RecipeSearchPrompt,
)
from meal_planner.schemas import (
    MealPlanRequest,
    PantryItem,
    RecipeSearchFilters,
    TimeFrame,
    UserProfile,
)


pytestmark = pytest.mark.unit


class TestMealGenerationPrompt:
    """Tests for pantry meal prompts."""

    def test_includes_pantry_and_count(self, pantry: list[PantryItem]) -> None:
        """Should list pantry items with quantities."""
        prompt = MealGenerationPrompt().format(pantry=pantry, meal_type="lunch", number=2)

        assert "Suggest 2 lunch recipe(s)" in prompt
        assert "Chicken Breast (2 piece)" in prompt
        assert '"meals"' in prompt

    def test_hard_rules_before_preferences(
        self, pantry: list[PantryItem], profile: UserProfile
    ) -> None:
        """Should state allergies and restrictions before preferences."""
        prompt = MealGenerationPrompt().format(pantry=pantry, profile=profile)

        allergy = prompt.index("HARD: never use these allergens: peanuts.")
        restriction = prompt.index("HARD: follow these restrictions: gluten-free.")
        preference = prompt.index("Prefer: high-protein.")
        assert allergy < preference
        assert restriction < preference
        assert "Daily calories target: 2200 kcal." in prompt
        assert "Daily protein target: 150 g." in prompt

    def test_empty_pantry(self) -> None:
        """Should still produce a usable prompt."""
        prompt = MealGenerationPrompt().format(pantry=[])

        assert "The pantry is empty" in prompt

    def test_metadata(self) -> None:
        """Should expose the output schema and a name."""
        prompt = MealGenerationPrompt()

        assert prompt.output_schema is GeneratedMealList
        assert prompt.name == "MealGenerationPrompt"


class TestRecipeSearchPrompt:
    """Tests for search prompts."""

    def test_describes_set_filters_only(self) -> None:
        """Should mention filters that are set and skip paging options."""
        filters = RecipeSearchFilters(query="curry", cuisine="thai", number=4)

        prompt = RecipeSearchPrompt().format(filters=filters)

        assert "Suggest 4 recipe(s) matching:" in prompt
        assert "query: curry" in prompt
        assert "cuisine: thai" in prompt
        assert "offset" not in prompt
        assert "diet" not in prompt

    def test_no_filters(self) -> None:
        """Should ask for any recipe."""
        prompt = RecipeSearchPrompt().format(filters=RecipeSearchFilters(number=1))

        assert "any recipe" in prompt


class TestMealPlanPrompt:
    """Tests for meal plan prompts."""

    def test_week_plan_constraints(self, pantry: list[PantryItem]) -> None:
        """Should spell out span, calories, diet and exclusions."""
        request = MealPlanRequest(
            time_frame=TimeFrame.WEEK,
            target_calories=1800,
            diet="vegan",
            exclude=["tofu"],
        )

        prompt = MealPlanPrompt().format(request=request, pantry=pantry)

        assert "7 days" in prompt
        assert "HARD: about 1800 kcal per day." in prompt
        assert "HARD: diet: vegan." in prompt
        assert "HARD: exclude: tofu." in prompt
        assert '"days"' in prompt
        assert MealPlanPrompt.output_schema is GeneratedMealPlan

    def test_day_plan(self) -> None:
        """Should default to a single day."""
        prompt = MealPlanPrompt().format(request=MealPlanRequest())

        assert "1 day" in prompt
