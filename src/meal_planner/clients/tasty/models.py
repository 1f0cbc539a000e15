"""Tasty response payloads.

Tasty answers in snake_case; the shared schema base accepts field names as
well as camelCase aliases, so no extra alias configuration is needed.
"""

from __future__ import annotations

from pydantic import Field

from meal_planner.schemas.base import DownstreamResponse


class TastyUnit(DownstreamResponse):
    """Measurement unit."""

    name: str = ""
    abbreviation: str = ""


class TastyMeasurement(DownstreamResponse):
    """Quantity of a component; Tasty sends quantities as text (``"1 ½"``)."""

    quantity: str = ""
    unit: TastyUnit | None = None


class TastyIngredient(DownstreamResponse):
    """Ingredient referenced by a component."""

    name: str = ""


class TastyComponent(DownstreamResponse):
    """One line of a recipe section."""

    raw_text: str = ""
    ingredient: TastyIngredient | None = None
    measurements: list[TastyMeasurement] = Field(default_factory=list)


class TastySection(DownstreamResponse):
    """Group of components (``"For the sauce"``...)."""

    name: str | None = None
    components: list[TastyComponent] = Field(default_factory=list)


class TastyInstruction(DownstreamResponse):
    """One preparation step."""

    position: int = 0
    display_text: str = ""


class TastyNutrition(DownstreamResponse):
    """Per-serving nutrition; empty for recipes Tasty has not analyzed."""

    calories: float | None = None
    protein: float | None = None
    carbohydrates: float | None = None
    fat: float | None = None
    fiber: float | None = None


class TastyTag(DownstreamResponse):
    """Tag such as a meal, cuisine or dietary label."""

    name: str = ""
    display_name: str = ""
    type: str = ""


class TastyRecipe(DownstreamResponse):
    """Recipe as returned by ``recipes/list`` and ``recipes/get-more-info``."""

    id: int
    name: str = ""
    slug: str | None = None
    num_servings: int | None = None
    thumbnail_url: str | None = None
    total_time_minutes: int | None = None
    prep_time_minutes: int | None = None
    cook_time_minutes: int | None = None
    sections: list[TastySection] = Field(default_factory=list)
    instructions: list[TastyInstruction] = Field(default_factory=list)
    nutrition: TastyNutrition = Field(default_factory=TastyNutrition)
    tags: list[TastyTag] = Field(default_factory=list)


class TastyListResponse(DownstreamResponse):
    """``recipes/list`` page."""

    count: int = 0
    results: list[TastyRecipe] = Field(default_factory=list)
