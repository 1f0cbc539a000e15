"""Turn provider completions into recipes.

Providers are asked for JSON but may still wrap it in markdown code fences;
fences are removed before decoding.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Final

import orjson
from pydantic import TypeAdapter, ValidationError

from meal_planner.llm.exceptions import LLMParseError
from meal_planner.llm.models import GeneratedMeal, GeneratedMealList, GeneratedMealPlan
from meal_planner.mappers import meal_plan_from_generated, recipe_from_generated


if TYPE_CHECKING:
    from meal_planner.schemas import MealPlan, Recipe


_FENCE_PATTERN: Final = re.compile(r"```(?:json)?", re.IGNORECASE)
_MEAL_LIST_ADAPTER: Final = TypeAdapter(list[GeneratedMeal])


def strip_code_fences(text: str) -> str:
    """Remove markdown code fences and surrounding whitespace."""
    return _FENCE_PATTERN.sub("", text).strip()


def _decode(raw: str) -> Any:
    text = strip_code_fences(raw)
    if not text:
        msg = "Empty completion"
        raise LLMParseError(msg)
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        msg = f"Completion is not valid JSON: {e}"
        raise LLMParseError(msg) from e


def parse_meal_payload(raw: str) -> list[Recipe]:
    """Parse generated meals.

    Accepts a single meal object, a list of meals, or ``{"meals": [...]}``.

    Raises:
        LLMParseError: Empty text, invalid JSON, or a payload that is not
            a meal.
    """
    payload = _decode(raw)
    try:
        if isinstance(payload, list):
            meals = _MEAL_LIST_ADAPTER.validate_python(payload)
        elif isinstance(payload, dict) and "meals" in payload:
            meals = GeneratedMealList.model_validate(payload).meals
        else:
            meals = [GeneratedMeal.model_validate(payload)]
        return [recipe_from_generated(meal, index) for index, meal in enumerate(meals)]
    except ValidationError as e:
        msg = f"Completion is not a meal: {e.error_count()} error(s)"
        raise LLMParseError(msg) from e


def parse_meal_plan_payload(raw: str) -> MealPlan:
    """Parse a generated meal plan (``{"days": [...]}`` or a single day).

    Raises:
        LLMParseError: Empty text, invalid JSON, or a payload that is not
            a meal plan.
    """
    payload = _decode(raw)
    try:
        return meal_plan_from_generated(GeneratedMealPlan.from_payload(payload))
    except ValidationError as e:
        msg = f"Completion is not a meal plan: {e.error_count()} error(s)"
        raise LLMParseError(msg) from e
