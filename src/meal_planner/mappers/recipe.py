"""Recipe data mappers.

This module contains functions for transforming upstream recipe payloads
(Spoonacular, Tasty and TheMealDB responses, AI generated meals) into the
normalized ``Recipe`` and ``MealPlan`` schemas.
"""

from __future__ import annotations

import unicodedata
from fractions import Fraction
from typing import TYPE_CHECKING, Final

from meal_planner.schemas import (
    MealPlan,
    MealPlanDay,
    MealPlanNutrients,
    Recipe,
    RecipeIngredient,
    ResultSource,
)


if TYPE_CHECKING:
    from meal_planner.clients.spoonacular.models import (
        SpoonacularIngredient,
        SpoonacularIngredientMatch,
        SpoonacularPlanDay,
        SpoonacularPlannedMeal,
        SpoonacularRecipe,
    )
    from meal_planner.clients.tasty.models import TastyRecipe
    from meal_planner.clients.themealdb.models import MealDbMeal
    from meal_planner.llm.models import GeneratedMeal, GeneratedMealPlan


SPOONACULAR_IMAGE_URL: Final[str] = "https://spoonacular.com/recipeImages"
TASTY_RECIPE_URL: Final[str] = "https://tasty.co/recipe"

# Checked in order; the first matching group wins.
_CATEGORY_KEYWORDS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("breakfast", ("breakfast", "brunch", "morning")),
    ("lunch", ("lunch", "main course")),
    ("dinner", ("dinner", "main dish")),
    ("snack", ("snack", "appetizer", "side dish")),
)


def map_dish_types_to_category(dish_types: list[str]) -> str:
    """Map Spoonacular dish types to a meal category (default ``dinner``)."""
    for category, keywords in _CATEGORY_KEYWORDS:
        if any(keyword in dish_type for dish_type in dish_types for keyword in keywords):
            return category
    return "dinner"


def _ingredient_from_spoonacular(ingredient: SpoonacularIngredient) -> RecipeIngredient:
    return RecipeIngredient(
        name=ingredient.name_clean or ingredient.name or "unknown ingredient",
        amount=ingredient.amount,
        unit=ingredient.unit,
        category=ingredient.aisle or "other",
    )


def recipe_from_spoonacular(recipe: SpoonacularRecipe) -> Recipe:
    """Map a full Spoonacular recipe (``information``/``complexSearch``).

    Args:
        recipe: Parsed upstream recipe.

    Returns:
        Normalized recipe with nutrition per serving.
    """
    if recipe.analyzed_instructions and recipe.analyzed_instructions[0].steps:
        instructions = [step.step for step in recipe.analyzed_instructions[0].steps]
    elif recipe.instructions:
        instructions = [recipe.instructions]
    else:
        instructions = []

    nutrition = recipe.nutrition
    used = recipe.used_ingredient_count or 0
    missed = recipe.missed_ingredient_count or 0

    return Recipe(
        id=str(recipe.id),
        name=recipe.title,
        ingredients=[
            _ingredient_from_spoonacular(ing) for ing in recipe.extended_ingredients
        ],
        instructions=instructions,
        calories=nutrition.amount_of("Calories") if nutrition else 0.0,
        protein=nutrition.amount_of("Protein") if nutrition else 0.0,
        carbs=nutrition.amount_of("Carbohydrates") if nutrition else 0.0,
        fat=nutrition.amount_of("Fat") if nutrition else 0.0,
        fiber=nutrition.amount_of("Fiber") if nutrition else 0.0,
        ready_in_minutes=recipe.ready_in_minutes,
        servings=recipe.servings or 1,
        category=map_dish_types_to_category(recipe.dish_types),
        tags=[*recipe.diets, *recipe.dish_types, *recipe.cuisines],
        image=recipe.image,
        source_url=recipe.source_url,
        source=ResultSource.SPOONACULAR,
        used_ingredient_count=used,
        missed_ingredient_count=missed,
        missing_ingredients=[ing.name for ing in recipe.missed_ingredients],
    )


def recipe_from_ingredient_match(
    match: SpoonacularIngredientMatch,
    match_percentage: int,
) -> Recipe:
    """Map a ``findByIngredients`` result.

    The listed ingredients are the used ones followed by the missing ones;
    instructions and nutrition require a details lookup.
    """
    ingredients = [
        _ingredient_from_spoonacular(ing)
        for ing in (*match.used_ingredients, *match.missed_ingredients)
    ]
    return Recipe(
        id=str(match.id),
        name=match.title,
        ingredients=ingredients,
        image=match.image,
        source=ResultSource.SPOONACULAR,
        used_ingredient_count=match.used_ingredient_count,
        missed_ingredient_count=match.missed_ingredient_count,
        match_percentage=match_percentage,
        missing_ingredients=[ing.name for ing in match.missed_ingredients],
    )


def _recipe_from_planned_meal(meal: SpoonacularPlannedMeal) -> Recipe:
    image = None
    if meal.image_type:
        image = f"{SPOONACULAR_IMAGE_URL}/{meal.id}-556x370.{meal.image_type}"
    return Recipe(
        id=str(meal.id),
        name=meal.title,
        ready_in_minutes=meal.ready_in_minutes,
        servings=meal.servings or 1,
        image=image,
        source_url=meal.source_url,
        source=ResultSource.SPOONACULAR,
    )


def meal_plan_day_from_spoonacular(day: str, plan_day: SpoonacularPlanDay) -> MealPlanDay:
    """Map one day of a Spoonacular meal plan."""
    nutrients = plan_day.nutrients
    return MealPlanDay(
        day=day,
        meals=[_recipe_from_planned_meal(meal) for meal in plan_day.meals],
        nutrients=MealPlanNutrients(
            calories=nutrients.calories,
            protein=nutrients.protein,
            fat=nutrients.fat,
            carbohydrates=nutrients.carbohydrates,
        ),
    )


def _quantity_token(token: str) -> float | None:
    """Numeric value of ``"2"``, ``"1.5"``, ``"3/4"`` or ``"½"``; None otherwise."""
    try:
        return float(Fraction(token))
    except (ValueError, ZeroDivisionError):
        pass
    if len(token) == 1:
        try:
            return unicodedata.numeric(token)
        except ValueError:
            return None
    return None


def split_measure(measure: str) -> tuple[float, str]:
    """Split a free-text measure into an amount and the rest as unit.

    Leading numeric tokens are summed (``"1 ½ cups"`` is ``(1.5, "cups")``);
    a measure with no leading number keeps all of its text as the unit.
    """
    tokens = measure.split()
    amount = 0.0
    consumed = 0
    for token in tokens:
        value = _quantity_token(token)
        if value is None:
            break
        amount += value
        consumed += 1
    return amount, " ".join(tokens[consumed:])


def recipe_from_tasty(recipe: TastyRecipe) -> Recipe:
    """Map a Tasty recipe (``recipes/list`` or ``recipes/get-more-info``).

    Ingredients come from every section's components, using the first
    measurement of each; tags are the tag display names.
    """
    ingredients: list[RecipeIngredient] = []
    for section in recipe.sections:
        for component in section.components:
            if component.ingredient is None or not component.ingredient.name:
                continue
            amount, unit = 0.0, ""
            if component.measurements:
                measurement = component.measurements[0]
                amount, _ = split_measure(measurement.quantity)
                unit = measurement.unit.name if measurement.unit else ""
            ingredients.append(
                RecipeIngredient(
                    name=component.ingredient.name, amount=amount, unit=unit
                )
            )

    tags = [tag.display_name for tag in recipe.tags if tag.display_name]
    nutrition = recipe.nutrition
    ready = recipe.total_time_minutes
    if ready is None and (recipe.prep_time_minutes or recipe.cook_time_minutes):
        ready = (recipe.prep_time_minutes or 0) + (recipe.cook_time_minutes or 0)

    return Recipe(
        id=str(recipe.id),
        name=recipe.name,
        ingredients=ingredients,
        instructions=[
            step.display_text
            for step in sorted(recipe.instructions, key=lambda step: step.position)
            if step.display_text
        ],
        calories=nutrition.calories or 0.0,
        protein=nutrition.protein or 0.0,
        carbs=nutrition.carbohydrates or 0.0,
        fat=nutrition.fat or 0.0,
        fiber=nutrition.fiber or 0.0,
        ready_in_minutes=ready,
        servings=recipe.num_servings or 1,
        category=map_dish_types_to_category([tag.lower() for tag in tags]),
        tags=tags,
        image=recipe.thumbnail_url,
        source_url=f"{TASTY_RECIPE_URL}/{recipe.slug}" if recipe.slug else None,
        source=ResultSource.TASTY,
    )


def recipe_from_mealdb(meal: MealDbMeal) -> Recipe:
    """Map a TheMealDB meal.

    TheMealDB has no nutrition data. Instructions are split on line breaks
    and the category and area become tags.
    """
    ingredients = []
    for name, measure in meal.ingredient_lines():
        amount, unit = split_measure(measure)
        ingredients.append(RecipeIngredient(name=name, amount=amount, unit=unit))

    instructions = [
        line.strip()
        for line in (meal.str_instructions or "").splitlines()
        if line.strip()
    ]
    tags = [tag for tag in (meal.str_category, meal.str_area) if tag]

    return Recipe(
        id=meal.id_meal,
        name=meal.str_meal,
        ingredients=ingredients,
        instructions=instructions,
        category=map_dish_types_to_category([(meal.str_category or "").lower()]),
        tags=tags,
        image=meal.str_meal_thumb,
        source_url=meal.str_source or None,
        source=ResultSource.THEMEALDB,
    )


def recipe_from_generated(meal: GeneratedMeal, index: int = 0) -> Recipe:
    """Map an AI generated meal.

    Generated meals carry no identifier, so one is derived from the name
    and the position in the response.
    """
    slug = "-".join(meal.name.lower().split()) or "meal"
    ready = None
    if meal.prep_time is not None or meal.cook_time is not None:
        ready = (meal.prep_time or 0) + (meal.cook_time or 0)

    return Recipe(
        id=meal.id or f"ai-{index}-{slug}",
        name=meal.name,
        ingredients=[
            RecipeIngredient(
                name=ing.name,
                amount=ing.amount,
                unit=ing.unit,
                category=ing.category,
            )
            for ing in meal.ingredients
        ],
        instructions=meal.instructions,
        calories=meal.calories,
        protein=meal.protein,
        carbs=meal.carbs,
        fat=meal.fat,
        fiber=meal.fiber,
        ready_in_minutes=ready,
        servings=meal.servings,
        category=meal.category,
        tags=meal.tags,
        source=ResultSource.AI,
        match_percentage=meal.match_percentage,
        missing_ingredients=meal.missing_ingredients,
    )


def meal_plan_from_generated(plan: GeneratedMealPlan) -> MealPlan:
    """Map an AI generated meal plan; daily totals are summed from the meals."""
    days: list[MealPlanDay] = []
    for day in plan.days:
        meals = [
            recipe_from_generated(meal, index)
            for index, meal in enumerate(day.meals)
        ]
        days.append(
            MealPlanDay(
                day=day.day,
                meals=meals,
                nutrients=MealPlanNutrients(
                    calories=sum(meal.calories for meal in meals),
                    protein=sum(meal.protein for meal in meals),
                    fat=sum(meal.fat for meal in meals),
                    carbohydrates=sum(meal.carbs for meal in meals),
                ),
            )
        )
    return MealPlan(days=days)
