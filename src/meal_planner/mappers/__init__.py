"""Mappers between upstream payloads and service schemas."""

from meal_planner.mappers.recipe import (
    map_dish_types_to_category,
    meal_plan_day_from_spoonacular,
    meal_plan_from_generated,
    recipe_from_generated,
    recipe_from_ingredient_match,
    recipe_from_mealdb,
    recipe_from_spoonacular,
    recipe_from_tasty,
    split_measure,
)


__all__ = [
    "map_dish_types_to_category",
    "meal_plan_day_from_spoonacular",
    "meal_plan_from_generated",
    "recipe_from_generated",
    "recipe_from_ingredient_match",
    "recipe_from_mealdb",
    "recipe_from_spoonacular",
    "recipe_from_tasty",
    "split_measure",
]
