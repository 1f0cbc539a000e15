"""Spoonacular recipe API client package."""

from meal_planner.clients.spoonacular.client import (
    SpoonacularClient,
    compute_match_percentage,
)


__all__ = ["SpoonacularClient", "compute_match_percentage"]
