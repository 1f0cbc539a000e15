"""Prompt templates for AI meal generation."""

from .base import BasePrompt
from .meal import MealGenerationPrompt, MealPlanPrompt, RecipeSearchPrompt


__all__ = [
    "BasePrompt",
    "MealGenerationPrompt",
    "MealPlanPrompt",
    "RecipeSearchPrompt",
]
