"""Configuration module: application settings and recipe source policy."""

from .recipe_sources import (
    ConfigManager,
    InvalidRecipeConfigError,
    RecipeApiConfig,
    RecipeSource,
    config_manager,
)
from .settings import LLMProvider, Settings, get_settings


__all__ = [
    "ConfigManager",
    "InvalidRecipeConfigError",
    "LLMProvider",
    "RecipeApiConfig",
    "RecipeSource",
    "Settings",
    "config_manager",
    "get_settings",
]
