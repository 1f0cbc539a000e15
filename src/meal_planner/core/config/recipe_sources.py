"""Recipe source policy: which source to ask first and what to do on failure.

The policy is held as an immutable snapshot. ``ConfigManager.set_config``
builds a new snapshot from a partial update and swaps the reference, so a
request that took a snapshot keeps a consistent view even if the policy
changes mid-flight.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from meal_planner.observability.logging import get_logger


logger = get_logger(__name__)


class RecipeSource(StrEnum):
    """Known external recipe APIs."""

    SPOONACULAR = "spoonacular"
    TASTY = "tasty"
    THEMEALDB = "themealdb"


DEFAULT_CACHE_TTL_MS = 3_600_000  # 1 hour


class InvalidRecipeConfigError(ValueError):
    """Raised when a config update has unknown keys or invalid values."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class RecipeApiConfig(BaseModel):
    """Flags controlling how recipe requests are resolved.

    Attributes:
        prefer_api: Ask the external recipe API before the AI generator.
        enhance_ai_recipes: Standardize AI generated recipes.
        fallback_to_ai: Use the AI generator when the API fails or is empty.
        validate_results: Filter results through the recipe validator.
        default_api_source: Which recipe API the orchestrator calls.
        cache_ttl: Cache entry lifetime in milliseconds.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    prefer_api: bool = True
    enhance_ai_recipes: bool = True
    fallback_to_ai: bool = True
    validate_results: bool = True
    default_api_source: RecipeSource = RecipeSource.SPOONACULAR
    cache_ttl: int = Field(default=DEFAULT_CACHE_TTL_MS, ge=0)

    @property
    def cache_ttl_seconds(self) -> float:
        """Cache TTL converted for ``ApiCache`` (seconds)."""
        return self.cache_ttl / 1000


class ConfigManager:
    """Process-wide holder of the current ``RecipeApiConfig`` snapshot."""

    def __init__(self, initial: RecipeApiConfig | None = None) -> None:
        self._config = initial or RecipeApiConfig()

    def get_config(self) -> RecipeApiConfig:
        """Return a copy of the current config."""
        return self._config.model_copy()

    def set_config(
        self,
        partial: Mapping[str, Any] | None = None,
        /,
        **changes: Any,
    ) -> RecipeApiConfig:
        """Merge a partial update over the current config.

        Keys may be snake_case or camelCase; later values win per key.

        Returns:
            The new config snapshot.

        Raises:
            InvalidRecipeConfigError: Unknown key or invalid value. The
                current config is left unchanged.
        """
        updates = {**(partial or {}), **changes}
        if not updates:
            return self.get_config()

        merged = {**self._config.model_dump(), **_normalize_keys(updates)}
        try:
            new_config = RecipeApiConfig.model_validate(merged)
        except ValidationError as e:
            logger.warning("Rejected recipe config update", updates=updates)
            msg = f"Invalid recipe source config: {e.error_count()} error(s)"
            raise InvalidRecipeConfigError(
                msg, errors=e.errors(include_url=False)
            ) from e

        self._config = new_config
        logger.info("Recipe source config updated", **new_config.model_dump(mode="json"))
        return self.get_config()

    def reset(self) -> RecipeApiConfig:
        """Restore the documented defaults."""
        self._config = RecipeApiConfig()
        return self.get_config()


def _normalize_keys(updates: Mapping[str, Any]) -> dict[str, Any]:
    """Map camelCase aliases to field names; unknown keys pass through."""
    by_alias = {
        info.alias: name
        for name, info in RecipeApiConfig.model_fields.items()
        if info.alias
    }
    return {by_alias.get(key, key): value for key, value in updates.items()}


# One policy store per process.
config_manager = ConfigManager()
