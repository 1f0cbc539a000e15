"""Unit tests for recipe source policy endpoints."""

from __future__ import annotations

import pytest

from meal_planner.api.v1.endpoints.config import (
    get_recipe_source_config,
    reset_recipe_source_config,
    update_recipe_source_config,
)
from meal_planner.core.config import ConfigManager
from meal_planner.core.exceptions import BadRequestException


pytestmark = pytest.mark.unit


class TestRecipeSourceConfigEndpoints:
    """Tests for the policy endpoints."""

    async def test_get(self, config_manager: ConfigManager) -> None:
        """Should return the active policy."""
        result = await get_recipe_source_config(config_manager)

        assert result == config_manager.get_config()

    async def test_update_accepts_camel_case(self, config_manager: ConfigManager) -> None:
        """Should merge camelCase keys."""
        result = await update_recipe_source_config({"preferApi": False}, config_manager)

        assert result.prefer_api is False
        assert config_manager.get_config().prefer_api is False

    async def test_update_unknown_key(self, config_manager: ConfigManager) -> None:
        """Should reject unknown keys with details."""
        with pytest.raises(BadRequestException) as exc_info:
            await update_recipe_source_config({"retries": 3}, config_manager)

        assert exc_info.value.details
        assert exc_info.value.details[0].field == "retries"
        assert exc_info.value.details[0].code == "extra_forbidden"

    async def test_update_negative_ttl(self, config_manager: ConfigManager) -> None:
        """Should reject a negative cache TTL and keep the old one."""
        with pytest.raises(BadRequestException):
            await update_recipe_source_config({"cacheTtl": -1}, config_manager)

        assert config_manager.get_config().cache_ttl == 3_600_000

    async def test_reset(self, config_manager: ConfigManager) -> None:
        """Should restore defaults."""
        config_manager.set_config(validate_results=False)

        result = await reset_recipe_source_config(config_manager)

        assert result.validate_results is True
