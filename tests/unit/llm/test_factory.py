"""Unit tests for the meal generator factory."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from meal_planner.core.config import LLMProvider, Settings
from meal_planner.llm.client import (
    FallbackMealGenerator,
    GeminiClient,
    OpenAIClient,
    create_meal_generator,
    create_provider_client,
)
from meal_planner.llm.exceptions import LLMConfigurationError


pytestmark = pytest.mark.unit


def make_settings(
    *,
    fallback: bool = False,
    gemini_key: str = "",
    openai_key: str = "sk-test",
) -> Settings:
    """Settings with explicit keys and fallback switch."""
    return Settings(
        OPENAI_API_KEY=openai_key,
        GEMINI_API_KEY=gemini_key,
        llm={
            "provider": "openai",
            "openai": {"model": "gpt-4o-mini", "timeout": 5.0},
            "fallback": {"enabled": fallback, "secondary_provider": "gemini"},
        },
    )


class TestCreateProviderClient:
    """Tests for single provider selection."""

    def test_openai(self) -> None:
        """Should build the OpenAI client from its settings."""
        client = create_provider_client(LLMProvider.OPENAI, make_settings())

        assert isinstance(client, OpenAIClient)
        assert client.model == "gpt-4o-mini"
        assert client.timeout == 5.0
        assert client.api_key == "sk-test"

    def test_gemini_by_name(self) -> None:
        """Should accept the provider's string value."""
        client = create_provider_client("gemini", make_settings(gemini_key="gm"))

        assert isinstance(client, GeminiClient)
        assert client.api_key == "gm"

    def test_unknown_provider(self) -> None:
        """Should reject providers it does not know."""
        with pytest.raises(LLMConfigurationError, match="Unknown LLM provider"):
            create_provider_client("llama", make_settings())


class TestCreateMealGenerator:
    """Tests for fallback wrapping."""

    def test_plain_client_without_fallback(self) -> None:
        """Should return the provider client when fallback is off."""
        generator = create_meal_generator(LLMProvider.OPENAI, make_settings(gemini_key="gm"))

        assert isinstance(generator, OpenAIClient)

    def test_wraps_with_fallback(self) -> None:
        """Should chain the secondary provider when it has a key."""
        generator = create_meal_generator(
            LLMProvider.OPENAI, make_settings(fallback=True, gemini_key="gm")
        )

        assert isinstance(generator, FallbackMealGenerator)
        assert isinstance(generator.primary, OpenAIClient)
        assert isinstance(generator.secondary, GeminiClient)

    def test_no_fallback_without_secondary_key(self) -> None:
        """Should skip a secondary provider that cannot authenticate."""
        generator = create_meal_generator(LLMProvider.OPENAI, make_settings(fallback=True))

        assert isinstance(generator, OpenAIClient)

    def test_no_fallback_to_same_provider(self) -> None:
        """Should not chain a provider to itself."""
        generator = create_meal_generator(
            LLMProvider.GEMINI, make_settings(fallback=True, gemini_key="gm")
        )

        assert isinstance(generator, GeminiClient)

    def test_keyless_primary_replaced_by_secondary(self) -> None:
        """Should use the secondary alone when the primary has no key."""
        settings = make_settings(fallback=True, gemini_key="gm", openai_key="")

        with patch("meal_planner.llm.client.factory.logger") as mock_logger:
            generator = create_meal_generator(LLMProvider.OPENAI, settings)

        assert isinstance(generator, GeminiClient)
        assert generator.api_key == "gm"
        mock_logger.warning.assert_called_once()

    def test_keyless_primary_without_fallback_warns(self) -> None:
        """Should keep the primary but warn when no provider has a key."""
        settings = make_settings(fallback=True, openai_key="")

        with patch("meal_planner.llm.client.factory.logger") as mock_logger:
            generator = create_meal_generator(LLMProvider.OPENAI, settings)

        assert isinstance(generator, OpenAIClient)
        mock_logger.warning.assert_called_once()
        assert "no API key" in mock_logger.warning.call_args.args[0]

    def test_keyless_primary_ignores_disabled_fallback(self) -> None:
        """Should not switch providers when fallback is off."""
        settings = make_settings(gemini_key="gm", openai_key="")

        generator = create_meal_generator(LLMProvider.OPENAI, settings)

        assert isinstance(generator, OpenAIClient)
