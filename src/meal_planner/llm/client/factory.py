"""Meal generator factory.

Selects the provider client from an explicit ``LLMProvider`` value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from meal_planner.core.config import LLMProvider
from meal_planner.llm.client.fallback import FallbackMealGenerator
from meal_planner.llm.client.gemini import GeminiClient
from meal_planner.llm.client.openai import OpenAIClient
from meal_planner.llm.exceptions import LLMConfigurationError
from meal_planner.observability.logging import get_logger


if TYPE_CHECKING:
    import httpx

    from meal_planner.core.config import Settings
    from meal_planner.llm.client.base import HTTPMealGenerator
    from meal_planner.llm.client.protocol import MealGeneratorProtocol


logger = get_logger(__name__)


def create_provider_client(
    provider: LLMProvider | str,
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> HTTPMealGenerator:
    """Build the client for a single provider.

    Raises:
        LLMConfigurationError: Unknown provider name.
    """
    try:
        selected = LLMProvider(provider)
    except ValueError as e:
        msg = f"Unknown LLM provider: {provider!r}"
        raise LLMConfigurationError(msg) from e

    api_key = settings.api_key_for(selected)
    if selected == LLMProvider.GEMINI:
        gemini = settings.llm.gemini
        return GeminiClient(
            api_key=api_key,
            model=gemini.model,
            base_url=gemini.url,
            timeout=gemini.timeout,
            max_retries=gemini.max_retries,
            temperature=gemini.temperature,
            max_tokens=gemini.max_tokens,
            requests_per_minute=gemini.requests_per_minute,
            http_client=http_client,
        )

    openai = settings.llm.openai
    return OpenAIClient(
        api_key=api_key,
        model=openai.model,
        base_url=openai.url,
        timeout=openai.timeout,
        max_retries=openai.max_retries,
        temperature=openai.temperature,
        max_tokens=openai.max_tokens,
        requests_per_minute=openai.requests_per_minute,
        http_client=http_client,
    )


def create_meal_generator(
    provider: LLMProvider | str,
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> MealGeneratorProtocol:
    """Create the meal generator for a provider.

    When ``llm.fallback.enabled`` is set and the secondary provider differs
    from the primary and has a key, both are wrapped in a
    ``FallbackMealGenerator``. A primary without a key is replaced by that
    secondary; with no usable secondary it is kept and a warning logged.

    Args:
        provider: Primary provider.
        settings: Application settings (models, timeouts, keys).
        http_client: Optional shared HTTP client.

    Returns:
        A generator implementing ``MealGeneratorProtocol``.
    """
    primary = create_provider_client(provider, settings, http_client)

    fallback = settings.llm.fallback
    secondary_provider = LLMProvider(fallback.secondary_provider)
    has_secondary = (
        fallback.enabled
        and secondary_provider != primary.provider
        and bool(settings.api_key_for(secondary_provider))
    )

    if not primary.api_key:
        if has_secondary:
            logger.warning(
                "Primary LLM provider has no API key - using secondary provider",
                provider=primary.provider,
                secondary_provider=secondary_provider,
            )
            return create_provider_client(secondary_provider, settings, http_client)
        logger.warning(
            "LLM provider has no API key - AI generation will fail",
            provider=primary.provider,
        )
        return primary

    if not has_secondary:
        logger.debug("Meal generator created", provider=primary.provider)
        return primary

    secondary = create_provider_client(secondary_provider, settings, http_client)
    logger.debug(
        "Meal generator created with fallback",
        provider=primary.provider,
        secondary_provider=secondary.provider,
    )
    return FallbackMealGenerator(primary=primary, secondary=secondary)
