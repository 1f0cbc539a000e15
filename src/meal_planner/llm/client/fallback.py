"""Fallback meal generator that chains two providers.

Tries the primary provider first and falls back to the secondary one on
``LLMUnavailableError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from meal_planner.llm.exceptions import LLMUnavailableError
from meal_planner.observability.logging import get_logger


if TYPE_CHECKING:
    from meal_planner.llm.client.protocol import MealGeneratorProtocol


logger = get_logger(__name__)


class FallbackMealGenerator:
    """Meal generator with automatic fallback to a secondary provider.

    Fallback triggers:
    - LLMUnavailableError: Connection refused, network errors
    - LLMTimeoutError: Request timeout (subclass of LLMUnavailableError)

    Non-fallback errors (propagated immediately):
    - LLMConfigurationError: Missing credential
    - LLMResponseError: HTTP 4xx/5xx errors and empty completions
    - LLMRateLimitError: Should back off, not fall back

    Example:
        ```python
        generator = FallbackMealGenerator(
            primary=OpenAIClient(...),
            secondary=GeminiClient(...),
        )
        text = await generator.generate_meal_json(prompt)  # OpenAI, then Gemini
        ```
    """

    def __init__(
        self,
        primary: MealGeneratorProtocol,
        secondary: MealGeneratorProtocol | None = None,
        *,
        fallback_enabled: bool = True,
    ) -> None:
        """Initialize the fallback generator.

        Args:
            primary: Primary provider.
            secondary: Fallback provider.
            fallback_enabled: Master switch for fallback behavior.
        """
        self.primary = primary
        self.secondary = secondary
        self.fallback_enabled = fallback_enabled

    async def initialize(self) -> None:
        """Initialize both providers."""
        await self.primary.initialize()
        if self.secondary is not None:
            await self.secondary.initialize()
        logger.info(
            "FallbackMealGenerator initialized",
            has_secondary=self.secondary is not None,
            fallback_enabled=self.fallback_enabled,
        )

    async def shutdown(self) -> None:
        """Shutdown both providers."""
        await self.primary.shutdown()
        if self.secondary is not None:
            await self.secondary.shutdown()
        logger.debug("FallbackMealGenerator shutdown")

    async def generate_meal_json(self, prompt: str) -> str:
        """Generate with automatic fallback on unavailability.

        Raises:
            LLMUnavailableError: If both providers are unreachable.
            LLMResponseError: If a provider returns an HTTP error.
        """
        try:
            return await self.primary.generate_meal_json(prompt)
        except LLMUnavailableError as e:
            if not self.fallback_enabled or self.secondary is None:
                logger.warning("Primary meal generator unavailable, no fallback configured")
                raise

            logger.warning(
                "Primary meal generator unavailable, falling back to secondary",
                primary_error=str(e),
            )
            return await self.secondary.generate_meal_json(prompt)
