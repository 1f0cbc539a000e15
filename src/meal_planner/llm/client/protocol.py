"""Meal generator Protocol definition.

Defines the interface that every AI provider client implements, enabling
interchangeable providers and fallback composition.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MealGeneratorProtocol(Protocol):
    """Protocol for AI meal generation providers.

    Key methods:
    - generate_meal_json: Prompt in, JSON text out (fences stripped)
    - initialize/shutdown: Lifecycle management for connection pools
    """

    async def initialize(self) -> None:
        """Initialize client resources (HTTP connections, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def generate_meal_json(self, prompt: str) -> str:
        """Generate a meal (or meals) as JSON text.

        Args:
            prompt: Rendered meal generation prompt.

        Returns:
            The completion with code fences and surrounding whitespace
            removed. Not guaranteed to be valid JSON.

        Raises:
            LLMConfigurationError: Missing credential; no request was sent.
            LLMUnavailableError: Provider unreachable (triggers fallback).
            LLMTimeoutError: Request timed out.
            LLMResponseError: HTTP error or empty completion.
        """
        ...
