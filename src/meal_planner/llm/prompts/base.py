"""Base class for LLM prompts.

Provides a standardized interface for defining prompts with:
- Typed input variables
- The output schema the completion must match
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel


class BasePrompt[T: BaseModel](ABC):
    """Base class for all meal generation prompts.

    Providers receive a single prompt string; their system instructions are
    fixed per provider, so a prompt only renders the user message.

    Example:
        ```python
        class SnackPrompt(BasePrompt[GeneratedMealList]):
            output_schema = GeneratedMealList

            def format(self, ingredients: list[str]) -> str:
                return f"Suggest a snack using: {', '.join(ingredients)}"
        ```
    """

    # Override in subclasses
    output_schema: ClassVar[type[BaseModel]]
    """Pydantic model the JSON completion is validated against."""

    @abstractmethod
    def format(self, **kwargs: Any) -> str:
        """Format the prompt template with input variables.

        Args:
            **kwargs: Variables to substitute into template.

        Returns:
            Formatted prompt string ready for the provider.
        """
        ...

    @property
    def name(self) -> str:
        """Prompt identifier for logging."""
        return self.__class__.__name__
