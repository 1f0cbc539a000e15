"""AI meal generation module.

Provides OpenAI and Gemini clients behind a single meal generator protocol,
the prompts they are given, and parsing of their JSON completions.
"""

from meal_planner.llm.client import (
    FallbackMealGenerator,
    GeminiClient,
    MealGeneratorProtocol,
    OpenAIClient,
    create_meal_generator,
)
from meal_planner.llm.exceptions import (
    LLMConfigurationError,
    LLMError,
    LLMParseError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from meal_planner.llm.parsing import (
    parse_meal_payload,
    parse_meal_plan_payload,
    strip_code_fences,
)
from meal_planner.llm.prompts import (
    BasePrompt,
    MealGenerationPrompt,
    MealPlanPrompt,
    RecipeSearchPrompt,
)


__all__ = [
    "BasePrompt",
    "FallbackMealGenerator",
    "GeminiClient",
    "LLMConfigurationError",
    "LLMError",
    "LLMParseError",
    "LLMRateLimitError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LLMUnavailableError",
    "LLMValidationError",
    "MealGenerationPrompt",
    "MealGeneratorProtocol",
    "MealPlanPrompt",
    "OpenAIClient",
    "RecipeSearchPrompt",
    "create_meal_generator",
    "parse_meal_payload",
    "parse_meal_plan_payload",
    "strip_code_fences",
]
