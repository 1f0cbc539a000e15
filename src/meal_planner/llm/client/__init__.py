"""AI meal generation clients."""

from meal_planner.llm.client.base import HTTPMealGenerator
from meal_planner.llm.client.factory import create_meal_generator, create_provider_client
from meal_planner.llm.client.fallback import FallbackMealGenerator
from meal_planner.llm.client.gemini import GeminiClient
from meal_planner.llm.client.openai import OpenAIClient
from meal_planner.llm.client.protocol import MealGeneratorProtocol


__all__ = [
    "FallbackMealGenerator",
    "GeminiClient",
    "HTTPMealGenerator",
    "MealGeneratorProtocol",
    "OpenAIClient",
    "create_meal_generator",
    "create_provider_client",
]
