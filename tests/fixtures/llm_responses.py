"""Canned provider responses for testing.

Completion bodies follow the shape the meal prompts ask for.
"""

from __future__ import annotations

from typing import Any

import orjson


def create_openai_response(
    content: str,
    model: str = "gpt-4o",
    prompt_tokens: int = 120,
    completion_tokens: int = 80,
) -> dict[str, Any]:
    """Factory for creating mock OpenAI chat completion responses."""
    return {
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": model,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": prompt_tokens + completion_tokens,
        },
    }


def create_gemini_response(content: str) -> dict[str, Any]:
    """Factory for creating mock Gemini generateContent responses."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": content}]},
                "finishReason": "STOP",
                "index": 0,
            }
        ],
        "usageMetadata": {"promptTokenCount": 120, "candidatesTokenCount": 80},
    }


GENERATED_MEAL: dict[str, Any] = {
    "name": "Chicken Rice Bowl",
    "ingredients": [
        {"name": "Chicken Breast", "amount": 200, "unit": "G", "category": "protein"},
        {"name": "rice", "amount": 1, "unit": "cup", "category": "grain"},
    ],
    "instructions": ["Cook the rice.", "Grill the chicken.", "Serve together."],
    "calories": 550,
    "protein": 45,
    "carbs": 60,
    "fat": 12,
    "fiber": 3,
    "prepTime": 10,
    "cookTime": 25,
    "servings": 2,
    "category": "dinner",
    "tags": ["High Protein"],
    "matchPercentage": 80,
    "missingIngredients": ["soy sauce"],
}

GENERATED_MEALS_JSON: str = orjson.dumps({"meals": [GENERATED_MEAL]}).decode()

FENCED_MEALS_JSON: str = f"```json\n{GENERATED_MEALS_JSON}\n```"

GENERATED_PLAN_JSON: str = orjson.dumps(
    {
        "days": [
            {
                "day": "monday",
                "meals": [
                    GENERATED_MEAL,
                    {
                        **GENERATED_MEAL,
                        "name": "Oatmeal With Berries",
                        "calories": 350,
                        "protein": 10,
                        "carbs": 55,
                        "fat": 8,
                    },
                ],
            }
        ]
    }
).decode()
