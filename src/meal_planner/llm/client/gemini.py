"""HTTP client for Google Gemini ``generateContent``.

The API key travels as the ``key`` query parameter.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import ValidationError

from meal_planner.llm.client.base import HTTPMealGenerator
from meal_planner.llm.exceptions import LLMValidationError
from meal_planner.llm.models import (
    GeminiContent,
    GeminiGenerateRequest,
    GeminiGenerateResponse,
    GeminiGenerationConfig,
    GeminiPart,
)


JSON_SUFFIX: Final[str] = "\n\nReturn ONLY valid JSON."


class GeminiClient(HTTPMealGenerator):
    """Async HTTP client for the Gemini API."""

    provider = "gemini"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    DEFAULT_MODEL = "gemini-1.5-flash"

    top_p: float = 0.9
    top_k: int = 40

    @property
    def endpoint_url(self) -> str:
        """Get the generateContent endpoint URL."""
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _auth_params(self) -> dict[str, str]:
        return {"key": self.api_key}

    def _build_body(self, prompt: str) -> dict[str, Any]:
        request = GeminiGenerateRequest(
            contents=[
                GeminiContent(role="user", parts=[GeminiPart(text=prompt + JSON_SUFFIX)])
            ],
            generation_config=GeminiGenerationConfig(
                temperature=self.temperature,
                top_p=self.top_p,
                top_k=self.top_k,
                max_output_tokens=self.max_tokens,
            ),
        )
        return request.model_dump(by_alias=True, exclude_none=True)

    def _extract_content(self, payload: Any) -> str:
        try:
            response = GeminiGenerateResponse.model_validate(payload)
        except ValidationError as e:
            msg = f"Unexpected Gemini response: {e.error_count()} error(s)"
            raise LLMValidationError(msg) from e
        return response.content
