"""HTTP client for OpenAI chat completions.

Requests JSON mode (``response_format=json_object``) so the completion is a
single JSON object.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import ValidationError

from meal_planner.llm.client.base import HTTPMealGenerator
from meal_planner.llm.exceptions import LLMValidationError
from meal_planner.llm.models import OpenAIChatRequest, OpenAIChatResponse, OpenAIMessage


SYSTEM_PROMPT: Final[str] = (
    "You are a culturally-aware nutrition chef. Follow HARD rules first. "
    "Output VALID JSON only."
)


class OpenAIClient(HTTPMealGenerator):
    """Async HTTP client for the OpenAI chat completions API."""

    provider = "openai"
    DEFAULT_BASE_URL = "https://api.openai.com/v1"
    DEFAULT_MODEL = "gpt-4o"

    @property
    def endpoint_url(self) -> str:
        """Get the chat completions endpoint URL."""
        return f"{self.base_url}/chat/completions"

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def _build_body(self, prompt: str) -> dict[str, Any]:
        request = OpenAIChatRequest(
            model=self.model,
            messages=[
                OpenAIMessage(role="system", content=SYSTEM_PROMPT),
                OpenAIMessage(role="user", content=prompt),
            ],
            response_format={"type": "json_object"},
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        return request.model_dump(exclude_none=True)

    def _extract_content(self, payload: Any) -> str:
        try:
            response = OpenAIChatResponse.model_validate(payload)
        except ValidationError as e:
            msg = f"Unexpected OpenAI response: {e.error_count()} error(s)"
            raise LLMValidationError(msg) from e
        return response.content
