"""Unit tests for GeminiClient."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from meal_planner.llm.client.gemini import JSON_SUFFIX, GeminiClient
from meal_planner.llm.exceptions import (
    LLMConfigurationError,
    LLMResponseError,
    LLMTimeoutError,
)
from tests.fixtures.llm_responses import (
    FENCED_MEALS_JSON,
    GENERATED_MEALS_JSON,
    create_gemini_response,
)


pytestmark = pytest.mark.unit

GENERATE_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-1.5-flash:generateContent"
)

TEST_RATE_LIMIT = 10000.0


def make_client(**kwargs: object) -> GeminiClient:
    """Create a client with test defaults."""
    options: dict[str, object] = {
        "api_key": "gm-test",
        "requests_per_minute": TEST_RATE_LIMIT,
        "max_retries": 1,
    }
    options.update(kwargs)
    return GeminiClient(**options)  # type: ignore[arg-type]


class TestGeminiClient:
    """Tests for generate_meal_json."""

    def test_endpoint_url_includes_model(self) -> None:
        """Should address the model's generateContent method."""
        assert make_client().endpoint_url == GENERATE_URL
        assert make_client(model="gemini-pro").endpoint_url.endswith(
            "/models/gemini-pro:generateContent"
        )

    @respx.mock
    async def test_request_body_and_key_param(self) -> None:
        """Should send the key as a query param and camelCase generationConfig."""
        route = respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=create_gemini_response(GENERATED_MEALS_JSON))
        )
        client = make_client()

        await client.generate_meal_json("Suggest lunch")

        request = route.calls.last.request
        body = json.loads(request.content)
        assert request.url.params["key"] == "gm-test"
        assert "Authorization" not in request.headers
        assert body["contents"][0]["parts"][0]["text"] == "Suggest lunch" + JSON_SUFFIX
        assert body["generationConfig"] == {
            "temperature": 0.7,
            "topP": 0.9,
            "topK": 40,
            "maxOutputTokens": 1400,
        }
        await client.shutdown()

    @respx.mock
    async def test_returns_unfenced_text(self) -> None:
        """Should strip fences from the first candidate part."""
        respx.post(GENERATE_URL).mock(
            return_value=httpx.Response(200, json=create_gemini_response(FENCED_MEALS_JSON))
        )
        client = make_client()

        assert await client.generate_meal_json("prompt") == GENERATED_MEALS_JSON
        await client.shutdown()

    @respx.mock
    async def test_no_candidates_raises(self) -> None:
        """Should treat a response without candidates as empty."""
        respx.post(GENERATE_URL).mock(return_value=httpx.Response(200, json={"candidates": []}))
        client = make_client()

        with pytest.raises(LLMResponseError):
            await client.generate_meal_json("prompt")
        await client.shutdown()

    async def test_missing_key(self) -> None:
        """Should raise LLMConfigurationError without a key."""
        with pytest.raises(LLMConfigurationError):
            await make_client(api_key="").generate_meal_json("prompt")

    @respx.mock
    async def test_http_error(self) -> None:
        """Should map non-2xx responses."""
        respx.post(GENERATE_URL).mock(return_value=httpx.Response(403))
        client = make_client()

        with pytest.raises(LLMResponseError) as exc_info:
            await client.generate_meal_json("prompt")

        assert exc_info.value.status_code == 403
        await client.shutdown()

    @respx.mock
    async def test_timeout(self) -> None:
        """Should raise LLMTimeoutError after retries."""
        route = respx.post(GENERATE_URL).mock(side_effect=httpx.ConnectTimeout("slow"))
        client = make_client()

        with pytest.raises(LLMTimeoutError):
            await client.generate_meal_json("prompt")

        assert route.call_count == 2
        await client.shutdown()
