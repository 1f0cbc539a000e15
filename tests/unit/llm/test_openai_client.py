"""Unit tests for OpenAIClient.

Tests cover:
- HTTP request construction
- Completion extraction and fence stripping
- Error handling
- Retry logic
"""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from meal_planner.llm.client.openai import SYSTEM_PROMPT, OpenAIClient
from meal_planner.llm.exceptions import (
    LLMConfigurationError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from tests.fixtures.llm_responses import (
    FENCED_MEALS_JSON,
    GENERATED_MEALS_JSON,
    create_openai_response,
)


pytestmark = pytest.mark.unit

CHAT_URL = "https://api.openai.com/v1/chat/completions"

# High rate limit to disable rate limiting delays in tests
TEST_RATE_LIMIT = 10000.0


def make_client(**kwargs: object) -> OpenAIClient:
    """Create a client with test defaults."""
    options: dict[str, object] = {
        "api_key": "sk-test",
        "requests_per_minute": TEST_RATE_LIMIT,
        "max_retries": 2,
    }
    options.update(kwargs)
    return OpenAIClient(**options)  # type: ignore[arg-type]


class TestOpenAIClientInitialization:
    """Tests for client initialization and lifecycle."""

    async def test_initialize_and_shutdown(self) -> None:
        """Should create and close its own HTTP client."""
        client = make_client()

        await client.initialize()
        assert client._http_client is not None

        await client.shutdown()
        assert client._http_client is None

    def test_endpoint_url_default(self) -> None:
        """Should use the public OpenAI URL and default model."""
        client = make_client()

        assert client.endpoint_url == CHAT_URL
        assert client.model == "gpt-4o"

    def test_endpoint_url_custom(self) -> None:
        """Should allow a custom base URL."""
        client = make_client(base_url="https://proxy.example/v1/")

        assert client.endpoint_url == "https://proxy.example/v1/chat/completions"


class TestOpenAIClientGenerate:
    """Tests for generate_meal_json."""

    @respx.mock
    async def test_request_body_and_auth(self) -> None:
        """Should send JSON mode, sampling options and a bearer token."""
        route = respx.post(CHAT_URL).mock(
            return_value=httpx.Response(200, json=create_openai_response(GENERATED_MEALS_JSON))
        )
        client = make_client()

        await client.generate_meal_json("Suggest dinner")

        request = route.calls.last.request
        body = json.loads(request.content)
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert body["model"] == "gpt-4o"
        assert body["response_format"] == {"type": "json_object"}
        assert body["temperature"] == 0.7
        assert body["max_tokens"] == 1400
        assert body["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "Suggest dinner"},
        ]
        await client.shutdown()

    @respx.mock
    async def test_returns_content(self) -> None:
        """Should return the first choice's content."""
        respx.post(CHAT_URL).mock(
            return_value=httpx.Response(200, json=create_openai_response(GENERATED_MEALS_JSON))
        )
        client = make_client()

        assert await client.generate_meal_json("prompt") == GENERATED_MEALS_JSON
        await client.shutdown()

    @respx.mock
    async def test_strips_code_fences(self) -> None:
        """Should remove markdown fences around the JSON."""
        respx.post(CHAT_URL).mock(
            return_value=httpx.Response(200, json=create_openai_response(FENCED_MEALS_JSON))
        )
        client = make_client()

        assert await client.generate_meal_json("prompt") == GENERATED_MEALS_JSON
        await client.shutdown()

    async def test_missing_key_raises_before_request(self) -> None:
        """Should not contact the provider without a key."""
        client = make_client(api_key="")

        with respx.mock(assert_all_called=False) as mock:
            route = mock.post(CHAT_URL)
            with pytest.raises(LLMConfigurationError):
                await client.generate_meal_json("prompt")

        assert not route.called

    @respx.mock
    async def test_empty_completion_raises(self) -> None:
        """Should treat blank or fence-only completions as errors."""
        respx.post(CHAT_URL).mock(
            return_value=httpx.Response(200, json=create_openai_response("```json\n```"))
        )
        client = make_client()

        with pytest.raises(LLMResponseError) as exc_info:
            await client.generate_meal_json("prompt")

        assert exc_info.value.status_code is None
        await client.shutdown()

    @respx.mock
    async def test_no_choices_raises(self) -> None:
        """Should treat a response without choices as empty."""
        respx.post(CHAT_URL).mock(return_value=httpx.Response(200, json={"choices": []}))
        client = make_client()

        with pytest.raises(LLMResponseError):
            await client.generate_meal_json("prompt")
        await client.shutdown()

    @respx.mock
    async def test_unexpected_shape_raises_validation_error(self) -> None:
        """Should reject bodies that are not chat completions."""
        respx.post(CHAT_URL).mock(
            return_value=httpx.Response(200, json={"choices": [{"index": 0}]})
        )
        client = make_client()

        with pytest.raises(LLMValidationError):
            await client.generate_meal_json("prompt")
        await client.shutdown()


class TestOpenAIClientErrors:
    """Tests for HTTP error mapping and retries."""

    @respx.mock
    async def test_rate_limit(self) -> None:
        """Should raise LLMRateLimitError on 429 without retrying."""
        route = respx.post(CHAT_URL).mock(
            return_value=httpx.Response(429, headers={"retry-after": "20"})
        )
        client = make_client()

        with pytest.raises(LLMRateLimitError) as exc_info:
            await client.generate_meal_json("prompt")

        assert exc_info.value.status_code == 429
        assert route.call_count == 1
        await client.shutdown()

    @respx.mock
    async def test_http_error_carries_status(self) -> None:
        """Should raise LLMResponseError with the upstream status."""
        respx.post(CHAT_URL).mock(return_value=httpx.Response(500))
        client = make_client()

        with pytest.raises(LLMResponseError) as exc_info:
            await client.generate_meal_json("prompt")

        assert exc_info.value.status_code == 500
        await client.shutdown()

    @respx.mock
    async def test_timeout_retried_then_raised(self) -> None:
        """Should retry timeouts, then raise LLMTimeoutError."""
        route = respx.post(CHAT_URL).mock(side_effect=httpx.ReadTimeout("slow"))
        client = make_client(max_retries=2)

        with pytest.raises(LLMTimeoutError):
            await client.generate_meal_json("prompt")

        assert route.call_count == 3
        await client.shutdown()

    @respx.mock
    async def test_connection_error_retried_then_raised(self) -> None:
        """Should retry connection errors, then raise LLMUnavailableError."""
        route = respx.post(CHAT_URL).mock(side_effect=httpx.ConnectError("refused"))
        client = make_client(max_retries=1)

        with pytest.raises(LLMUnavailableError):
            await client.generate_meal_json("prompt")

        assert route.call_count == 2
        await client.shutdown()

    @respx.mock
    async def test_recovers_after_transient_failure(self) -> None:
        """Should succeed when a retry succeeds."""
        respx.post(CHAT_URL).mock(
            side_effect=[
                httpx.ConnectError("refused"),
                httpx.Response(200, json=create_openai_response(GENERATED_MEALS_JSON)),
            ]
        )
        client = make_client()

        assert await client.generate_meal_json("prompt") == GENERATED_MEALS_JSON
        await client.shutdown()
