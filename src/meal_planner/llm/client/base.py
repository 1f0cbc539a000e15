"""Shared HTTP plumbing for AI meal generation providers.

Concrete providers only describe their request and where the completion
text lives in the response; rate limiting, retries and error mapping are
common.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

import httpx
import orjson
from aiolimiter import AsyncLimiter

from meal_planner.llm.exceptions import (
    LLMConfigurationError,
    LLMRateLimitError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
)
from meal_planner.llm.parsing import strip_code_fences
from meal_planner.observability.logging import get_logger


if TYPE_CHECKING:
    from collections.abc import Mapping


logger = get_logger(__name__)


class HTTPMealGenerator(ABC):
    """Base class for HTTP based meal generators.

    Attributes:
        api_key: Provider API key.
        model: Model name.
        base_url: Provider API base URL.
        timeout: HTTP request timeout in seconds.
        max_retries: Maximum retry attempts for transient failures.
        temperature: Sampling temperature.
        max_tokens: Maximum tokens to generate.
    """

    provider: ClassVar[str]
    DEFAULT_BASE_URL: ClassVar[str]
    DEFAULT_MODEL: ClassVar[str]

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        base_url: str | None = None,
        timeout: float = 60.0,
        max_retries: int = 2,
        temperature: float = 0.7,
        max_tokens: int = 1400,
        requests_per_minute: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Provider API key. An empty key is allowed here; calls
                then fail with ``LLMConfigurationError``.
            model: Model name (defaults to the provider's default).
            base_url: API base URL (defaults to the provider's public URL).
            timeout: HTTP request timeout in seconds.
            max_retries: Maximum retries for transient failures.
            temperature: Sampling temperature.
            max_tokens: Maximum tokens to generate.
            requests_per_minute: Rate limit for API requests.
            http_client: HTTP client for API requests.
        """
        self.api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._http_client = http_client
        self._owns_http_client = http_client is None
        # 1 request per (60/rpm) seconds, no initial burst
        self._rate_limiter = AsyncLimiter(1, 60.0 / requests_per_minute)

    async def initialize(self) -> None:
        """Initialize the HTTP client if not provided."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={"Content-Type": "application/json"},
            limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
        )
        logger.info(
            "Meal generator initialized",
            provider=self.provider,
            model=self.model,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("Meal generator shutdown", provider=self.provider)

    @property
    @abstractmethod
    def endpoint_url(self) -> str:
        """Full URL of the generation endpoint."""
        ...

    @abstractmethod
    def _build_body(self, prompt: str) -> dict[str, Any]:
        """Build the JSON request body for a prompt."""
        ...

    def _auth_headers(self) -> dict[str, str]:
        return {}

    def _auth_params(self) -> dict[str, str]:
        return {}

    @abstractmethod
    def _extract_content(self, payload: Any) -> str:
        """Return the completion text of a decoded response ("" if none)."""
        ...

    async def generate_meal_json(self, prompt: str) -> str:
        """Generate meal JSON text for a prompt.

        Raises:
            LLMConfigurationError: No API key; no request is sent.
            LLMUnavailableError: Provider unreachable after retries.
            LLMTimeoutError: Timed out after retries.
            LLMRateLimitError: HTTP 429.
            LLMResponseError: Other non-2xx status or empty completion.
        """
        if not self.api_key:
            msg = f"{self.provider} API key is not configured"
            raise LLMConfigurationError(msg)

        payload = await self._execute_with_retry(self._build_body(prompt))
        content = strip_code_fences(self._extract_content(payload))
        if not content:
            msg = f"Empty completion from {self.provider}"
            raise LLMResponseError(msg)

        logger.debug(
            "Meal generated",
            provider=self.provider,
            model=self.model,
            length=len(content),
        )
        return content

    async def _execute_with_retry(self, body: Mapping[str, Any]) -> Any:
        """Execute request with retry logic for transient failures."""
        if self._http_client is None:
            await self.initialize()

        assert self._http_client is not None

        last_exception: Exception | None = None

        for attempt in range(self.max_retries + 1):
            # Wait for rate limiter before making request
            await self._rate_limiter.acquire()

            try:
                response = await self._http_client.post(
                    self.endpoint_url,
                    content=orjson.dumps(body),
                    headers={"Content-Type": "application/json", **self._auth_headers()},
                    params=self._auth_params(),
                )

                if response.status_code == 429:
                    retry_after = response.headers.get("retry-after", "60")
                    msg = f"{self.provider} rate limit exceeded, retry after {retry_after}s"
                    raise LLMRateLimitError(msg)

                response.raise_for_status()

            except httpx.TimeoutException as e:
                last_exception = e
                logger.warning(
                    "Meal generator request timeout",
                    provider=self.provider,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    timeout=self.timeout,
                )
                if attempt < self.max_retries:
                    continue
                msg = f"{self.provider} timeout after {self.timeout}s"
                raise LLMTimeoutError(msg) from e

            except httpx.HTTPStatusError as e:
                logger.warning(
                    "Meal generator request failed",
                    provider=self.provider,
                    status_code=e.response.status_code,
                )
                msg = f"{self.provider} returned {e.response.status_code}"
                raise LLMResponseError(msg, status_code=e.response.status_code) from e

            except httpx.RequestError as e:
                last_exception = e
                logger.warning(
                    "Meal generator connection error",
                    provider=self.provider,
                    attempt=attempt + 1,
                    max_retries=self.max_retries,
                    error=str(e),
                )
                if attempt < self.max_retries:
                    continue
                msg = f"Cannot connect to {self.provider}: {e}"
                raise LLMUnavailableError(msg) from e

            try:
                return orjson.loads(response.content)
            except orjson.JSONDecodeError as e:
                msg = f"{self.provider} returned a non-JSON body"
                raise LLMResponseError(msg, status_code=response.status_code) from e

        msg = "Max retries exceeded"
        raise LLMUnavailableError(msg) from last_exception
