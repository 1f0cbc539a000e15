"""Shared HTTP plumbing for recipe API clients.

Subclasses provide the base URL, auth headers and the recipe lookups; this
class owns the httpx client lifecycle and maps transport, status and
decoding failures to ``RecipeSourceError`` subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

import httpx
import orjson
from pydantic import ValidationError

from meal_planner.clients.exceptions import (
    RecipeSourceFetchError,
    RecipeSourceNotConfiguredError,
    RecipeSourceResponseError,
    RecipeSourceUnavailableError,
)
from meal_planner.observability.logging import get_logger


if TYPE_CHECKING:
    from pydantic import BaseModel


logger = get_logger(__name__)


class HTTPRecipeClient:
    """Base class for recipe API clients speaking JSON over HTTP GET.

    Attributes:
        display_name: Name used in log lines and error messages.
        timeout: HTTP request timeout in seconds.
    """

    display_name: ClassVar[str] = "Recipe API"

    def __init__(
        self,
        timeout: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.timeout = timeout
        self._http = http_client
        self._owns_http_client = http_client is None

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        raise NotImplementedError

    @property
    def is_configured(self) -> bool:
        """Whether the client has the credentials it needs."""
        return True

    def _auth_headers(self) -> dict[str, str]:
        return {}

    async def initialize(self) -> None:
        """Initialize the HTTP client if not provided."""
        if self._http is None:
            self._http = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
            )
        logger.info(
            f"{type(self).__name__} initialized",
            base_url=self.base_url,
            configured=self.is_configured,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_http_client and self._http is not None:
            await self._http.aclose()
            self._http = None
        logger.debug(f"{type(self).__name__} shutdown")

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send an authenticated GET and decode the JSON body.

        Raises:
            RecipeSourceNotConfiguredError: Missing credentials.
            RecipeSourceUnavailableError: Connection failure or timeout.
            RecipeSourceFetchError: Non-2xx status.
            RecipeSourceResponseError: Body is not valid JSON.
        """
        name = self.display_name
        if not self.is_configured:
            msg = f"{name} API key is not configured"
            raise RecipeSourceNotConfiguredError(msg)

        if self._http is None:
            await self.initialize()

        assert self._http is not None

        try:
            response = await self._http.get(
                f"{self.base_url}{path}",
                params=params or {},
                headers=self._auth_headers(),
            )
        except httpx.TimeoutException as e:
            logger.warning(f"{name} request timed out", path=path, timeout=self.timeout)
            msg = f"{name} timeout after {self.timeout}s"
            raise RecipeSourceUnavailableError(msg) from e
        except httpx.RequestError as e:
            logger.warning(f"{name} connection error", path=path, error=str(e))
            msg = f"Cannot connect to {name}: {e}"
            raise RecipeSourceUnavailableError(msg) from e

        if not response.is_success:
            logger.warning(
                f"{name} returned error",
                path=path,
                status_code=response.status_code,
            )
            msg = f"{name} returned {response.status_code}"
            raise RecipeSourceFetchError(response.status_code, msg)

        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as e:
            msg = f"{name} returned invalid JSON for {path}"
            raise RecipeSourceResponseError(msg) from e

    def _parse[M: BaseModel](self, model: type[M], payload: Any, path: str) -> M:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            msg = (
                f"Unexpected {self.display_name} payload for {path}: "
                f"{e.error_count()} error(s)"
            )
            raise RecipeSourceResponseError(msg) from e
