"""Translation of service errors into HTTP errors."""

from __future__ import annotations

from meal_planner.clients.exceptions import RecipeSourceError, RecipeSourceFetchError
from meal_planner.core.exceptions import (
    AppException,
    BadGatewayException,
    NoRecipesFoundException,
    ServiceUnavailableException,
)
from meal_planner.observability.logging import get_logger
from meal_planner.services.recipes.exceptions import (
    NoUsableResultError,
    RecipeServiceError,
    RecipeSourcesExhaustedError,
)


logger = get_logger(__name__)


def recipe_error_to_http(exc: RecipeSourceError | RecipeServiceError) -> AppException:
    """Map a recipe service failure to the HTTP error returned to clients.

    - nothing usable: 404 NO_RECIPES_FOUND
    - upstream error status: 502 UPSTREAM_ERROR
    - anything else (unreachable, not configured, sources exhausted): 503
    """
    if isinstance(exc, NoUsableResultError):
        return NoRecipesFoundException(str(exc))

    if isinstance(exc, RecipeSourceFetchError):
        logger.warning("Recipe API error", status_code=exc.status_code)
        return BadGatewayException(f"Recipe API returned {exc.status_code}")

    if isinstance(exc, RecipeSourcesExhaustedError):
        logger.warning(
            "All recipe sources failed",
            request_type=exc.request_type,
            causes=[f"{type(cause).__name__}: {cause}" for cause in exc.causes],
        )
        return ServiceUnavailableException("No recipe source is currently available")

    logger.warning("Recipe source unavailable", error=str(exc))
    return ServiceUnavailableException("Recipe source is currently unavailable")
