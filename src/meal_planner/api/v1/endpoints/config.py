"""Recipe source policy endpoints.

The policy decides which source is asked first, whether AI generation is
used as a fallback and how long results are cached. Changes apply to
requests started after the change.
"""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from meal_planner.api.dependencies import get_config_manager
from meal_planner.core.config import ConfigManager, InvalidRecipeConfigError, RecipeApiConfig
from meal_planner.core.exceptions import BadRequestException, ErrorDetail
from meal_planner.observability.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/config/recipe-sources", tags=["Configuration"])


@router.get(
    "",
    response_model=RecipeApiConfig,
    summary="Get the recipe source policy",
)
async def get_recipe_source_config(
    manager: Annotated[ConfigManager, Depends(get_config_manager)],
) -> RecipeApiConfig:
    """Return the active policy."""
    return manager.get_config()


@router.patch(
    "",
    response_model=RecipeApiConfig,
    summary="Update the recipe source policy",
    responses={400: {"description": "Invalid policy values"}},
)
async def update_recipe_source_config(
    changes: Annotated[
        dict[str, Any],
        Body(examples=[{"fallbackToAi": False, "cacheTtl": 60000}]),
    ],
    manager: Annotated[ConfigManager, Depends(get_config_manager)],
) -> RecipeApiConfig:
    """Merge the given fields into the active policy.

    Unknown or invalid fields reject the whole update; the previous policy
    stays active.
    """
    try:
        config = manager.set_config(changes)
    except InvalidRecipeConfigError as e:
        raise BadRequestException(
            str(e),
            details=[
                ErrorDetail(
                    field=".".join(str(part) for part in error.get("loc", ())) or None,
                    message=error.get("msg", "Invalid value"),
                    code=error.get("type", "invalid_value"),
                )
                for error in e.errors
            ],
        ) from e

    return config


@router.delete(
    "",
    response_model=RecipeApiConfig,
    summary="Restore the default recipe source policy",
)
async def reset_recipe_source_config(
    manager: Annotated[ConfigManager, Depends(get_config_manager)],
) -> RecipeApiConfig:
    """Reset the policy to its defaults."""
    config = manager.reset()
    logger.info("Recipe source policy reset")
    return config
