"""Health check endpoint.

Reports liveness plus which recipe sources the service can currently use.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from meal_planner.api.dependencies import get_app_settings
from meal_planner.core.config import Settings
from meal_planner.schemas import HealthResponse


router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """Check if the service is alive.

    Never calls external services; configuration state is read from the
    clients created at startup.
    """
    state = request.app.state
    spoonacular = getattr(state, "spoonacular_client", None)
    meal_generator = getattr(state, "meal_generator", None)
    recipe_service = getattr(state, "recipe_service", None)

    return HealthResponse(
        status="healthy",
        version=settings.app.version,
        environment=settings.APP_ENV,
        recipe_api_configured=bool(spoonacular and spoonacular.is_configured),
        ai_provider=str(settings.llm.provider) if meal_generator is not None else None,
        cache_entries=len(recipe_service.cache) if recipe_service is not None else 0,
    )
