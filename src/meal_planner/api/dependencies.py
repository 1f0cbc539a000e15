"""FastAPI dependencies for service access.

Services are initialized during application startup and stored in
app.state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

from meal_planner.core.config import get_settings


if TYPE_CHECKING:
    from meal_planner.core.config import ConfigManager, Settings
    from meal_planner.services.jobs import JobTracker
    from meal_planner.services.recipes import RecipeService


async def get_recipe_service(request: Request) -> RecipeService:
    """Get the recipe service from app state.

    Raises:
        HTTPException: 503 if service is not initialized.
    """
    service: RecipeService | None = getattr(request.app.state, "recipe_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe service not available",
        )
    return service


async def get_config_manager(request: Request) -> ConfigManager:
    """Get the recipe source config manager from app state.

    Raises:
        HTTPException: 503 if it is not initialized.
    """
    manager: ConfigManager | None = getattr(request.app.state, "config_manager", None)
    if manager is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Recipe source configuration not available",
        )
    return manager


async def get_job_tracker(request: Request) -> JobTracker:
    """Get the job tracker from app state.

    Raises:
        HTTPException: 503 if it is not initialized.
    """
    tracker: JobTracker | None = getattr(request.app.state, "job_tracker", None)
    if tracker is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Job tracker not available",
        )
    return tracker


async def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with."""
    settings: Settings | None = getattr(request.app.state, "settings", None)
    return settings or get_settings()
