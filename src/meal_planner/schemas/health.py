"""Health check schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from meal_planner.schemas.base import APIResponse


class HealthResponse(APIResponse):
    """Liveness response with the state of optional collaborators."""

    status: str = Field(..., description="Health status", examples=["healthy"])
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    recipe_api_configured: bool = Field(
        ..., description="Whether a recipe API key is configured"
    )
    ai_provider: str | None = Field(
        default=None, description="Active AI provider, if any"
    )
    cache_entries: int = Field(default=0, ge=0)
