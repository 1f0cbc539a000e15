"""Recipe extraction job schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from meal_planner.schemas.base import APIRequest, APIResponse
from meal_planner.schemas.enums import JobState


class JobStatus(APIResponse):
    """Progress of a long-running website or video recipe extraction."""

    job_id: str = Field(..., description="Job identifier")
    status: JobState = Field(default=JobState.ANALYZING)
    progress: int = Field(default=0, ge=0, le=100)
    message: str = Field(default="")
    data: dict[str, Any] | None = Field(
        default=None,
        description="Extracted recipe payload once available",
    )

    @property
    def is_finished(self) -> bool:
        """Whether the job reached a terminal state."""
        return JobState(self.status).is_terminal


class CreateJobRequest(APIRequest):
    """Body for registering a new extraction job."""

    job_id: str | None = None
    message: str = ""


class JobUpdateRequest(APIRequest):
    """Partial update pushed by the extraction worker."""

    status: JobState | None = None
    progress: int | None = None
    message: str | None = None
    data: dict[str, Any] | None = None
