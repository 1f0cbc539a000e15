"""Recipe extraction job endpoints.

Extraction workers push progress updates; clients poll the latest status
or long-poll until the job finishes.
"""

from __future__ import annotations

from contextlib import suppress
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from meal_planner.api.dependencies import get_job_tracker
from meal_planner.core.exceptions import (
    BadRequestException,
    ConflictException,
    NotFoundException,
)
from meal_planner.schemas import CreateJobRequest, JobStatus, JobUpdateRequest
from meal_planner.services.jobs import (
    DuplicateJobError,
    InvalidJobUpdateError,
    JobAlreadyFinishedError,
    JobNotFoundError,
    JobTracker,
)


router = APIRouter(prefix="/jobs", tags=["Jobs"])

MAX_WAIT_SECONDS = 30.0


@router.post(
    "",
    response_model=JobStatus,
    status_code=status.HTTP_201_CREATED,
    summary="Register an extraction job",
    responses={409: {"description": "Job id already in use"}},
)
async def create_job(
    request_body: CreateJobRequest,
    tracker: Annotated[JobTracker, Depends(get_job_tracker)],
) -> JobStatus:
    """Register a job in the ``analyzing`` state."""
    try:
        return tracker.create(request_body.job_id, request_body.message)
    except DuplicateJobError as e:
        raise ConflictException(str(e)) from e


@router.get(
    "/{job_id}",
    response_model=JobStatus,
    summary="Get job status",
    responses={404: {"description": "Unknown job"}},
)
async def get_job(
    job_id: str,
    tracker: Annotated[JobTracker, Depends(get_job_tracker)],
    wait: Annotated[
        float,
        Query(
            ge=0,
            le=MAX_WAIT_SECONDS,
            description="Seconds to wait for the job to finish before answering",
        ),
    ] = 0,
) -> JobStatus:
    """Return the job status.

    With ``wait`` set, the response is delayed until the job completes or
    fails, or until the wait elapses; the latest status is returned either way.
    """
    try:
        if wait > 0:
            with suppress(TimeoutError):
                return await tracker.wait_for(job_id, wait)
        return tracker.get(job_id)
    except JobNotFoundError as e:
        raise NotFoundException("Job", job_id) from e


@router.patch(
    "/{job_id}",
    response_model=JobStatus,
    summary="Push a job progress update",
    responses={
        400: {"description": "Invalid update"},
        404: {"description": "Unknown job"},
        409: {"description": "Job already finished"},
    },
)
async def update_job(
    job_id: str,
    request_body: JobUpdateRequest,
    tracker: Annotated[JobTracker, Depends(get_job_tracker)],
) -> JobStatus:
    """Apply a partial status update."""
    try:
        return await tracker.apply_update(
            job_id,
            status=request_body.status,
            progress=request_body.progress,
            message=request_body.message,
            data=request_body.data,
        )
    except JobNotFoundError as e:
        raise NotFoundException("Job", job_id) from e
    except JobAlreadyFinishedError as e:
        raise ConflictException(str(e)) from e
    except InvalidJobUpdateError as e:
        raise BadRequestException(str(e)) from e
