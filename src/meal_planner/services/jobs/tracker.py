"""In-process tracker for long-running recipe extraction jobs.

Website and video recipe imports run outside this service; the extraction
worker pushes progress updates here and clients poll (or wait) for the
terminal state.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Final
from uuid import uuid4

from meal_planner.observability.logging import get_logger
from meal_planner.schemas import JobState, JobStatus
from meal_planner.services.jobs.exceptions import (
    DuplicateJobError,
    InvalidJobUpdateError,
    JobAlreadyFinishedError,
    JobNotFoundError,
)


logger = get_logger(__name__)

DEFAULT_FINISHED_TTL: Final[float] = 3600.0


class JobTracker:
    """Holds the latest ``JobStatus`` of every job.

    Statuses are immutable snapshots; each update replaces the stored one
    and wakes every ``wait_for`` caller. Completed and failed jobs are
    forgotten ``finished_ttl`` seconds after they finish.
    """

    def __init__(self, finished_ttl: float = DEFAULT_FINISHED_TTL) -> None:
        self.finished_ttl = finished_ttl
        self._jobs: dict[str, JobStatus] = {}
        self._finished_at: dict[str, float] = {}
        self._changed = asyncio.Condition()

    def __len__(self) -> int:
        self._prune()
        return len(self._jobs)

    def _prune(self) -> None:
        now = time.time()
        expired = [
            job_id
            for job_id, finished_at in self._finished_at.items()
            if now - finished_at > self.finished_ttl
        ]
        for job_id in expired:
            del self._finished_at[job_id]
            del self._jobs[job_id]
        if expired:
            logger.debug("Expired finished jobs", count=len(expired))

    def create(self, job_id: str | None = None, message: str = "") -> JobStatus:
        """Register a job in the ``analyzing`` state.

        Args:
            job_id: Caller-chosen id; generated when omitted.
            message: Initial status message.

        Raises:
            DuplicateJobError: The id is already tracked.
        """
        self._prune()
        job_id = job_id or uuid4().hex
        if job_id in self._jobs:
            msg = f"Job {job_id} already exists"
            raise DuplicateJobError(msg, job_id)

        status = JobStatus(job_id=job_id, message=message)
        self._jobs[job_id] = status
        logger.info("Job created", job_id=job_id)
        return status

    def get(self, job_id: str) -> JobStatus:
        """Return the current status.

        Raises:
            JobNotFoundError: Unknown or expired job id.
        """
        self._prune()
        try:
            return self._jobs[job_id]
        except KeyError:
            msg = f"Job {job_id} not found"
            raise JobNotFoundError(msg, job_id) from None

    async def apply_update(
        self,
        job_id: str,
        *,
        status: JobState | str | None = None,
        progress: int | None = None,
        message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> JobStatus:
        """Apply a progress update pushed by the extraction worker.

        Omitted fields keep their current value. Moving to ``completed``
        forces progress to 100.

        Raises:
            JobNotFoundError: Unknown job id.
            JobAlreadyFinishedError: The job is already completed or failed.
            InvalidJobUpdateError: Progress outside 0-100 or unknown status.
        """
        current = self.get(job_id)
        if current.is_finished:
            msg = f"Job {job_id} already finished with status {current.status}"
            raise JobAlreadyFinishedError(msg, job_id)

        if progress is not None and not 0 <= progress <= 100:
            msg = f"Progress must be between 0 and 100, got {progress}"
            raise InvalidJobUpdateError(msg, job_id)

        try:
            new_state = JobState(status) if status is not None else JobState(current.status)
        except ValueError:
            msg = f"Unknown job status {status!r}"
            raise InvalidJobUpdateError(msg, job_id) from None

        new_progress = current.progress if progress is None else progress
        if new_state == JobState.COMPLETED:
            new_progress = 100

        updated = JobStatus(
            job_id=job_id,
            status=new_state,
            progress=new_progress,
            message=current.message if message is None else message,
            data=current.data if data is None else data,
        )

        async with self._changed:
            self._jobs[job_id] = updated
            if updated.is_finished:
                self._finished_at[job_id] = time.time()
            self._changed.notify_all()

        logger.info(
            "Job updated",
            job_id=job_id,
            status=updated.status,
            progress=updated.progress,
        )
        return updated

    async def wait_for(self, job_id: str, timeout: float) -> JobStatus:
        """Wait until a job reaches ``completed`` or ``failed``.

        Raises:
            JobNotFoundError: Unknown job id.
            TimeoutError: The job did not finish in time.
        """
        self.get(job_id)

        async with asyncio.timeout(timeout), self._changed:
            await self._changed.wait_for(lambda: self.get(job_id).is_finished)

        return self.get(job_id)
