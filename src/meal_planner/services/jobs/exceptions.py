"""Exceptions for the job tracker."""

from __future__ import annotations


class JobError(Exception):
    """Base exception for job tracker errors."""

    def __init__(self, message: str, job_id: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            job_id: Job the error relates to.
        """
        self.job_id = job_id
        super().__init__(message)


class JobNotFoundError(JobError):
    """Raised when a job id is unknown."""


class DuplicateJobError(JobError):
    """Raised when registering a job id that is already tracked."""


class JobAlreadyFinishedError(JobError):
    """Raised when updating a job that is completed or failed."""


class InvalidJobUpdateError(JobError):
    """Raised when an update carries out-of-range values."""
