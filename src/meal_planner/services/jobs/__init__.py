"""Recipe extraction job tracking."""

from meal_planner.services.jobs.exceptions import (
    DuplicateJobError,
    InvalidJobUpdateError,
    JobAlreadyFinishedError,
    JobError,
    JobNotFoundError,
)
from meal_planner.services.jobs.tracker import JobTracker


__all__ = [
    "DuplicateJobError",
    "InvalidJobUpdateError",
    "JobAlreadyFinishedError",
    "JobError",
    "JobNotFoundError",
    "JobTracker",
]
