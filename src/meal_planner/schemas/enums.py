"""Enumeration types shared across schemas."""

from __future__ import annotations

from enum import StrEnum


class ResultSource(StrEnum):
    """Where a recipe came from."""

    SPOONACULAR = "spoonacular"
    TASTY = "tasty"
    THEMEALDB = "themealdb"
    AI = "ai"


class MealType(StrEnum):
    """Meal slots used for AI generation prompts."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class TimeFrame(StrEnum):
    """Meal plan length supported by the meal planner endpoint."""

    DAY = "day"
    WEEK = "week"


class JobState(StrEnum):
    """Lifecycle of a website/video recipe extraction job."""

    ANALYZING = "analyzing"
    VALIDATING = "validating"
    SAVING = "saving"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Completed and failed jobs accept no further updates."""
        return self in (JobState.COMPLETED, JobState.FAILED)
