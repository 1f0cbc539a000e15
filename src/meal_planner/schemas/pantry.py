"""Pantry and user profile inputs.

These are passed by value into the recipe service and never mutated.
"""

from __future__ import annotations

from datetime import date

from pydantic import ConfigDict, Field

from meal_planner.schemas.base import APIRequest


class PantryItem(APIRequest):
    """An ingredient the user has on hand."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Ingredient name")
    quantity: float = Field(default=1.0, ge=0, description="Amount on hand")
    unit: str = Field(default="unit", description="Unit of the quantity")
    category: str = Field(default="other", description="Pantry category")
    expiry_date: date | None = Field(default=None, description="Best-before date")


class UserProfile(APIRequest):
    """Dietary constraints and macro targets used to personalize results."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="User identifier")
    dietary_restrictions: list[str] = Field(default_factory=list)
    dietary_preferences: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    calorie_target: int | None = Field(default=None, ge=0)
    protein_target: int | None = Field(default=None, ge=0)
    carbs_target: int | None = Field(default=None, ge=0)
    fat_target: int | None = Field(default=None, ge=0)

    @property
    def macro_targets(self) -> dict[str, int]:
        """Targets that are set, keyed by macro name."""
        targets = {
            "calories": self.calorie_target,
            "protein": self.protein_target,
            "carbs": self.carbs_target,
            "fat": self.fat_target,
        }
        return {name: value for name, value in targets.items() if value is not None}
