"""Constants for the recipe service.

Contains:
- Request types, used as cache key prefixes
- AI generation limits
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Request Types (cache key prefixes)
# =============================================================================

PANTRY_RECIPES_REQUEST: Final[str] = "pantry_recipes"
SEARCH_REQUEST: Final[str] = "search"
MEAL_PLAN_REQUEST: Final[str] = "meal_plan"
DETAILS_REQUEST: Final[str] = "details"


# =============================================================================
# AI Generation
# =============================================================================

AI_SOURCE: Final[str] = "ai"
MAX_AI_MEALS: Final[int] = 3
