"""Pantry match scoring shared by the recipe API clients.

Spoonacular reports used/missed ingredient counts itself; for APIs that do
not, ``score_pantry_match`` derives them from the recipe's ingredient list.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

    from meal_planner.schemas import Recipe


def compute_match_percentage(used: int, missed: int) -> int:
    """Share of a recipe's ingredients that are already in the pantry.

    Rounded half-up to a whole percent; 0 when the recipe lists no
    ingredients at all.
    """
    total = used + missed
    if total == 0:
        return 0
    return math.floor(used / total * 100 + 0.5)


def _matches(ingredient: str, pantry_item: str) -> bool:
    return pantry_item in ingredient or ingredient in pantry_item


def score_pantry_match(recipe: Recipe, pantry: Sequence[str]) -> tuple[Recipe, float]:
    """Fill in match fields for a recipe and report pantry coverage.

    An ingredient counts as used when its name contains a pantry name, or
    the other way round (``"chicken breast"`` matches ``"chicken"``).

    Returns:
        The recipe with used/missed counts, match percentage and missing
        ingredients set, and the share of pantry items (0-1) the recipe uses.
    """
    wanted = [name.strip().lower() for name in pantry if name.strip()]
    used: list[str] = []
    missing: list[str] = []
    for ingredient in recipe.ingredients:
        name = ingredient.name.strip().lower()
        if name and any(_matches(name, item) for item in wanted):
            used.append(ingredient.name)
        else:
            missing.append(ingredient.name)

    names = [ingredient.name.strip().lower() for ingredient in recipe.ingredients]
    names = [name for name in names if name]
    covered = sum(1 for item in wanted if any(_matches(name, item) for name in names))
    coverage = covered / len(wanted) if wanted else 0.0

    scored = recipe.model_copy(
        update={
            "used_ingredient_count": len(used),
            "missed_ingredient_count": len(missing),
            "match_percentage": compute_match_percentage(len(used), len(missing)),
            "missing_ingredients": missing,
        }
    )
    return scored, coverage


def rank_matches(recipes: list[Recipe], ranking: int) -> list[Recipe]:
    """Order pantry matches the way Spoonacular's ``ranking`` does.

    1 puts recipes using the most pantry ingredients first; 2 puts recipes
    missing the fewest ingredients first.
    """
    if ranking == 2:
        return sorted(
            recipes,
            key=lambda r: (r.missed_ingredient_count, -r.used_ingredient_count),
        )
    return sorted(
        recipes,
        key=lambda r: (-r.used_ingredient_count, r.missed_ingredient_count),
    )
