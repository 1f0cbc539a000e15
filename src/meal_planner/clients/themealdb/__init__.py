"""TheMealDB recipe API client package."""

from meal_planner.clients.themealdb.client import TheMealDBClient


__all__ = ["TheMealDBClient"]
