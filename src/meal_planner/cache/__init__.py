"""In-memory caching layer for recipe results."""

from meal_planner.cache.memory import ApiCache, CacheEntry


__all__ = ["ApiCache", "CacheEntry"]
