"""Meal planner service.

Pantry-aware recipe recommendations and meal plans backed by an external
recipe API with an AI generation fallback and an in-memory TTL cache.
"""

__version__ = "0.1.0"
