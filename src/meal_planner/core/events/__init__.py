"""Application lifecycle events."""

from meal_planner.core.events.lifespan import lifespan


__all__ = ["lifespan"]
