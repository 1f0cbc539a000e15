"""Tasty recipe API client package."""

from meal_planner.clients.tasty.client import TastyClient


__all__ = ["TastyClient"]
