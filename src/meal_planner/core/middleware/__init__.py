"""HTTP middleware."""

from meal_planner.core.middleware.request_id import RequestIDMiddleware


__all__ = ["RequestIDMiddleware"]
