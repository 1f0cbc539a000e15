"""Observability components: logging and metrics."""

from meal_planner.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    get_logger,
    logger,
    setup_logging,
)
from meal_planner.observability.metrics import (
    record_cache_lookup,
    record_source_attempt,
    setup_metrics,
)


__all__ = [
    "bind_context",
    "clear_context",
    "get_context",
    "get_logger",
    "logger",
    "record_cache_lookup",
    "record_source_attempt",
    "setup_logging",
    "setup_metrics",
]
