"""Prometheus metrics.

This module provides:
- Counters for cache lookups and recipe source attempts
- FastAPI request instrumentation and the metrics endpoint
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator, metrics

from meal_planner.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from meal_planner.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "meal_planner"

CACHE_LOOKUPS = Counter(
    "cache_lookups_total",
    "Recipe cache lookups by request type and result (hit, miss).",
    ["request_type", "result"],
    namespace=METRIC_NAMESPACE,
)

SOURCE_ATTEMPTS = Counter(
    "source_attempts_total",
    "Recipe source attempts by source and outcome.",
    ["source", "outcome"],
    namespace=METRIC_NAMESPACE,
)


def record_cache_lookup(request_type: str, *, hit: bool) -> None:
    """Count a cache lookup."""
    CACHE_LOOKUPS.labels(
        request_type=request_type, result="hit" if hit else "miss"
    ).inc()


def record_source_attempt(source: str, outcome: str) -> None:
    """Count an attempt against a recipe source (API or AI).

    Outcomes: ``success``, ``empty``, ``rejected``, ``error``.
    """
    SOURCE_ATTEMPTS.labels(source=source, outcome=outcome).inc()


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator:
    """Instrument the app and expose ``{prefix}/metrics``.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Returns:
        The Instrumentator (not attached when metrics are disabled).
    """
    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return Instrumentator()

    prefix = settings.api.v1_prefix
    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=[f"{prefix}/health", f"{prefix}/metrics"],
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )
    instrumentator.instrument(app)

    endpoint = f"{prefix}/metrics"
    instrumentator.expose(app, endpoint=endpoint, tags=["Monitoring"])
    logger.info("Prometheus metrics configured", endpoint=endpoint)

    return instrumentator


__all__ = [
    "CACHE_LOOKUPS",
    "SOURCE_ATTEMPTS",
    "record_cache_lookup",
    "record_source_attempt",
    "setup_metrics",
]
