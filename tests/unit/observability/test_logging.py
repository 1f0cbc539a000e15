"""Unit tests for logging configuration.

Tests cover:
- Request context binding
- JSON record formatting
- Sink setup
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import orjson
import pytest

from meal_planner.observability.logging import (
    _format_json,
    _format_text,
    bind_context,
    clear_context,
    get_context,
    setup_logging,
)


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _reset_context() -> Iterator[None]:
    clear_context()
    yield
    clear_context()


def _record(message: str = "Recipe request resolved") -> dict[str, object]:
    level = MagicMock()
    level.name = "INFO"
    return {
        "time": datetime(2026, 1, 1, tzinfo=UTC),
        "level": level,
        "message": message,
        "name": "meal_planner.services.recipes.service",
        "function": "_store",
        "line": 10,
        "extra": {"source": "spoonacular"},
        "exception": None,
    }


class TestContext:
    """Tests for context binding."""

    def test_bind_merges(self) -> None:
        """Should merge successive bindings."""
        bind_context(request_id="abc")
        bind_context(path="/health")

        assert get_context() == {"request_id": "abc", "path": "/health"}

    def test_clear(self) -> None:
        """Should drop bound values."""
        bind_context(request_id="abc")
        clear_context()

        assert get_context() == {}


class TestFormatJson:
    """Tests for the JSON formatter."""

    def test_includes_extra_and_context(self) -> None:
        """Should serialize message, extras and bound context."""
        bind_context(request_id="abc")
        record = _record()

        template = _format_json(record)

        assert template == "{extra[serialized]}\n"
        payload = orjson.loads(record["extra"]["serialized"])
        assert payload["message"] == "Recipe request resolved"
        assert payload["level"] == "INFO"
        assert payload["source"] == "spoonacular"
        assert payload["request_id"] == "abc"

    def test_text_format_escapes_context_braces(self) -> None:
        """Should not let context values break the format template."""
        bind_context(query="{x}")

        template = _format_text(_record())

        assert "query={{x}}" in template


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_json_sink_in_production(self) -> None:
        """Should use the JSON formatter outside development."""
        with patch("meal_planner.observability.logging.logger") as mock_logger:
            setup_logging("info", "json", is_development=False)

        mock_logger.remove.assert_called_once()
        kwargs = mock_logger.add.call_args.kwargs
        assert kwargs["format"] is _format_json
        assert kwargs["level"] == "INFO"

    def test_text_sink_in_development(self) -> None:
        """Should use the text formatter in development."""
        with patch("meal_planner.observability.logging.logger") as mock_logger:
            setup_logging("DEBUG", "json", is_development=True)

        assert mock_logger.add.call_args.kwargs["format"] is _format_text
