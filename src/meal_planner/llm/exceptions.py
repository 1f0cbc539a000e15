"""LLM client exceptions.

This module defines exceptions specific to AI meal generation. The recipe
service treats every ``LLMError`` as a terminal failure of the AI source;
``FallbackMealGenerator`` additionally retries ``LLMUnavailableError`` on a
secondary provider.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base exception for LLM client errors."""


class LLMUnavailableError(LLMError):
    """Raised when the LLM service cannot be reached.

    This includes connection errors, timeouts, and service unavailability.
    Triggers fallback to a secondary provider when one is configured.
    """


class LLMTimeoutError(LLMUnavailableError):
    """Raised when an LLM request times out."""


class LLMResponseError(LLMError):
    """Raised when the LLM returns an error response or an empty completion.

    Attributes:
        status_code: Upstream HTTP status, or None for an empty completion.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class LLMRateLimitError(LLMResponseError):
    """Raised when the LLM service rate limits the request (HTTP 429)."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=429)


class LLMValidationError(LLMError):
    """Raised when an LLM response fails schema validation."""


class LLMParseError(LLMValidationError):
    """Raised when generated text is not the JSON shape a meal needs."""


class LLMConfigurationError(LLMError):
    """Raised when the LLM client is misconfigured (e.g. missing API key)."""
