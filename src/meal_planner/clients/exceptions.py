"""Recipe source client exceptions.

This module defines exceptions raised by external recipe API clients.
The recipe service treats every ``RecipeSourceError`` as a recoverable
source failure and decides whether to fall back to AI generation.
"""

from __future__ import annotations


class RecipeSourceError(Exception):
    """Base exception for recipe source client errors."""


class RecipeSourceUnavailableError(RecipeSourceError):
    """Raised when the recipe API cannot be reached.

    This includes connection errors and timeouts.
    """


class RecipeSourceFetchError(RecipeSourceError):
    """Raised when the recipe API returns a non-2xx response."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        super().__init__(message)


class RecipeSourceResponseError(RecipeSourceError):
    """Raised when a 2xx response body cannot be parsed."""


class RecipeSourceNotConfiguredError(RecipeSourceError):
    """Raised when no client is registered (or no key is set) for a source."""


class RecipeSourceUnsupportedError(RecipeSourceError):
    """Raised when a source has no endpoint for the requested operation."""
