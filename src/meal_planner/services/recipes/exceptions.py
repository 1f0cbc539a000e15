"""Exceptions for the recipe service.

Source failures (``RecipeSourceError``, ``LLMError``) are recovered from
inside the service; only the errors below, or the upstream error itself
when AI fallback is disabled, reach the caller.
"""

from __future__ import annotations


class RecipeServiceError(Exception):
    """Base exception for recipe service errors."""

    def __init__(self, message: str, request_type: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            request_type: Request type that failed (e.g. ``search``).
        """
        self.request_type = request_type
        super().__init__(message)


class NoUsableResultError(RecipeServiceError):
    """Raised when a source answered but nothing survived validation.

    This covers an empty result list and results that were all rejected
    by the recipe validator.
    """


class RecipeSourcesExhaustedError(RecipeServiceError):
    """Raised when every allowed source failed.

    Attributes:
        causes: The failure of each source, in the order they were tried.
    """

    def __init__(
        self,
        message: str,
        request_type: str | None = None,
        causes: list[Exception] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            request_type: Request type that failed.
            causes: Underlying source failures.
        """
        self.causes = causes or []
        super().__init__(message, request_type)
