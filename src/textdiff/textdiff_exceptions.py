"""Custom exceptions for text diff operations."""

from typing import Any


class TextDiffError(Exception):
    """Base exception for text diff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class TextDiffResourceExceededError(TextDiffError):
    """Raised when an input is too large to compare at the requested granularity."""


class TextDiffSettingsError(TextDiffError):
    """Raised when diff settings are invalid."""
