"""Custom exceptions for tdiff operations."""

from typing import Any


class TDiffError(Exception):
    """Base exception for tdiff operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class TDiffSettingsError(TDiffError):
    """Raised when engine settings are invalid."""
