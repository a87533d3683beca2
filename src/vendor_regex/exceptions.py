"""
Exception hierarchy for vendor-regex.

The pattern core never raises: it degrades to longer patterns instead. Errors
only surface at the edges, when collision data is loaded from disk.
"""

from __future__ import annotations

from typing import Any


class VendorRegexError(Exception):
    """Base exception for all vendor-regex errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PoolLoadError(VendorRegexError):
    """Collision pool data could not be loaded.

    Attributes:
        path: Path of the file that failed to load
    """

    def __init__(
        self,
        message: str,
        path: str,
        details: dict[str, Any] | None = None,
    ):
        """Initialize the pool load error.

        Args:
            message: Human-readable error message
            path: Path of the file that failed to load
            details: Optional dictionary of additional error context
        """
        super().__init__(message, details)
        self.path = path


__all__ = ["VendorRegexError", "PoolLoadError"]
