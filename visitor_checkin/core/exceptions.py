"""
Custom exceptions for the visitor check-in service

Usage:
    from visitor_checkin.core.exceptions import VisitorStoreError

    raise VisitorStoreError("Insert was not acknowledged")
"""

from typing import Any, Optional


class VisitorCheckinError(Exception):
    """Base exception for all check-in errors."""

    def __init__(self, message: str = "Visitor check-in error occurred", details: Optional[Any] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class VisitorStoreError(VisitorCheckinError):
    """Raised when a visitor record cannot be persisted."""

    def __init__(self, message: str = "Failed to save visitor", details: Optional[Any] = None):
        super().__init__(message, details)


class CameraUnavailableError(VisitorCheckinError):
    """Raised when the camera device is denied, missing or stops delivering frames."""

    def __init__(
        self,
        message: str = "Camera access was denied or is unavailable.",
        details: Optional[Any] = None,
    ):
        super().__init__(message, details)
