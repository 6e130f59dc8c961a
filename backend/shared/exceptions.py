"""
Base exception classes for the AI Curator backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code.
"""

from typing import Optional, Any


class CuratorError(Exception):
    """
    Base exception for all AI Curator errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CuratorError):
    """Resource not found."""

    status_code = 404


class ValidationError(CuratorError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(CuratorError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(CuratorError):
    """Authorization failed (insufficient permissions)."""

    status_code = 403


class ExternalServiceError(CuratorError):
    """Error communicating with an external service."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class SessionExpiredError(AuthenticationError):
    """The session could not be restored between retry attempts."""

    def __init__(self, message: str = "Authentication session expired. Please log in again."):
        super().__init__(message, code="SESSION_EXPIRED")
