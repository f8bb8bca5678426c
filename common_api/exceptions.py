"""
Exceptions raised by the common API client.
"""

from typing import Any, Dict, Optional


class CommonApiError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class ConfigurationError(CommonApiError):
    """Raised when the client is missing required configuration."""


class APIError(CommonApiError):
    """Raised when a request fails or the server answers with an error status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.response_data = response_data or {}

    @property
    def error_info(self):
        """
        The server's error body parsed as an ``ErrorInfo``.

        Returns:
            ErrorInfo instance, or None when the body carries no error fields
        """
        from .models import ErrorInfo

        if not self.response_data or not isinstance(self.response_data, dict):
            return None
        if not any(key in self.response_data for key in ("code", "message", "type")):
            return None
        return ErrorInfo.create(self.response_data)


class AuthenticationError(APIError):
    """Raised on HTTP 401 or when login fails."""


class PermissionDeniedError(APIError):
    """Raised on HTTP 403."""


class NotFoundError(APIError):
    """Raised on HTTP 404."""


class ValidationError(APIError):
    """Raised when the server rejects the request payload (HTTP 400/422)."""
