"""Base exceptions for neo-uploads.

All exceptions raised by the upload pipeline inherit from NeoUploadsError and
carry an error code and structured details for logging and API responses.
"""

from typing import Any, Dict, Optional


class NeoUploadsError(Exception):
    """Base exception for all neo-uploads errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as _get_status_code
    return _get_status_code(exception)


def create_error_response(exception: NeoUploadsError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-uploads exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
