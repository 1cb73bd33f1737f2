"""Base exceptions for fcm-client.

Every error raised by the library inherits from FcmError and carries an
error code, structured details and a retryability flag so callers can
build their own retry policy.
"""

from typing import Any, Dict, Optional


class FcmError(Exception):
    """Base exception for all fcm-client errors."""

    retryable: bool = False

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

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Create a standardized error payload from the exception."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "type": self.__class__.__name__,
                "retryable": self.retryable,
            }
        }


def is_retryable(exception: BaseException) -> bool:
    """Return True when ``exception`` is an FcmError the caller may retry."""
    return isinstance(exception, FcmError) and exception.retryable
