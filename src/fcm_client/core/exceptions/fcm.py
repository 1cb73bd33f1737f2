"""FCM send errors.

The taxonomy is closed: every failure of a send surfaces as exactly one of
these classes.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from .base import FcmError

if TYPE_CHECKING:
    from ...client.response import RetryAfter


class AuthTokenError(FcmError):
    """The credential capability could not produce a bearer token."""


class ProjectIdError(FcmError):
    """The credential document is unreadable, malformed or lacks ``project_id``."""


class UnauthorizedError(FcmError):
    """FCM answered 401; credentials must be refreshed before retrying."""

    def __init__(self, message: str = "Unauthorized", **kwargs):
        super().__init__(message, **kwargs)


class InvalidMessageError(FcmError):
    """The payload was rejected, the status was unexpected or the body was malformed."""


class ServerError(FcmError):
    """A transient failure on the FCM side; safe to retry.

    ``retry_after`` holds the parsed ``Retry-After`` hint, or None when the
    server gave none.
    """

    retryable = True

    def __init__(
        self,
        message: str = "FCM server error",
        retry_after: Optional["RetryAfter"] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if retry_after is not None:
            details.setdefault("retry_after_seconds", retry_after.delay_seconds())
        super().__init__(message, error_code=error_code, details=details)
        self.retry_after = retry_after
