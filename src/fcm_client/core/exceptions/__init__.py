"""Exception hierarchy for fcm-client."""

from .base import FcmError, is_retryable
from .fcm import (
    AuthTokenError,
    InvalidMessageError,
    ProjectIdError,
    ServerError,
    UnauthorizedError,
)

__all__ = [
    "FcmError",
    "is_retryable",
    "AuthTokenError",
    "InvalidMessageError",
    "ProjectIdError",
    "ServerError",
    "UnauthorizedError",
]
