"""fcm-client - async client for the Firebase Cloud Messaging HTTP v1 API.

Build a typed Message, send it with FcmClient, and get back either an
FcmResponse or one of a small set of typed errors that say whether the
send is worth retrying.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import FcmSettings, get_settings

from .core.exceptions import (
    AuthTokenError,
    FcmError,
    InvalidMessageError,
    ProjectIdError,
    ServerError,
    UnauthorizedError,
    is_retryable,
)

from .messages import (
    AndroidConfig,
    AndroidFcmOptions,
    AndroidMessagePriority,
    AndroidNotification,
    ApnsConfig,
    ApnsFcmOptions,
    Color,
    Condition,
    FcmOptions,
    LightSettings,
    Message,
    Notification,
    NotificationPriority,
    Target,
    Token,
    Topic,
    Visibility,
    WebpushConfig,
    WebpushFcmOptions,
)

from .client import (
    CredentialProviderProtocol,
    ErrorReason,
    FcmClient,
    FcmResponse,
    HttpTransportProtocol,
    HttpxTransport,
    RetryAfter,
    RetryAfterDate,
    RetryAfterDelay,
    ServiceAccountCredentials,
    TransportResponse,
    classify_response,
)

__all__ = [
    "__version__",
    # Configuration
    "FcmSettings",
    "get_settings",
    # Exceptions
    "FcmError",
    "AuthTokenError",
    "ProjectIdError",
    "UnauthorizedError",
    "InvalidMessageError",
    "ServerError",
    "is_retryable",
    # Messages
    "Message",
    "Target",
    "Token",
    "Topic",
    "Condition",
    "Notification",
    "FcmOptions",
    "AndroidConfig",
    "AndroidNotification",
    "AndroidFcmOptions",
    "AndroidMessagePriority",
    "NotificationPriority",
    "Visibility",
    "LightSettings",
    "Color",
    "WebpushConfig",
    "WebpushFcmOptions",
    "ApnsConfig",
    "ApnsFcmOptions",
    # Client
    "FcmClient",
    "FcmResponse",
    "ErrorReason",
    "RetryAfter",
    "RetryAfterDelay",
    "RetryAfterDate",
    "classify_response",
    "ServiceAccountCredentials",
    "CredentialProviderProtocol",
    "HttpTransportProtocol",
    "HttpxTransport",
    "TransportResponse",
]
