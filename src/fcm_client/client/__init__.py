"""
FCM HTTP v1 client.

Sending, credentials, transport and response classification.
"""

from .client import FcmClient
from .credentials import ServiceAccountCredentials
from .protocols import (
    CredentialProviderProtocol,
    HttpTransportProtocol,
    TransportResponse,
)
from .response import (
    RETRYABLE_REASONS,
    ErrorReason,
    FcmResponse,
    RetryAfter,
    RetryAfterDate,
    RetryAfterDelay,
    classify_response,
    get_header,
)
from .transport import HttpxTransport

__all__ = [
    # Client
    "FcmClient",
    # Credentials
    "ServiceAccountCredentials",
    # Protocols
    "CredentialProviderProtocol",
    "HttpTransportProtocol",
    "TransportResponse",
    # Response
    "RETRYABLE_REASONS",
    "ErrorReason",
    "FcmResponse",
    "RetryAfter",
    "RetryAfterDate",
    "RetryAfterDelay",
    "classify_response",
    "get_header",
    # Transport
    "HttpxTransport",
]
