"""Constants for fcm-client.

Endpoint templates, OAuth scopes and wire-level header names shared by the
client, credential and response modules.
"""

from typing import Final


class FcmEndpoints:
    """FCM HTTP v1 endpoint configuration."""

    DEFAULT_API_HOST: Final[str] = "fcm.googleapis.com"
    SEND_URL: Final[str] = "https://{api_host}/v1/projects/{project_id}/messages:send"


class OAuthConstants:
    """Service-account token exchange parameters."""

    MESSAGING_SCOPE: Final[str] = "https://www.googleapis.com/auth/firebase.messaging"
    DEFAULT_TOKEN_URI: Final[str] = "https://oauth2.googleapis.com/token"
    JWT_BEARER_GRANT_TYPE: Final[str] = "urn:ietf:params:oauth:grant-type:jwt-bearer"
    ASSERTION_ALGORITHM: Final[str] = "RS256"
    ASSERTION_LIFETIME_SECONDS: Final[int] = 3600
    DEFAULT_TOKEN_TYPE: Final[str] = "Bearer"


class HeaderNames:
    """HTTP header names used on the wire."""

    AUTHORIZATION: Final[str] = "Authorization"
    CONTENT_TYPE: Final[str] = "Content-Type"
    RETRY_AFTER: Final[str] = "Retry-After"
    JSON_CONTENT_TYPE: Final[str] = "application/json"


CREDENTIALS_ENV_VAR: Final[str] = "GOOGLE_APPLICATION_CREDENTIALS"
