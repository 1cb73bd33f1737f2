"""
Settings for the FCM client.

Values come from explicit arguments, environment variables or a ``.env``
file, in that order of precedence.
"""
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import CREDENTIALS_ENV_VAR, FcmEndpoints


class FcmSettings(BaseSettings):
    """Runtime configuration for :class:`~fcm_client.client.FcmClient`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Service account document
    credentials_path: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(CREDENTIALS_ENV_VAR, "credentials_path"),
    )

    # HTTP v1 endpoint
    api_host: str = Field(
        default=FcmEndpoints.DEFAULT_API_HOST,
        validation_alias=AliasChoices("FCM_API_HOST", "api_host"),
    )

    # Transport
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias=AliasChoices("FCM_TIMEOUT_SECONDS", "timeout_seconds"),
    )
    max_connections: int = Field(
        default=100,
        gt=0,
        validation_alias=AliasChoices("FCM_MAX_CONNECTIONS", "max_connections"),
    )
    verify_ssl: bool = Field(
        default=True,
        validation_alias=AliasChoices("FCM_VERIFY_SSL", "verify_ssl"),
    )

    # Seconds before expiry at which a cached access token is renewed
    token_refresh_threshold: int = Field(
        default=60,
        ge=0,
        validation_alias=AliasChoices("FCM_TOKEN_REFRESH_THRESHOLD", "token_refresh_threshold"),
    )

    @field_validator("api_host")
    @classmethod
    def strip_api_host(cls, v: str) -> str:
        """Accept hosts given with a scheme or trailing slash."""
        host = v.strip()
        for prefix in ("https://", "http://"):
            if host.startswith(prefix):
                host = host[len(prefix):]
        host = host.rstrip("/")
        if not host:
            raise ValueError("api_host must not be empty")
        return host

    @field_validator("credentials_path")
    @classmethod
    def blank_path_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    def send_url(self, project_id: str) -> str:
        """Build the ``messages:send`` URL for a project."""
        return FcmEndpoints.SEND_URL.format(api_host=self.api_host, project_id=project_id)


@lru_cache()
def get_settings() -> FcmSettings:
    """Get cached settings instance."""
    return FcmSettings()
