"""Configuration for fcm-client.

Settings, constants and logging setup.
"""

from .constants import (
    CREDENTIALS_ENV_VAR,
    FcmEndpoints,
    HeaderNames,
    OAuthConstants,
)
from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    get_logger,
    setup_logging,
)
from .settings import FcmSettings, get_settings

__all__ = [
    # Constants
    "CREDENTIALS_ENV_VAR",
    "FcmEndpoints",
    "HeaderNames",
    "OAuthConstants",
    # Logging
    "LogFormat",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
    # Settings
    "FcmSettings",
    "get_settings",
]
