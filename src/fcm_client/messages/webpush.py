"""Webpush protocol options."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .base import WireBlock


@dataclass(frozen=True)
class WebpushFcmOptions(WireBlock):
    """FCM SDK feature options for the Web."""

    # HTTPS link opened when the user clicks the notification
    link: Optional[str] = None
    analytics_label: Optional[str] = None


@dataclass(frozen=True)
class WebpushConfig(WireBlock):
    """Webpush options.

    ``notification`` is a free-form JSON object holding Web Notification
    options; it is sent unchanged.
    """

    headers: Optional[Mapping[str, str]] = None
    data: Optional[Mapping[str, str]] = None
    notification: Optional[Mapping[str, Any]] = None
    fcm_options: Optional[WebpushFcmOptions] = None

    def __post_init__(self):
        self._coerce_mapping("headers")
        self._coerce_mapping("data")
        self._coerce_mapping("notification")
        self._check_block("fcm_options", WebpushFcmOptions)
