"""Apple Push Notification service options."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .base import WireBlock


@dataclass(frozen=True)
class ApnsFcmOptions(WireBlock):
    """FCM SDK feature options for iOS."""

    analytics_label: Optional[str] = None
    image: Optional[str] = None


@dataclass(frozen=True)
class ApnsConfig(WireBlock):
    """APNs-specific options.

    ``headers`` are APNs request headers (``apns-priority``,
    ``apns-expiration`` ...) and ``payload`` is the raw APNs JSON payload,
    including the ``aps`` dictionary. Both are sent unchanged.
    """

    headers: Optional[Mapping[str, str]] = None
    payload: Optional[Mapping[str, Any]] = None
    fcm_options: Optional[ApnsFcmOptions] = None

    def __post_init__(self):
        self._coerce_mapping("headers")
        self._coerce_mapping("payload")
        self._check_block("fcm_options", ApnsFcmOptions)
