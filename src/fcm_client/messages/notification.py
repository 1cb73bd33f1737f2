"""Cross-platform notification and FCM options blocks."""

from dataclasses import dataclass
from typing import Optional

from .base import WireBlock


@dataclass(frozen=True)
class Notification(WireBlock):
    """Basic notification template used across all platforms."""

    title: Optional[str] = None
    body: Optional[str] = None
    # URL of an image to download and display in the notification
    image: Optional[str] = None


@dataclass(frozen=True)
class FcmOptions(WireBlock):
    """Platform-independent FCM SDK feature options."""

    analytics_label: Optional[str] = None
