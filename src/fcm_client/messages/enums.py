"""Enumerated wire values.

Member values are the exact tokens the FCM v1 API expects.
"""

from enum import Enum


class AndroidMessagePriority(str, Enum):
    """Delivery priority of an Android message."""
    NORMAL = "NORMAL"
    HIGH = "HIGH"


class NotificationPriority(str, Enum):
    """Relative priority of an Android notification in the drawer."""
    PRIORITY_UNSPECIFIED = "PRIORITY_UNSPECIFIED"
    PRIORITY_MIN = "PRIORITY_MIN"
    PRIORITY_LOW = "PRIORITY_LOW"
    PRIORITY_DEFAULT = "PRIORITY_DEFAULT"
    PRIORITY_HIGH = "PRIORITY_HIGH"
    PRIORITY_MAX = "PRIORITY_MAX"


class Visibility(str, Enum):
    """Lock-screen visibility of an Android notification."""
    VISIBILITY_UNSPECIFIED = "VISIBILITY_UNSPECIFIED"
    PRIVATE = "PRIVATE"
    PUBLIC = "PUBLIC"
    SECRET = "SECRET"
