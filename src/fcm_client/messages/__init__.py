"""
Message model for the FCM HTTP v1 API.

Immutable option blocks, the target union and the message envelope.
"""

from .android import (
    AndroidConfig,
    AndroidFcmOptions,
    AndroidNotification,
    Color,
    LightSettings,
)
from .apns import ApnsConfig, ApnsFcmOptions
from .base import WireBlock
from .enums import AndroidMessagePriority, NotificationPriority, Visibility
from .message import Message
from .notification import FcmOptions, Notification
from .target import Condition, Target, Token, Topic
from .webpush import WebpushConfig, WebpushFcmOptions

__all__ = [
    # Envelope
    "Message",
    # Target
    "Target",
    "Token",
    "Topic",
    "Condition",
    # Blocks
    "WireBlock",
    "Notification",
    "FcmOptions",
    "AndroidConfig",
    "AndroidNotification",
    "AndroidFcmOptions",
    "LightSettings",
    "Color",
    "WebpushConfig",
    "WebpushFcmOptions",
    "ApnsConfig",
    "ApnsFcmOptions",
    # Enums
    "AndroidMessagePriority",
    "NotificationPriority",
    "Visibility",
]
