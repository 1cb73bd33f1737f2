"""Android-specific message options.

Field names and semantics follow the ``AndroidConfig`` resource of the FCM
HTTP v1 API. Durations (``ttl``, ``vibrate_timings``, light durations) are
protobuf duration strings such as ``"3.5s"``; ``event_time`` is an RFC 3339
timestamp string.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .base import WireBlock
from .enums import AndroidMessagePriority, NotificationPriority, Visibility


@dataclass(frozen=True)
class Color(WireBlock):
    """RGBA color with components in the ``[0, 1]`` interval."""

    red: Optional[float] = None
    green: Optional[float] = None
    blue: Optional[float] = None
    alpha: Optional[float] = None


@dataclass(frozen=True)
class LightSettings(WireBlock):
    """LED blinking rate and color, for devices that have an LED."""

    color: Optional[Color] = None
    light_on_duration: Optional[str] = None
    light_off_duration: Optional[str] = None

    def __post_init__(self):
        self._check_block("color", Color)


@dataclass(frozen=True)
class AndroidNotification(WireBlock):
    """Notification options delivered to Android devices."""

    title: Optional[str] = None
    body: Optional[str] = None
    icon: Optional[str] = None
    # Icon color in #rrggbb format
    color: Optional[str] = None
    sound: Optional[str] = None
    # Replaces an existing notification with the same tag in the drawer
    tag: Optional[str] = None
    click_action: Optional[str] = None
    body_loc_key: Optional[str] = None
    body_loc_args: Optional[Sequence[str]] = None
    title_loc_key: Optional[str] = None
    title_loc_args: Optional[Sequence[str]] = None
    channel_id: Optional[str] = None
    # Text sent to accessibility services
    ticker: Optional[str] = None
    sticky: Optional[bool] = None
    event_time: Optional[str] = None
    local_only: Optional[bool] = None
    notification_priority: Optional[NotificationPriority] = None
    default_sound: Optional[bool] = None
    default_vibrate_timings: Optional[bool] = None
    default_light_settings: Optional[bool] = None
    vibrate_timings: Optional[Sequence[str]] = None
    visibility: Optional[Visibility] = None
    notification_count: Optional[int] = None
    light_settings: Optional[LightSettings] = None
    image: Optional[str] = None

    def __post_init__(self):
        self._coerce_enum("notification_priority", NotificationPriority)
        self._coerce_enum("visibility", Visibility)
        self._coerce_sequence("body_loc_args")
        self._coerce_sequence("title_loc_args")
        self._coerce_sequence("vibrate_timings")
        self._check_block("light_settings", LightSettings)


@dataclass(frozen=True)
class AndroidFcmOptions(WireBlock):
    """FCM SDK feature options for Android."""

    analytics_label: Optional[str] = None


@dataclass(frozen=True)
class AndroidConfig(WireBlock):
    """Android-specific options for messages sent through FCM."""

    # Identifies a group of messages that can be collapsed
    collapse_key: Optional[str] = None
    priority: Optional[AndroidMessagePriority] = None
    # How long the message is kept while the device is offline
    ttl: Optional[str] = None
    restricted_package_name: Optional[str] = None
    data: Optional[Mapping[str, str]] = None
    notification: Optional[AndroidNotification] = None
    fcm_options: Optional[AndroidFcmOptions] = None
    direct_boot_ok: Optional[bool] = None

    def __post_init__(self):
        self._coerce_enum("priority", AndroidMessagePriority)
        self._coerce_mapping("data")
        self._check_block("notification", AndroidNotification)
        self._check_block("fcm_options", AndroidFcmOptions)
