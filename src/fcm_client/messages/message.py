"""The message envelope sent to FCM."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .android import AndroidConfig
from .apns import ApnsConfig
from .base import WireBlock
from .notification import FcmOptions, Notification
from .target import Target
from .webpush import WebpushConfig


@dataclass(frozen=True)
class Message:
    """A message addressed to one target, with optional per-platform overrides.

    Only ``target`` is required. Any block left as None is omitted from the
    wire payload entirely; FCM does not treat ``null`` the same as a missing
    key.

    Example:
        message = Message(
            target=Topic("news"),
            notification=Notification(title="Hello", body="World"),
            android=AndroidConfig(priority=AndroidMessagePriority.HIGH),
        )
    """

    target: Target
    data: Optional[Mapping[str, Any]] = None
    notification: Optional[Notification] = None
    android: Optional[AndroidConfig] = None
    webpush: Optional[WebpushConfig] = None
    apns: Optional[ApnsConfig] = None
    fcm_options: Optional[FcmOptions] = None

    _BLOCKS = (
        ("notification", Notification),
        ("android", AndroidConfig),
        ("webpush", WebpushConfig),
        ("apns", ApnsConfig),
        ("fcm_options", FcmOptions),
    )

    def __post_init__(self):
        if not isinstance(self.target, Target) or type(self.target) is Target:
            raise TypeError(
                "Message target must be a Token, Topic or Condition, "
                f"got: {type(self.target).__name__}"
            )
        if self.data is not None:
            if not isinstance(self.data, Mapping):
                raise TypeError(f"data must be a mapping, got: {type(self.data).__name__}")
            object.__setattr__(self, "data", dict(self.data))
        for name, block_type in self._BLOCKS:
            value = getattr(self, name)
            if value is not None and not isinstance(value, block_type):
                raise TypeError(
                    f"{name} must be a {block_type.__name__}, got: {type(value).__name__}"
                )

    def finalize(self) -> Dict[str, Any]:
        """Return the wire form of the message, target flattened in."""
        wire: Dict[str, Any] = {}
        if self.data is not None:
            wire["data"] = dict(self.data)
        for name, _ in self._BLOCKS:
            block: Optional[WireBlock] = getattr(self, name)
            if block is not None:
                wire[name] = block.finalize()
        wire.update(self.target.to_wire())
        return wire

    def to_payload(self, validate_only: bool = False) -> Dict[str, Any]:
        """Wrap the wire form under the ``message`` key expected by the API.

        With ``validate_only`` FCM checks the message without delivering it.
        """
        payload: Dict[str, Any] = {"message": self.finalize()}
        if validate_only:
            payload["validate_only"] = True
        return payload

    def to_json(self, validate_only: bool = False) -> bytes:
        """Serialize the request body as compact UTF-8 JSON."""
        return json.dumps(
            self.to_payload(validate_only=validate_only),
            separators=(",", ":"),
            ensure_ascii=False,
        ).encode("utf-8")
