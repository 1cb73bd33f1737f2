"""
Response interpretation for FCM send requests.

Turns an HTTP status, header set and body into either an FcmResponse or
one of the typed errors in :mod:`fcm_client.core.exceptions`. FCM may
report a retryable failure inside a 200 body, so a successful status is
not enough to declare success.
"""
import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from enum import Enum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..config.constants import HeaderNames
from ..core.exceptions import (
    InvalidMessageError,
    ServerError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)


class ErrorReason(str, Enum):
    """Error codes FCM can embed in a response body.

    Unknown codes map to UNSPECIFIED_ERROR so that a new server-side code
    never turns a delivered message into a parse failure.
    """
    UNSPECIFIED_ERROR = "UNSPECIFIED_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNREGISTERED = "UNREGISTERED"
    SENDER_ID_MISMATCH = "SENDER_ID_MISMATCH"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    UNAVAILABLE = "UNAVAILABLE"
    INTERNAL = "INTERNAL"
    THIRD_PARTY_AUTH_ERROR = "THIRD_PARTY_AUTH_ERROR"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ErrorReason"]:
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
            return cls.UNSPECIFIED_ERROR
        return None


# Embedded reasons that mean "the server failed, try again"
RETRYABLE_REASONS = frozenset({ErrorReason.UNAVAILABLE, ErrorReason.INTERNAL})


class FcmResponse(BaseModel):
    """Body of a successful send.

    ``name`` is the message resource name, e.g. ``projects/p/messages/0:123``.
    Unrecognized fields are kept so callers can inspect them.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: Optional[str] = None
    error: Optional[ErrorReason] = None

    @field_validator("error", mode="before")
    @classmethod
    def parse_error_reason(cls, v: Any) -> Optional[ErrorReason]:
        if v is None or isinstance(v, ErrorReason):
            return v
        if not isinstance(v, str):
            raise ValueError(f"error must be a string reason, got: {type(v).__name__}")
        return ErrorReason(v)

    @property
    def message_id(self) -> Optional[str]:
        """Trailing segment of ``name``."""
        if not self.name:
            return None
        return self.name.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class RetryAfter(ABC):
    """A parsed ``Retry-After`` hint: either RetryAfterDelay or RetryAfterDate."""

    @abstractmethod
    def delay_seconds(self, now: Optional[datetime] = None) -> float:
        """Seconds to wait from ``now`` (defaults to the current UTC time)."""

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["RetryAfter"]:
        """Parse a header value in delta-seconds or HTTP-date form.

        Returns None for a missing or unparseable value.
        """
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None

        if value.isascii() and value.isdigit():
            try:
                return RetryAfterDelay(timedelta(seconds=int(value)))
            except (ValueError, OverflowError):
                logger.debug(f"Ignoring out-of-range Retry-After header: {value[:32]!r}")
                return None

        try:
            at = parsedate_to_datetime(value)
        except (TypeError, ValueError, IndexError):
            at = None
        if at is None:
            logger.debug(f"Ignoring unparseable Retry-After header: {value!r}")
            return None
        if at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)
        return RetryAfterDate(at)


@dataclass(frozen=True)
class RetryAfterDelay(RetryAfter):
    """Retry after a fixed delay."""

    delay: timedelta

    def delay_seconds(self, now: Optional[datetime] = None) -> float:
        return max(self.delay.total_seconds(), 0.0)


@dataclass(frozen=True)
class RetryAfterDate(RetryAfter):
    """Retry at or after an absolute time."""

    at: datetime

    def delay_seconds(self, now: Optional[datetime] = None) -> float:
        now = now or datetime.now(timezone.utc)
        return max((self.at - now).total_seconds(), 0.0)


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """Case-insensitive header lookup over any mapping."""
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


def _body_text(body: Union[str, bytes, None]) -> str:
    if body is None:
        return ""
    if isinstance(body, bytes):
        return body.decode("utf-8", "replace")
    return body


def classify_response(
    status_code: int,
    headers: Mapping[str, str],
    body: Union[str, bytes, None],
) -> FcmResponse:
    """Interpret an FCM HTTP response.

    Returns:
        The parsed FcmResponse on success.

    Raises:
        ServerError: 5xx, or a 200 whose body reports UNAVAILABLE/INTERNAL.
        UnauthorizedError: 401.
        InvalidMessageError: 400, a malformed 200 body, or any other status.
    """
    retry_after = RetryAfter.parse(get_header(headers, HeaderNames.RETRY_AFTER))

    if status_code == 200:
        try:
            parsed = json.loads(body or b"")
            fcm_response = FcmResponse.model_validate(parsed)
        except (ValueError, ValidationError) as exc:
            raise InvalidMessageError(
                "Malformed response body from FCM",
                error_code="MALFORMED_RESPONSE",
                details={"status_code": status_code, "body": _body_text(body)},
            ) from exc

        if fcm_response.error in RETRYABLE_REASONS:
            raise ServerError(
                f"FCM reported {fcm_response.error.value}",
                retry_after=retry_after,
                details={"status_code": status_code, "reason": fcm_response.error.value},
            )
        return fcm_response

    if status_code == 401:
        raise UnauthorizedError(details={"status_code": status_code})

    if status_code == 400:
        raise InvalidMessageError(
            _body_text(body),
            error_code="BAD_REQUEST",
            details={"status_code": status_code},
        )

    if 500 <= status_code < 600:
        raise ServerError(
            f"FCM server error (status={status_code})",
            retry_after=retry_after,
            details={"status_code": status_code},
        )

    raise InvalidMessageError(
        "Unknown Error",
        error_code="UNKNOWN_STATUS",
        details={"status_code": status_code, "body": _body_text(body)},
    )
