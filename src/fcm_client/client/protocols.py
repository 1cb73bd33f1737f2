"""
Protocol definitions for the FCM client.

The client depends on two external capabilities: something that mints
bearer tokens for a service account, and something that performs HTTP
requests. Both are expressed as protocols so tests and alternative
implementations can be swapped in.
"""
from dataclasses import dataclass, field
from typing import Mapping, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    """Status, headers and raw body of one HTTP exchange."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", "replace")


@runtime_checkable
class CredentialProviderProtocol(Protocol):
    """Protocol for service-account credential implementations.

    Implementations own their token cache. FcmClient adds no locking of its
    own, so concurrent sends through one client are only safe when
    ``access_token`` is safe to call concurrently.
    """

    async def access_token(self) -> str:
        """Return a current token prefixed by its scheme, e.g. ``"Bearer ya29..."``.

        Refreshes internally as needed. Raises AuthTokenError on failure.
        """
        ...

    @property
    def project_id(self) -> str:
        """Project identifier from the credential document.

        Raises ProjectIdError when it is missing or malformed.
        """
        ...


@runtime_checkable
class HttpTransportProtocol(Protocol):
    """Protocol for HTTP transport implementations."""

    async def post(
        self,
        url: str,
        content: bytes,
        headers: Mapping[str, str],
    ) -> TransportResponse:
        """Send one POST request and return the response without interpreting it."""
        ...

    async def close(self) -> None:
        """Release transport resources."""
        ...
