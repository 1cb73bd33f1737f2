"""
Async client for the FCM HTTP v1 ``messages:send`` endpoint.

One call to :meth:`FcmClient.send` obtains a bearer token, resolves the
project id, POSTs the serialized message exactly once and classifies the
response. Nothing is retried here; errors carry a ``retryable`` flag and,
for server errors, the ``Retry-After`` hint so callers can schedule their
own retries.
"""
import logging
from typing import Optional

import httpx

from ..config.constants import HeaderNames
from ..config.settings import FcmSettings, get_settings
from ..core.exceptions import AuthTokenError, FcmError, ProjectIdError, ServerError
from ..messages import Message
from .credentials import ServiceAccountCredentials
from .protocols import CredentialProviderProtocol, HttpTransportProtocol
from .response import FcmResponse, classify_response
from .transport import HttpxTransport

logger = logging.getLogger(__name__)


class FcmClient:
    """
    FCM HTTP v1 client with protocol-based dependency injection.

    Example:
        async with FcmClient.from_settings() as client:
            response = await client.send(
                Message(target=Token(device_token), notification=Notification(title="Hi"))
            )
    """

    def __init__(
        self,
        credentials: CredentialProviderProtocol,
        transport: Optional[HttpTransportProtocol] = None,
        settings: Optional[FcmSettings] = None,
    ):
        """
        Initialize the client.

        Args:
            credentials: Bearer token and project id provider
            transport: HTTP transport (defaults to HttpxTransport built from settings)
            settings: Client settings (defaults to get_settings())
        """
        self.settings = settings or get_settings()
        self.credentials = credentials
        self.transport = transport or HttpxTransport(
            timeout=self.settings.timeout_seconds,
            max_connections=self.settings.max_connections,
            verify_ssl=self.settings.verify_ssl,
        )

    @classmethod
    def from_settings(cls, settings: Optional[FcmSettings] = None) -> "FcmClient":
        """Build a client whose credentials come from the configured service-account file."""
        settings = settings or get_settings()
        credentials = ServiceAccountCredentials.from_settings(settings)
        return cls(credentials, settings=settings)

    @classmethod
    async def connect(cls, settings: Optional[FcmSettings] = None) -> "FcmClient":
        """Build a client and fetch a first token so bad credentials fail early."""
        client = cls.from_settings(settings)
        try:
            await client._bearer_token()
        except FcmError:
            await client.close()
            raise
        return client

    async def _bearer_token(self) -> str:
        """Get a raw token with the scheme word stripped."""
        try:
            scheme_and_token = await self.credentials.access_token()
        except FcmError:
            raise
        except Exception as e:
            raise AuthTokenError(
                "could not get access token",
                details={"reason": str(e)},
            ) from e

        parts = scheme_and_token.split() if isinstance(scheme_and_token, str) else []
        if len(parts) < 2:
            raise AuthTokenError(
                "Credential provider returned a token without a scheme",
                error_code="TOKEN_MALFORMED",
            )
        return parts[1]

    def _project_id(self) -> str:
        try:
            return self.credentials.project_id
        except ProjectIdError:
            logger.error("Credential document has no usable project_id")
            raise
        except Exception as e:
            raise ProjectIdError(
                "could not get project_id",
                details={"reason": str(e)},
            ) from e

    async def send(self, message: Message, *, validate_only: bool = False) -> FcmResponse:
        """
        Send a message.

        Args:
            message: Message to send
            validate_only: Ask FCM to validate the message without delivering it

        Returns:
            The parsed FCM response

        Raises:
            AuthTokenError: No token could be obtained
            ProjectIdError: The credentials have no usable project id
            UnauthorizedError: FCM rejected the token
            InvalidMessageError: FCM rejected the message or answered unexpectedly
            ServerError: Transient FCM or network failure; safe to retry
        """
        payload = message.to_json(validate_only=validate_only)

        token = await self._bearer_token()
        project_id = self._project_id()
        url = self.settings.send_url(project_id)
        headers = {
            HeaderNames.CONTENT_TYPE: HeaderNames.JSON_CONTENT_TYPE,
            HeaderNames.AUTHORIZATION: f"Bearer {token}",
        }

        logger.debug(f"Sending FCM message to {message.target.key} in project {project_id}")
        try:
            response = await self.transport.post(url, content=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"FCM request failed before a response was received: {e}")
            raise ServerError(
                "FCM request failed",
                error_code="TRANSPORT_ERROR",
                details={"reason": str(e)},
            ) from e

        try:
            result = classify_response(response.status_code, response.headers, response.body)
        except ServerError as e:
            logger.warning(f"FCM server error: {e.message} (retry_after={e.retry_after})")
            raise

        logger.debug(f"FCM accepted message {result.name}")
        return result

    async def close(self) -> None:
        """Release the transport and any credential resources."""
        await self.transport.close()
        close_credentials = getattr(self.credentials, "close", None)
        if close_credentials is not None:
            await close_credentials()

    async def __aenter__(self) -> "FcmClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
