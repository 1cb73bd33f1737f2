"""
httpx-backed HTTP transport.

Provides connection pooling, timeouts and proper resource management. The
transport never interprets status codes; that is the response classifier's
job.
"""
import logging
from typing import Mapping, Optional

import httpx

from .protocols import HttpTransportProtocol, TransportResponse

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransportProtocol):
    """HTTP transport implementation using httpx with async support."""

    def __init__(
        self,
        timeout: float = 30.0,
        max_connections: int = 100,
        verify_ssl: bool = True,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            max_connections: Connection pool size
            verify_ssl: Whether to verify TLS certificates
            client: Preconfigured client to use instead of creating one
        """
        self.timeout = timeout
        self.max_connections = max_connections
        self.verify_ssl = verify_ssl
        self._client = client
        self._owns_client = client is None

        logger.debug(
            f"HttpxTransport initialized: timeout={timeout}s, "
            f"max_connections={max_connections}, verify_ssl={verify_ssl}"
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create httpx client."""
        if self._client is None:
            limits = httpx.Limits(
                max_connections=self.max_connections,
                max_keepalive_connections=max(self.max_connections // 2, 1),
            )

            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                limits=limits,
                verify=self.verify_ssl,
            )
            self._owns_client = True
            logger.debug("Created new httpx AsyncClient")

        return self._client

    async def post(
        self,
        url: str,
        content: bytes,
        headers: Mapping[str, str],
    ) -> TransportResponse:
        """Make POST request."""
        client = await self._get_client()

        try:
            response = await client.post(url, content=content, headers=dict(headers))
        except httpx.HTTPError as e:
            logger.error(f"HTTP POST error for {url}: {e}")
            raise

        return TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.content,
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
