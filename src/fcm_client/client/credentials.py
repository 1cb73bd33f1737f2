"""
Service-account credentials for the FCM HTTP v1 API.

Reads a Google service-account JSON document, exposes its ``project_id``
and mints OAuth2 access tokens with the JWT-bearer grant: an RS256-signed
assertion is exchanged at the document's ``token_uri`` for a short-lived
token, which is cached until shortly before it expires.
"""
import asyncio
import json
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

import httpx
from jose import jwt
from jose.exceptions import JOSEError

from ..config.constants import OAuthConstants
from ..config.settings import FcmSettings
from ..core.exceptions import AuthTokenError, ProjectIdError
from .protocols import CredentialProviderProtocol

logger = logging.getLogger(__name__)


class ServiceAccountCredentials(CredentialProviderProtocol):
    """Token provider backed by a service-account document.

    Token refresh is serialized with an ``asyncio.Lock`` so concurrent
    sends on one event loop trigger a single token exchange.
    """

    def __init__(
        self,
        info: Mapping[str, Any],
        *,
        scopes: Optional[Sequence[str]] = None,
        refresh_threshold: int = 60,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize credentials from a parsed service-account document.

        Args:
            info: Parsed service-account JSON
            scopes: OAuth scopes to request (defaults to the messaging scope)
            refresh_threshold: Seconds before expiry at which the token is renewed
            timeout: Token endpoint request timeout in seconds
            http_client: Client used for the token exchange
            clock: Time source returning epoch seconds
        """
        self._info: Dict[str, Any] = dict(info)
        self._scopes = tuple(scopes or (OAuthConstants.MESSAGING_SCOPE,))
        self._refresh_threshold = refresh_threshold
        self._timeout = timeout
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._clock = clock

        self._token: Optional[str] = None
        self._token_type: str = OAuthConstants.DEFAULT_TOKEN_TYPE
        self._expires_at: float = 0.0
        self._lock = asyncio.Lock()

    @classmethod
    def from_file(cls, path: str, **kwargs) -> "ServiceAccountCredentials":
        """Load credentials from a service-account JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as fp:
                raw = fp.read()
        except OSError as e:
            logger.error(f"Cannot read credentials file {path}: {e}")
            raise ProjectIdError(
                f"Cannot read credentials file: {path}",
                error_code="CREDENTIALS_UNREADABLE",
                details={"path": path, "reason": str(e)},
            ) from e

        try:
            info = json.loads(raw)
        except ValueError as e:
            logger.error(f"Credentials file {path} is not valid JSON")
            raise ProjectIdError(
                f"Credentials file is not valid JSON: {path}",
                error_code="CREDENTIALS_MALFORMED",
                details={"path": path, "reason": str(e)},
            ) from e

        if not isinstance(info, dict):
            raise ProjectIdError(
                f"Credentials file must contain a JSON object: {path}",
                error_code="CREDENTIALS_MALFORMED",
                details={"path": path},
            )

        return cls(info, **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: FcmSettings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "ServiceAccountCredentials":
        """Load credentials from the file named in settings."""
        if not settings.credentials_path:
            raise ProjectIdError(
                "No service-account credentials configured; "
                "set GOOGLE_APPLICATION_CREDENTIALS",
                error_code="CREDENTIALS_PATH_MISSING",
            )
        return cls.from_file(
            settings.credentials_path,
            refresh_threshold=settings.token_refresh_threshold,
            timeout=settings.timeout_seconds,
            http_client=http_client,
        )

    @property
    def project_id(self) -> str:
        """Project identifier from the credential document."""
        project_id = self._info.get("project_id")
        if not isinstance(project_id, str) or not project_id.strip():
            raise ProjectIdError(
                "could not get project_id",
                error_code="PROJECT_ID_MISSING",
            )
        return project_id

    @property
    def client_email(self) -> Optional[str]:
        return self._info.get("client_email")

    @property
    def token_uri(self) -> str:
        return self._info.get("token_uri") or OAuthConstants.DEFAULT_TOKEN_URI

    @property
    def token_valid(self) -> bool:
        """Whether the cached token can still be used."""
        if self._token is None:
            return False
        return self._clock() < self._expires_at - self._refresh_threshold

    async def access_token(self) -> str:
        """Return ``"<type> <token>"``, refreshing the cached token if needed."""
        async with self._lock:
            if not self.token_valid:
                await self._refresh()
            return f"{self._token_type} {self._token}"

    def _build_assertion(self, now: int) -> str:
        client_email = self._info.get("client_email")
        private_key = self._info.get("private_key")
        if not client_email or not private_key:
            raise AuthTokenError(
                "Service account is missing client_email or private_key",
                error_code="CREDENTIALS_INCOMPLETE",
            )

        claims = {
            "iss": client_email,
            "scope": " ".join(self._scopes),
            "aud": self.token_uri,
            "iat": now,
            "exp": now + OAuthConstants.ASSERTION_LIFETIME_SECONDS,
        }
        headers = {}
        if self._info.get("private_key_id"):
            headers["kid"] = self._info["private_key_id"]

        try:
            return jwt.encode(
                claims,
                private_key,
                algorithm=OAuthConstants.ASSERTION_ALGORITHM,
                headers=headers or None,
            )
        except (JOSEError, ValueError, TypeError) as e:
            raise AuthTokenError(
                "Failed to sign token assertion",
                error_code="ASSERTION_SIGNING_FAILED",
                details={"reason": str(e)},
            ) from e

    async def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            self._owns_http_client = True
        return self._http_client

    async def _refresh(self) -> None:
        now = int(self._clock())
        assertion = self._build_assertion(now)
        client = await self._get_http_client()

        logger.debug(f"Requesting access token for {self.client_email} from {self.token_uri}")
        try:
            response = await client.post(
                self.token_uri,
                data={
                    "grant_type": OAuthConstants.JWT_BEARER_GRANT_TYPE,
                    "assertion": assertion,
                },
            )
        except httpx.HTTPError as e:
            logger.warning(f"Token endpoint unreachable: {e}")
            raise AuthTokenError(
                "could not get access token",
                error_code="TOKEN_ENDPOINT_UNREACHABLE",
                details={"reason": str(e)},
            ) from e

        if response.status_code != 200:
            raise AuthTokenError(
                f"Token exchange failed (status={response.status_code})",
                error_code="TOKEN_EXCHANGE_FAILED",
                details={"status_code": response.status_code, "body": response.text},
            )

        try:
            payload = response.json()
            token = payload["access_token"]
            expires_in = int(payload.get("expires_in", OAuthConstants.ASSERTION_LIFETIME_SECONDS))
        except (ValueError, KeyError, TypeError) as e:
            raise AuthTokenError(
                "Token endpoint returned an unexpected body",
                error_code="TOKEN_RESPONSE_MALFORMED",
            ) from e

        if not isinstance(token, str) or not token:
            raise AuthTokenError(
                "Token endpoint returned an empty access token",
                error_code="TOKEN_RESPONSE_MALFORMED",
            )

        self._token = token
        self._token_type = payload.get("token_type") or OAuthConstants.DEFAULT_TOKEN_TYPE
        self._expires_at = now + expires_in
        logger.debug(f"Access token refreshed, expires in {expires_in}s")

    async def close(self) -> None:
        """Close the token endpoint client if this instance created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
        self._http_client = None
