"""Pytest configuration and fixtures for fcm-client tests."""

import json
from typing import Dict, List, Mapping, Optional

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from fcm_client.client.protocols import TransportResponse
from fcm_client.config.settings import FcmSettings
from fcm_client.core.exceptions import ProjectIdError


class FakeCredentials:
    """Credential provider returning a fixed token and project id."""

    def __init__(self, token: str = "Bearer test-token", project_id: Optional[str] = "demo-project"):
        self.token = token
        self._project_id = project_id
        self.calls = 0
        self.closed = False

    async def access_token(self) -> str:
        self.calls += 1
        return self.token

    @property
    def project_id(self) -> str:
        if self._project_id is None:
            raise ProjectIdError("could not get project_id", error_code="PROJECT_ID_MISSING")
        return self._project_id

    async def close(self) -> None:
        self.closed = True


class RecordingTransport:
    """Transport that records requests and replays a canned response."""

    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b'{"name": "projects/demo-project/messages/0:1"}',
        headers: Optional[Mapping[str, str]] = None,
        error: Optional[Exception] = None,
    ):
        self.response = TransportResponse(status_code=status_code, headers=dict(headers or {}), body=body)
        self.error = error
        self.requests: List[Dict[str, object]] = []
        self.closed = False

    async def post(self, url: str, content: bytes, headers: Mapping[str, str]) -> TransportResponse:
        self.requests.append({"url": url, "content": content, "headers": dict(headers)})
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1]["content"])


@pytest.fixture(scope="session")
def private_key_pem() -> str:
    """Throwaway RSA key for signing token assertions."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("utf-8")


@pytest.fixture
def service_account_info(private_key_pem) -> dict:
    """Minimal service-account document."""
    return {
        "type": "service_account",
        "project_id": "demo-project",
        "private_key_id": "key-123",
        "private_key": private_key_pem,
        "client_email": "sender@demo-project.iam.gserviceaccount.com",
        "token_uri": "https://oauth2.example.test/token",
    }


@pytest.fixture
def service_account_file(tmp_path, service_account_info) -> str:
    """Service-account document written to disk."""
    path = tmp_path / "service-account.json"
    path.write_text(json.dumps(service_account_info), encoding="utf-8")
    return str(path)


@pytest.fixture
def settings(service_account_file) -> FcmSettings:
    """Settings pointing at the temporary service-account file."""
    return FcmSettings(credentials_path=service_account_file, _env_file=None)


@pytest.fixture
def fake_credentials() -> FakeCredentials:
    return FakeCredentials()


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_transport():
    """Factory for RecordingTransport with a custom canned response."""
    return RecordingTransport


@pytest.fixture
def make_credentials():
    """Factory for FakeCredentials with a custom token or project id."""
    return FakeCredentials
