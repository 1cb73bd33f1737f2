"""Tests for the httpx transport."""

import httpx
import pytest

from fcm_client.client import HttpxTransport, TransportResponse


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestHttpxTransport:
    """Tests for HttpxTransport."""

    @pytest.mark.asyncio
    async def test_post_returns_raw_response(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(503, headers={"Retry-After": "10"}, content=b"busy")

        transport = HttpxTransport(client=mock_client(handler))
        response = await transport.post(
            "https://fcm.example.test/v1/projects/p/messages:send",
            content=b'{"message": {}}',
            headers={"Authorization": "Bearer t"},
        )

        assert isinstance(response, TransportResponse)
        assert response.status_code == 503
        assert response.body == b"busy"
        assert response.text == "busy"
        assert response.headers["retry-after"] == "10"
        assert seen[0].method == "POST"
        assert seen[0].content == b'{"message": {}}'
        assert seen[0].headers["authorization"] == "Bearer t"

    @pytest.mark.asyncio
    async def test_http_errors_propagate(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        transport = HttpxTransport(client=mock_client(handler))
        with pytest.raises(httpx.ConnectError):
            await transport.post("https://fcm.example.test/", content=b"{}", headers={})

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self):
        client = mock_client(lambda request: httpx.Response(200))
        transport = HttpxTransport(client=client)

        await transport.close()

        assert not client.is_closed
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_created_lazily_and_closed(self):
        transport = HttpxTransport(timeout=5.0, max_connections=4)
        assert transport._client is None

        client = await transport._get_client()
        assert client is await transport._get_client()

        await transport.close()
        assert client.is_closed
        assert transport._client is None
