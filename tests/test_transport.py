"""Tests for hub transports."""

from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest
import requests

from hubabuba.errors import TransportError, UnsupportedTransportError
from hubabuba.transport import (
    HubRequest,
    HubResponse,
    PlainTransport,
    SecureTransport,
    transport_for_scheme,
)


def hub_request() -> HubRequest:
    return HubRequest(
        url="http://hub.example/hub",
        body="hub.mode=subscribe",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        item_id="1",
    )


class TestTransportSelection:
    """Transport picked by URI scheme."""

    def test_http_selects_plain_transport(self) -> None:
        transport = transport_for_scheme("http")
        assert type(transport) is PlainTransport

    def test_https_selects_secure_transport(self) -> None:
        transport = transport_for_scheme("HTTPS", verify_tls=False)
        assert isinstance(transport, SecureTransport)
        assert transport.verify is False

    def test_unknown_scheme_raises(self) -> None:
        with pytest.raises(UnsupportedTransportError) as exc_info:
            transport_for_scheme("ftp", item_id="1")
        assert exc_info.value.item_id == "1"

    def test_single_timeout_value(self) -> None:
        transport = transport_for_scheme("http", timeout=30)
        assert transport.timeout == (30, 30)
        assert transport._httpx_timeout.connect == 30.0


class TestSyncSend:
    """Sync sends through requests."""

    def test_send_returns_response(self) -> None:
        mock_response = Mock()
        mock_response.status_code = 202
        mock_response.text = "accepted"
        transport = PlainTransport(timeout=(3, 15))

        with patch(
            "hubabuba.transport.requests.post", return_value=mock_response
        ) as mock_post:
            response = transport.send(hub_request())

        assert response == HubResponse(status_code=202, text="accepted")
        assert response.accepted is True
        assert mock_post.call_args.kwargs["timeout"] == (3, 15)
        assert mock_post.call_args.kwargs["data"] == b"hub.mode=subscribe"

    def test_request_exception_becomes_transport_error(self) -> None:
        with patch(
            "hubabuba.transport.requests.post",
            side_effect=requests.Timeout("read timed out"),
        ):
            with pytest.raises(TransportError) as exc_info:
                PlainTransport().send(hub_request())

        assert exc_info.value.message == "read timed out"
        assert exc_info.value.item_id == "1"

    def test_secure_transport_passes_verify(self) -> None:
        mock_response = Mock(status_code=204, text="")
        with patch(
            "hubabuba.transport.requests.post", return_value=mock_response
        ) as mock_post:
            SecureTransport(verify=False).send(hub_request())

        assert mock_post.call_args.kwargs["verify"] is False


class TestAsyncSend:
    """Async sends through httpx."""

    @pytest.mark.asyncio
    async def test_send_async_returns_response(self) -> None:
        mock_client = AsyncMock()
        mock_client.post.return_value = Mock(status_code=202, text="")

        with patch("hubabuba.transport.httpx.AsyncClient") as client_cls:
            client_cls.return_value.__aenter__.return_value = mock_client
            response = await PlainTransport().send_async(hub_request())

        assert response.status_code == 202
        assert mock_client.post.call_args.args[0] == "http://hub.example/hub"
        assert mock_client.post.call_args.kwargs["content"] == b"hub.mode=subscribe"

    @pytest.mark.asyncio
    async def test_http_error_becomes_transport_error(self) -> None:
        mock_client = AsyncMock()
        mock_client.post.side_effect = httpx.ConnectError("connection refused")

        with patch("hubabuba.transport.httpx.AsyncClient") as client_cls:
            client_cls.return_value.__aenter__.return_value = mock_client
            with pytest.raises(TransportError) as exc_info:
                await PlainTransport().send_async(hub_request())

        assert exc_info.value.message == "connection refused"
        assert exc_info.value.item_id == "1"

    @pytest.mark.asyncio
    async def test_invalid_url_becomes_transport_error(self) -> None:
        """httpx.InvalidURL is not an httpx.HTTPError and is converted too."""
        mock_client = AsyncMock()
        mock_client.post.side_effect = httpx.InvalidURL(
            "Invalid non-printable ASCII character in URL"
        )

        with patch("hubabuba.transport.httpx.AsyncClient") as client_cls:
            client_cls.return_value.__aenter__.return_value = mock_client
            with pytest.raises(TransportError) as exc_info:
                await PlainTransport().send_async(hub_request())

        assert "non-printable" in exc_info.value.message
        assert exc_info.value.item_id == "1"

    @pytest.mark.asyncio
    async def test_control_character_in_hub_url(self) -> None:
        """httpx rejects the URL before any connection is attempted."""
        request = HubRequest(
            url="http://ho\x01st/hub",
            body="hub.mode=subscribe",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            item_id="1",
        )

        with pytest.raises(TransportError) as exc_info:
            await PlainTransport().send_async(request)

        assert exc_info.value.item_id == "1"

    @pytest.mark.asyncio
    async def test_secure_transport_configures_client(self) -> None:
        mock_client = AsyncMock()
        mock_client.post.return_value = Mock(status_code=202, text="")

        with patch("hubabuba.transport.httpx.AsyncClient") as client_cls:
            client_cls.return_value.__aenter__.return_value = mock_client
            await SecureTransport(verify=False).send_async(hub_request())

        assert client_cls.call_args.kwargs["verify"] is False
