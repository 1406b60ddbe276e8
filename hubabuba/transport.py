"""
Transports delivering outbound requests to a hub.

A transport is picked per hub URI scheme with :func:`transport_for_scheme`.
Sync sends use ``requests``, async sends use ``httpx``. Both raise
:class:`~hubabuba.errors.TransportError` when no response was received.
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

import httpx
import requests

from .config import TimeoutType
from .constants import DEFAULT_TIMEOUT
from .errors import TransportError, UnsupportedTransportError

logger = logging.getLogger(__name__)


@dataclass
class HubRequest:
    """A form encoded POST to a hub."""

    url: str
    body: str
    headers: dict[str, str] = field(default_factory=dict)
    item_id: str | None = None


@dataclass
class HubResponse:
    status_code: int
    text: str = ""

    @property
    def accepted(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    scheme: str

    def send(self, request: HubRequest) -> HubResponse: ...

    async def send_async(self, request: HubRequest) -> HubResponse: ...


class PlainTransport:
    """Transport for ``http`` hubs."""

    scheme = "http"

    def __init__(self, timeout: TimeoutType = DEFAULT_TIMEOUT) -> None:
        if isinstance(timeout, tuple):
            self.timeout: tuple[int | float, int | float] = timeout
        else:
            self.timeout = (timeout, timeout)
        self._httpx_timeout = httpx.Timeout(
            timeout=float(self.timeout[1]),
            connect=float(self.timeout[0]),
            read=float(self.timeout[1]),
        )

    def _requests_options(self) -> dict:
        return {}

    def _httpx_options(self) -> dict:
        return {}

    def send(self, request: HubRequest) -> HubResponse:
        logger.debug(f"POST {request.url} body({request.body})")
        try:
            response = requests.post(
                url=request.url,
                data=request.body.encode("utf-8"),
                headers=request.headers,
                timeout=self.timeout,
                **self._requests_options(),
            )
        except requests.RequestException as e:
            logger.warning(f"No response from hub {request.url}: {e}")
            raise TransportError(str(e), request.item_id) from e
        return HubResponse(status_code=response.status_code, text=response.text)

    async def send_async(self, request: HubRequest) -> HubResponse:
        logger.debug(f"POST {request.url} body({request.body}) (async)")
        try:
            async with httpx.AsyncClient(
                timeout=self._httpx_timeout, **self._httpx_options()
            ) as client:
                response = await client.post(
                    request.url,
                    content=request.body.encode("utf-8"),
                    headers=request.headers,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"No response from hub {request.url}: {e}")
            raise TransportError(str(e) or type(e).__name__, request.item_id) from e
        return HubResponse(status_code=response.status_code, text=response.text)


class SecureTransport(PlainTransport):
    """Transport for ``https`` hubs."""

    scheme = "https"

    def __init__(self, timeout: TimeoutType = DEFAULT_TIMEOUT, verify: bool = True) -> None:
        super().__init__(timeout)
        self.verify = verify

    def _requests_options(self) -> dict:
        return {"verify": self.verify}

    def _httpx_options(self) -> dict:
        return {"verify": self.verify}


def transport_for_scheme(
    scheme: str,
    timeout: TimeoutType = DEFAULT_TIMEOUT,
    verify_tls: bool = True,
    item_id: str | None = None,
) -> Transport:
    """Return the transport for a URI scheme.

    Raises:
        UnsupportedTransportError: the scheme is neither http nor https
    """
    scheme = (scheme or "").lower()
    if scheme == PlainTransport.scheme:
        return PlainTransport(timeout)
    if scheme == SecureTransport.scheme:
        return SecureTransport(timeout, verify=verify_tls)
    raise UnsupportedTransportError("protocol of hub is not supported", item_id)
