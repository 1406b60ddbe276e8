"""
Outbound (un)subscription requests.

The completion callback receives ``(error, item)``. ``error`` is None once the
hub answered at the transport level, which only means the request was
delivered: the subscription is confirmed or denied later through the callback
handler. Nothing here is retried.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote, urlencode, urlsplit

from .config import Config
from .constants import (
    FORM_CONTENT_TYPE,
    PARAM_CALLBACK,
    PARAM_LEASE_SECONDS,
    PARAM_MODE,
    PARAM_TOPIC,
    Mode,
)
from .errors import HubabubaError, ValidationError
from .subscription import SubscriptionItem
from .transport import HubRequest, Transport, transport_for_scheme

logger = logging.getLogger(__name__)

CompletionCallback = Callable[[HubabubaError | None, SubscriptionItem | None], Any]
ItemType = SubscriptionItem | Mapping[str, Any] | None


def _noop(err: HubabubaError | None, item: SubscriptionItem | None) -> None:
    pass


def _lease_seconds(value: Any, item_id: str | None) -> int:
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        seconds = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        seconds = int(value)
    else:
        seconds = 0
    if seconds <= 0:
        raise ValidationError("lease seconds must be a positive integer", item_id)
    return seconds


class RequestBuilder:
    """Builds and delivers subscription requests for one configuration."""

    def __init__(
        self,
        config: Config,
        transport_factory: Callable[..., Transport] = transport_for_scheme,
    ) -> None:
        self.config = config
        self.transport_factory = transport_factory

    def callback_url_for(self, item_id: str) -> str:
        """Callback URL registered with the hub, carrying the subscription id."""
        return self.config.url.rstrip("/") + "/?id=" + quote(str(item_id), safe="")

    def build(self, item: SubscriptionItem, mode: Mode | str) -> tuple[HubRequest, Transport]:
        """Validate ``item`` and build the hub request for ``mode``.

        Applies the default lease to the item when it has none.

        Raises:
            ValidationError: missing item, fields, malformed hub or invalid lease
            UnsupportedTransportError: hub scheme is not http or https
        """
        mode = Mode(mode)
        if mode not in (Mode.SUBSCRIBE, Mode.UNSUBSCRIBE):
            raise ValueError(f"Not a request mode: {mode.value}")
        if item is None:
            raise ValidationError("item not supplied")
        missing = item.missing_fields()
        if missing:
            raise ValidationError(
                "required params not supplied", item_id=item.id or None, missing=missing
            )
        try:
            scheme = urlsplit(str(item.hub)).scheme
        except ValueError as e:
            raise ValidationError("hub is not a valid URI", item_id=item.id) from e
        transport = self.transport_factory(
            scheme,
            timeout=self.config.timeout_tuple,
            verify_tls=self.config.verify_tls,
            item_id=item.id,
        )
        if item.lease_seconds is None or item.lease_seconds == "":
            item.lease_seconds = self.config.lease_seconds
        lease_seconds = _lease_seconds(item.lease_seconds, item.id)

        body = urlencode(
            [
                (PARAM_CALLBACK, self.callback_url_for(str(item.id))),
                (PARAM_MODE, mode.value),
                (PARAM_TOPIC, str(item.topic)),
                (PARAM_LEASE_SECONDS, str(lease_seconds)),
            ]
        )
        request = HubRequest(
            url=str(item.hub),
            body=body,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            item_id=item.id,
        )
        return request, transport

    @staticmethod
    def _as_item(item: ItemType) -> SubscriptionItem | None:
        if item is None or isinstance(item, SubscriptionItem):
            return item
        return SubscriptionItem.from_dict(item)

    def send_subscription_request(
        self,
        item: ItemType,
        mode: Mode | str,
        callback: CompletionCallback | None = None,
    ) -> "asyncio.Task[None] | None":
        """Send a (un)subscription request.

        Validation failures call ``callback`` before returning. Inside a
        running event loop delivery happens in a background task, which is
        returned. Without a loop, or with ``sync_requests`` set, the request
        is sent before returning.
        """
        callback = callback or _noop
        sub_item = self._as_item(item)
        try:
            request, transport = self.build(sub_item, mode)  # type: ignore[arg-type]
        except HubabubaError as e:
            logger.warning(f"Not sending {Mode(mode).value} request: {e!r}")
            callback(e, sub_item)
            return None

        if not self.config.sync_requests:
            try:
                loop = asyncio.get_running_loop()
                return loop.create_task(
                    self._deliver_async(transport, request, sub_item, callback)
                )
            except RuntimeError:
                logger.debug("No async loop, sending hub request synchronously")

        try:
            response = transport.send(request)
        except HubabubaError as e:
            callback(e, sub_item)
            return None
        self._log_response(request, response.status_code, response.accepted)
        callback(None, sub_item)
        return None

    async def _deliver_async(
        self,
        transport: Transport,
        request: HubRequest,
        item: SubscriptionItem | None,
        callback: CompletionCallback,
    ) -> None:
        err: HubabubaError | None = None
        try:
            response = await transport.send_async(request)
            self._log_response(request, response.status_code, response.accepted)
        except HubabubaError as e:
            err = e
        try:
            callback(err, item)
        except Exception as e:
            logger.error(f"Error in completion callback for {request.item_id}: {e}", exc_info=True)

    async def send_subscription_request_async(
        self,
        item: ItemType,
        mode: Mode | str,
        callback: CompletionCallback | None = None,
    ) -> tuple[HubabubaError | None, SubscriptionItem | None]:
        """Send a (un)subscription request and wait for delivery.

        Returns the ``(error, item)`` pair also passed to ``callback``.
        """
        callback = callback or _noop
        sub_item = self._as_item(item)
        err: HubabubaError | None = None
        try:
            request, transport = self.build(sub_item, mode)  # type: ignore[arg-type]
            response = await transport.send_async(request)
            self._log_response(request, response.status_code, response.accepted)
        except HubabubaError as e:
            err = e
        callback(err, sub_item)
        return err, sub_item

    @staticmethod
    def _log_response(request: HubRequest, status_code: int, accepted: bool) -> None:
        if accepted:
            logger.info(f"Hub {request.url} accepted request for {request.item_id} ({status_code})")
        else:
            logger.warning(
                f"Hub {request.url} answered {status_code} to request for {request.item_id}"
            )
