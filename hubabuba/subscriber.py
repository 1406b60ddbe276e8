"""
Main Subscriber class tying configuration, listeners, the request builder and
the callback handler together.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .config import Config
from .constants import Mode
from .errors import HubabubaError
from .handlers.callback import CallbackHandler
from .hooks import EventRegistry, EventType
from .request_builder import CompletionCallback, ItemType, RequestBuilder
from .subscription import SubscriptionItem

logger = logging.getLogger(__name__)


class Subscriber:
    """
    WebSub subscriber.

    Example usage:

    .. code-block:: python

        push = Subscriber(
            url="http://www.myhost.com/hubabuba",
            defaults={"lease_seconds": 10000},
        )

        @push.on("notification")
        def handle_notification(notification):
            store(notification.id, notification.request.body)

        push.on("error", log_error).on("denied", mark_denied)

        push.subscribe(
            {"id": "52ab86db", "hub": "http://hub.example/", "topic": "http://blog.example/feed"},
            lambda err, item: ...,
        )

    The host pipeline calls ``push.handler()`` with ``(request, response,
    proceed)`` for every inbound request.
    """

    def __init__(
        self,
        url: str | None = None,
        verification: Callable[[Any], bool] | None = None,
        defaults: Mapping[str, Any] | None = None,
        *,
        config: Config | None = None,
        **options: Any,
    ):
        if config is None:
            values = dict(options)
            if url:
                values["url"] = url
            if verification is not None:
                values["verification"] = verification
            if defaults:
                lease = defaults.get("lease_seconds", defaults.get("leaseSeconds"))
                if lease is not None:
                    values["lease_seconds"] = lease
            config = Config(**values)
        self.config = config
        self.events = EventRegistry()
        self._builder = RequestBuilder(config)
        self._handler = CallbackHandler(config, self.events)
        logger.debug(f"Subscriber listening on {config.callback_path}")

    def on(self, event: EventType | str, func: Callable[[Any], Any] | None = None) -> Any:
        """Register a listener.

        With ``func`` returns the subscriber so calls can be chained, without
        it returns a decorator.
        """
        if func is None:

            def decorator(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
                self.events.register(event, f)
                return f

            return decorator
        self.events.register(event, func)
        return self

    def off(self, event: EventType | str, func: Callable[[Any], Any]) -> bool:
        return self.events.unregister(event, func)

    def handler(self) -> CallbackHandler:
        """The inbound request interceptor for the host pipeline."""
        return self._handler

    def verify(self, item: Any) -> bool:
        """Apply the configured verification predicate to ``item``."""
        return bool(self.config.verification(item))

    def subscribe(self, item: ItemType, callback: CompletionCallback | None = None) -> Any:
        """
        Ask the hub to subscribe ``item``.

        ``callback(None, item)`` only confirms that the request reached the
        hub. Confirmation or denial of the subscription arrives later on the
        callback handler.
        """
        return self._builder.send_subscription_request(item, Mode.SUBSCRIBE, callback)

    def unsubscribe(self, item: ItemType, callback: CompletionCallback | None = None) -> Any:
        """Ask the hub to unsubscribe ``item``, see :meth:`subscribe`."""
        return self._builder.send_subscription_request(item, Mode.UNSUBSCRIBE, callback)

    async def subscribe_async(
        self, item: ItemType, callback: CompletionCallback | None = None
    ) -> tuple[HubabubaError | None, SubscriptionItem | None]:
        return await self._builder.send_subscription_request_async(
            item, Mode.SUBSCRIBE, callback
        )

    async def unsubscribe_async(
        self, item: ItemType, callback: CompletionCallback | None = None
    ) -> tuple[HubabubaError | None, SubscriptionItem | None]:
        return await self._builder.send_subscription_request_async(
            item, Mode.UNSUBSCRIBE, callback
        )
