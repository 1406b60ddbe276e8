"""
Listener registry for subscriber events.

Each :class:`Subscriber` owns one registry. Any number of listeners can be
registered per event type and they are called synchronously in registration
order.
"""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event types a listener can be registered for."""

    ERROR = "error"
    NOTIFICATION = "notification"
    DENIED = "denied"
    # Registrable, never emitted until the verification handshake exists
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"


class EventRegistry:
    """
    Registry for managing event listeners.

    Listeners receive a single argument: the event dataclass, or the
    :class:`~hubabuba.errors.HubabubaError` for ``error``.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventType, list[Callable[[Any], Any]]] = {
            event_type: [] for event_type in EventType
        }

    @staticmethod
    def _event_type(event: "EventType | str") -> EventType:
        if isinstance(event, EventType):
            return event
        try:
            return EventType(event)
        except ValueError:
            raise ValueError(f"Unknown event type: {event}") from None

    def register(self, event: "EventType | str", func: Callable[[Any], Any]) -> None:
        """
        Register a listener.

        Args:
            event: Event type or its name ("error", "notification", ...)
            func: Function with signature (event) -> Any
        """
        self._listeners[self._event_type(event)].append(func)

    def unregister(self, event: "EventType | str", func: Callable[[Any], Any]) -> bool:
        """Remove a listener, returns False if it was not registered."""
        listeners = self._listeners[self._event_type(event)]
        if func in listeners:
            listeners.remove(func)
            return True
        return False

    def has_listeners(self, event: "EventType | str") -> bool:
        return bool(self._listeners[self._event_type(event)])

    def listener_count(self, event: "EventType | str") -> int:
        return len(self._listeners[self._event_type(event)])

    def emit(self, event: "EventType | str", payload: Any) -> int:
        """Call every listener for ``event`` and return how many were called.

        A listener raising does not stop the remaining listeners.
        """
        event_type = self._event_type(event)
        listeners = list(self._listeners[event_type])
        for listener in listeners:
            try:
                listener(payload)
            except Exception as e:
                logger.error(f"Error in {event_type.value} listener: {e}", exc_info=True)
        if not listeners:
            logger.debug(f"No listeners for {event_type.value} event")
        return len(listeners)
