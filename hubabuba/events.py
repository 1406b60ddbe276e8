"""
Events produced by classifying inbound hub callbacks.

Each event is a small frozen dataclass carrying an ``event_type`` tag, so
listeners registered for several event types can dispatch on it.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Union

from .constants import Mode
from .hooks import EventType

if TYPE_CHECKING:
    from .callback_request import CallbackRequest


@dataclass(frozen=True)
class Denied:
    """The hub refused or revoked a subscription."""

    event_type: ClassVar[EventType] = EventType.DENIED

    id: str
    topic: str
    reason: str


@dataclass(frozen=True)
class Notification:
    """The hub delivered new content for a topic.

    ``request`` is the inbound request itself, the payload format is left to
    the listener.
    """

    event_type: ClassVar[EventType] = EventType.NOTIFICATION

    id: str
    topic: str | None
    hub: str | None
    request: "CallbackRequest" = field(repr=False)


@dataclass(frozen=True)
class Verified:
    """Confirmation of a (un)subscription by the hub.

    Not emitted: the challenge handshake is not implemented by the callback
    handler.
    """

    id: str
    mode: str
    challenge: str

    @property
    def event_type(self) -> EventType:
        if self.mode == Mode.UNSUBSCRIBE.value:
            return EventType.UNSUBSCRIBED
        return EventType.SUBSCRIBED


CallbackEvent = Union[Denied, Notification, Verified]
