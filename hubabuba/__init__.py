"""
hubabuba: subscriber side of the WebSub (PubSubHubbub) protocol.
"""

__version__ = "1.0.0"

from .callback_request import CallbackRequest, CallbackResponse
from .config import Config
from .constants import Mode
from .errors import HubabubaError, TransportError, UnsupportedTransportError, ValidationError
from .events import CallbackEvent, Denied, Notification, Verified
from .hooks import EventRegistry, EventType
from .subscriber import Subscriber
from .subscription import SubscriptionItem

__all__ = [
    "__version__",
    "CallbackEvent",
    "CallbackRequest",
    "CallbackResponse",
    "Config",
    "Denied",
    "EventRegistry",
    "EventType",
    "HubabubaError",
    "Mode",
    "Notification",
    "Subscriber",
    "SubscriptionItem",
    "TransportError",
    "UnsupportedTransportError",
    "ValidationError",
    "Verified",
]
