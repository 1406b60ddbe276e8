from typing import Any

from hubabuba.callback_request import CallbackRequest, CallbackResponse
from hubabuba.config import Config
from hubabuba.errors import HubabubaError
from hubabuba.hooks import EventRegistry, EventType


class BaseHandler:

    def __init__(self, config: Config, events: EventRegistry) -> None:
        self.config = config
        self.events = events

    def matches(self, request: CallbackRequest) -> bool:
        """True if ``request`` is addressed to the registered callback path.

        Query strings are ignored, as is a trailing slash on either side.
        """
        path = request.effective_path.split("?", 1)[0]
        return _normalise(path) == _normalise(self.config.callback_path)

    def _emit(self, event_type: EventType, payload: Any) -> None:
        self.events.emit(event_type, payload)

    def _emit_error(self, error: HubabubaError) -> None:
        self.events.emit(EventType.ERROR, error)

    @staticmethod
    def _respond_empty(response: CallbackResponse, code: int = 200, message: str = "OK") -> None:
        response.set_status(code, message)


def _normalise(path: str) -> str:
    return path.rstrip("/") or "/"
