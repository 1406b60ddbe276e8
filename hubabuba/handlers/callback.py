"""
Inbound hub callback handler.

Intercepts every request of the host pipeline. Requests to the registered
callback path are consumed and classified:

* ``POST`` is a content notification, emitted as
  :class:`~hubabuba.events.Notification` and answered with an empty 200.
* ``GET`` with ``hub.mode=denied`` is a denial, emitted as
  :class:`~hubabuba.events.Denied` and answered with an empty 200.
* ``GET`` with any other mode is a verification request. The challenge
  handshake is not implemented: nothing is emitted and nothing is written.

Malformed callbacks are reported on the ``error`` event only and are never
passed on to the host. Every other path is handed to ``proceed`` untouched.
"""

import logging
from collections.abc import Callable
from typing import Any

from hubabuba import request_context
from hubabuba.callback_request import CallbackRequest, CallbackResponse
from hubabuba.constants import PARAM_ID, PARAM_MODE, PARAM_REASON, PARAM_TOPIC, Mode
from hubabuba.errors import HubabubaError, ValidationError
from hubabuba.events import Denied, Notification
from hubabuba.handlers import base_handler
from hubabuba.hooks import EventType
from hubabuba.params import parse_link_relations, require_params

logger = logging.getLogger(__name__)

DENIED_PARAMS = (PARAM_ID, PARAM_TOPIC, PARAM_REASON)


class CallbackHandler(base_handler.BaseHandler):
    def __call__(
        self,
        request: CallbackRequest,
        response: CallbackResponse,
        proceed: Callable[[], Any],
    ) -> Any:
        return self.handle(request, response, proceed)

    def handle(
        self,
        request: CallbackRequest,
        response: CallbackResponse,
        proceed: Callable[[], Any],
    ) -> Any:
        """Handle one inbound request.

        Returns whatever ``proceed`` returns for a pass-through request,
        None for a consumed one.
        """
        if not self.matches(request):
            return proceed()

        request_context.set_request_context(
            request_id=request.headers.get("X-Request-ID"),
            subscription_id=request.get(PARAM_ID),
        )
        try:
            if request.query is None:
                self._emit_error(ValidationError("req.query is not defined"))
                return None
            if request.method == "POST":
                self.post(request, response)
            elif request.method == "GET":
                self.get(request, response)
            else:
                logger.debug(f"Unsupported method {request.method} on callback path")
                self._emit_error(
                    ValidationError("method is not supported", item_id=request.get(PARAM_ID))
                )
        finally:
            request_context.clear_request_context()
        return None

    def post(self, request: CallbackRequest, response: CallbackResponse) -> None:
        """Handles content notifications"""
        item_id = request.get(PARAM_ID)
        if item_id is None:
            self._emit_error(ValidationError("id was not supplied", missing=[PARAM_ID]))
            return
        links = parse_link_relations(request.headers.get("Link"))
        if "self" not in links or "hub" not in links:
            logger.debug(f"Notification for {item_id} without complete Link header")
        notification = Notification(
            id=item_id,
            topic=links.get("self"),
            hub=links.get("hub"),
            request=request,
        )
        logger.info(f"Notification for {item_id} on topic {notification.topic}")
        self._emit(EventType.NOTIFICATION, notification)
        self._respond_empty(response)

    def get(self, request: CallbackRequest, response: CallbackResponse) -> None:
        """Handles denials and verification requests"""
        mode = request.get(PARAM_MODE)
        if not mode:
            self._emit_error(
                ValidationError(
                    "mode was not supplied",
                    item_id=request.get(PARAM_ID),
                    missing=[PARAM_MODE],
                )
            )
            return
        if mode == Mode.DENIED.value:
            self._handle_denied(request, response)
            return
        logger.warning(
            f"Verification request hub.mode={mode} for {request.get(PARAM_ID)} "
            "is not handled, no answer is sent to the hub"
        )

    def _handle_denied(self, request: CallbackRequest, response: CallbackResponse) -> None:
        try:
            params = require_params(request, DENIED_PARAMS)
        except HubabubaError as e:
            self._emit_error(e)
            return
        denied = Denied(
            id=params[PARAM_ID],
            topic=params[PARAM_TOPIC],
            reason=params[PARAM_REASON],
        )
        logger.info(f"Subscription {denied.id} to {denied.topic} denied: {denied.reason}")
        self._emit(EventType.DENIED, denied)
        self._respond_empty(response)
