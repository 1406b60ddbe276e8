"""
Flask integration.

.. code-block:: python

    app = Flask(__name__)
    push = Subscriber(url="https://myhost.example/hubabuba")
    FlaskIntegration(push, app)
"""

import logging
from typing import TYPE_CHECKING

from flask import Flask, Response, request

from ..callback_request import CallbackRequest, CallbackResponse

if TYPE_CHECKING:
    from ..subscriber import Subscriber

logger = logging.getLogger(__name__)


class FlaskIntegration:
    """Runs the callback handler in front of every Flask route."""

    def __init__(self, subscriber: "Subscriber", flask_app: Flask) -> None:
        self.subscriber = subscriber
        self.flask_app = flask_app
        self.setup_routes()

    def setup_routes(self) -> None:
        self.flask_app.before_request(self._before_request)

    def _before_request(self) -> Response | None:
        cb_request = CallbackRequest(
            method=request.method,
            path=request.path,
            query=request.args.to_dict(),
            headers=dict(request.headers),
            body=request.get_data(),
        )
        cb_response = CallbackResponse()
        proceeded = False

        def proceed() -> None:
            nonlocal proceeded
            proceeded = True

        self.subscriber.handler()(cb_request, cb_response, proceed)
        if proceeded:
            # Flask continues with its own routing
            return None
        return to_flask_response(cb_response)


def to_flask_response(cb_response: CallbackResponse) -> Response:
    if not cb_response.written:
        # Consumed without an answer, a hub reads non-2xx as a refusal
        logger.debug("Callback consumed without a response, answering 404")
        return Response(status=404)
    return Response(
        cb_response.body,
        status=cb_response.status_code,
        headers=dict(cb_response.headers),
    )
