"""
FastAPI integration.

.. code-block:: python

    app = FastAPI()
    push = Subscriber(url="https://myhost.example/hubabuba")
    FastAPIIntegration(push, app)
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import Response

from ..callback_request import CallbackRequest, CallbackResponse

if TYPE_CHECKING:
    from ..subscriber import Subscriber

logger = logging.getLogger(__name__)


class FastAPIIntegration:
    """Runs the callback handler as an HTTP middleware."""

    def __init__(self, subscriber: "Subscriber", fastapi_app: FastAPI) -> None:
        self.subscriber = subscriber
        self.fastapi_app = fastapi_app
        self.setup_routes()

    def setup_routes(self) -> None:
        self.fastapi_app.middleware("http")(self._middleware)

    async def _middleware(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        handler = self.subscriber.handler()
        cb_request = CallbackRequest(
            method=request.method,
            path=request.url.path,
            query=dict(request.query_params),
            headers=dict(request.headers),
        )
        if handler.matches(cb_request):
            cb_request.body = await request.body()
        cb_response = CallbackResponse()

        # proceed() hands back call_next's coroutine for pass-through requests
        result = handler(cb_request, cb_response, lambda: call_next(request))
        if result is not None:
            return await result
        if not cb_response.written:
            logger.debug("Callback consumed without a response, answering 404")
            return Response(status_code=404)
        return Response(
            content=cb_response.body,
            status_code=cb_response.status_code,
            headers=dict(cb_response.headers),
        )
