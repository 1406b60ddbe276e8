"""Tests for the FastAPI integration."""

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hubabuba import Subscriber
from hubabuba.integrations.fastapi_integration import FastAPIIntegration

LINK = '<http://hub.example/>; rel="hub", <http://blog.example/feed>; rel="self"'


@pytest.fixture
def push() -> Subscriber:
    return Subscriber(url="http://testserver/hubabuba")


@pytest.fixture
def client(push):
    app = FastAPI()

    @app.get("/other")
    def other():
        return {"route": "other"}

    FastAPIIntegration(push, app)
    return TestClient(app)


class TestFastAPIIntegration:
    def test_denied_callback(self, push, client) -> None:
        denied = Mock()
        push.on("denied", denied)

        response = client.get(
            "/hubabuba",
            params={"id": "1", "hub.mode": "denied", "hub.topic": "T", "hub.reason": "R"},
        )

        assert response.status_code == 200
        assert response.content == b""
        assert denied.call_args.args[0].id == "1"

    def test_notification_callback(self, push, client) -> None:
        notification = Mock()
        push.on("notification", notification)

        response = client.post(
            "/hubabuba?id=3", content=b"<feed/>", headers={"Link": LINK}
        )

        assert response.status_code == 200
        event = notification.call_args.args[0]
        assert event.hub == "http://hub.example/"
        assert event.request.body == b"<feed/>"

    def test_other_routes_pass_through(self, push, client) -> None:
        listener = Mock()
        push.on("notification", listener)

        response = client.get("/other")

        assert response.json() == {"route": "other"}
        listener.assert_not_called()

    def test_missing_mode_gets_404(self, push, client) -> None:
        error = Mock()
        push.on("error", error)

        response = client.get("/hubabuba?id=1")

        assert response.status_code == 404
        assert error.call_args.args[0].message == "mode was not supplied"
