#!/usr/bin/env python3
"""
Simple example subscriber running on Flask.

Subscribe through the app itself:

    curl "http://localhost:3000/subscriptions/?mode=subscribe&id=1&hub=https://pubsubhubbub.superfeedr.com&topic=https://blog.example/feed"

The hub then calls back on /hubabuba. Set EXTERNAL_HOST to an address the
hub can reach.
"""

import logging
import os

from flask import Flask, request

from hubabuba import Subscriber
from hubabuba.integrations.flask_integration import FlaskIntegration
from hubabuba.logging_config import configure_development_logging

configure_development_logging()
logging.basicConfig()

push = Subscriber(
    url=f"http://{os.getenv('EXTERNAL_HOST', 'localhost')}:3000/hubabuba",
    defaults={"lease_seconds": 3600},
)

app = Flask(__name__)
FlaskIntegration(push, app)


@push.on("error")
def on_error(err):
    print(f"error: {err!r}")


@push.on("denied")
def on_denied(denied):
    print(f"denied: {denied}")


@push.on("notification")
def on_notification(notification):
    print(f"notification for {notification.id} from {notification.hub}")
    print(notification.request.text)


@app.route("/subscriptions/")
def subscriptions():
    """Start or stop a subscription from query parameters."""
    item = {
        "id": request.args.get("id"),
        "topic": request.args.get("topic"),
        "hub": request.args.get("hub"),
    }
    outcome = {}

    def handle_callback(err, sub_item):
        outcome["error"] = err

    if request.args.get("mode") == "subscribe":
        push.subscribe(item, handle_callback)
    else:
        push.unsubscribe(item, handle_callback)

    if outcome.get("error"):
        return f"error occurred: {outcome['error']}", 502
    return "successful"


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=3000, debug=True)
