"""
Protocol constants shared by the request builder and the callback handler.
"""

from enum import Enum


class Mode(str, Enum):
    """Values of the ``hub.mode`` parameter."""

    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    DENIED = "denied"


DEFAULT_CALLBACK_URL = "http://localhost:3000/hubabuba"
DEFAULT_LEASE_SECONDS = 86400  # 1 day

# (connect, read) in seconds
DEFAULT_TIMEOUT = (5, 20)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Query parameter names
PARAM_ID = "id"
PARAM_MODE = "hub.mode"
PARAM_TOPIC = "hub.topic"
PARAM_REASON = "hub.reason"
PARAM_CALLBACK = "hub.callback"
PARAM_LEASE_SECONDS = "hub.lease_seconds"
