"""Request context management for logging correlation.

Keeps the id of the inbound callback being handled and the subscription id it
carries in contextvars, so log records emitted while a callback is handled
(including from listeners) can be correlated. Safe for threaded and async
hosts alike.
"""

import uuid
from contextvars import ContextVar
from typing import Any

_request_id: ContextVar[str | None] = ContextVar("hubabuba_request_id", default=None)
_subscription_id: ContextVar[str | None] = ContextVar(
    "hubabuba_subscription_id", default=None
)


def generate_request_id() -> str:
    """Generate a new UUID4 request ID."""
    return str(uuid.uuid4())


def get_short_request_id() -> str:
    """
    Get the last 8 characters of the request ID, or "-" if none is set.

    Example:
        >>> _ = set_request_context("550e8400-e29b-41d4-a716-446655440000")
        >>> get_short_request_id()
        '55440000'
    """
    request_id = _request_id.get()
    if request_id:
        return request_id.replace("-", "")[-8:]
    return "-"


def get_subscription_id() -> str | None:
    return _subscription_id.get()


def set_request_context(
    request_id: str | None = None,
    subscription_id: str | None = None,
    *,
    generate_id: bool = True,
) -> str:
    """
    Set all request context values at once.

    Args:
        request_id: The request ID, or None to generate a new one
        subscription_id: The ``id`` query parameter of the callback
        generate_id: If True and request_id is None, generate a new UUID

    Returns:
        The request ID that was set (either provided or generated)
    """
    if request_id is None and generate_id:
        request_id = generate_request_id()

    _request_id.set(request_id)
    _subscription_id.set(subscription_id)

    return request_id or ""


def clear_request_context() -> None:
    """Clear all request context values."""
    _request_id.set(None)
    _subscription_id.set(None)


def get_context_dict() -> dict[str, Any]:
    return {
        "request_id": _request_id.get(),
        "subscription_id": _subscription_id.get(),
    }


def format_context_compact() -> str:
    """
    Format context as ``[short_request_id:subscription_id]``.

    Missing values are represented as "-".

    Example:
        >>> clear_request_context()
        >>> format_context_compact()
        '[-:-]'
    """
    return f"[{get_short_request_id()}:{get_subscription_id() or '-'}]"
