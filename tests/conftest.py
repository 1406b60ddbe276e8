"""
Shared fixtures for hubabuba tests.
"""

from unittest.mock import Mock

import pytest

from hubabuba import Subscriber


@pytest.fixture
def subscriber() -> Subscriber:
    """Subscriber registered at the default callback URL (path /hubabuba)."""
    return Subscriber()


@pytest.fixture
def recorder(subscriber: Subscriber) -> dict[str, Mock]:
    """One Mock listener per emitted event type."""
    listeners = {name: Mock() for name in ("error", "notification", "denied")}
    for name, listener in listeners.items():
        subscriber.on(name, listener)
    return listeners
