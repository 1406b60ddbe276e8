"""
Configuration for a hubabuba subscriber.
"""

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import SplitResult, urlsplit

from .constants import DEFAULT_CALLBACK_URL, DEFAULT_LEASE_SECONDS, DEFAULT_TIMEOUT

# Type alias for timeout parameter
TimeoutType = int | float | tuple[int | float, int | float]


def _accept_all(item: Any) -> bool:
    return True


@dataclass(frozen=True)
class Config:
    """Immutable subscriber configuration.

    Attributes:
        url: Callback URL registered with hubs. Its path is the path the
            callback handler intercepts.
        verification: Predicate ``(item) -> bool`` the caller can use to
            accept or reject confirmations. Defaults to accepting everything.
        lease_seconds: Lease proposed to the hub when an item has none. The
            hub decides the actual lease.
        timeout: Transport timeout for outbound requests, either a single
            value or a ``(connect, read)`` tuple.
        verify_tls: Verify certificates on https hubs.
        sync_requests: Always deliver outbound requests synchronously, even
            inside a running event loop (recommended for serverless hosts).
    """

    url: str = DEFAULT_CALLBACK_URL
    verification: Callable[[Any], bool] = _accept_all
    lease_seconds: int = DEFAULT_LEASE_SECONDS
    timeout: TimeoutType = DEFAULT_TIMEOUT
    verify_tls: bool = True
    sync_requests: bool = False
    callback_url: SplitResult = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Parsed once, the dataclass is frozen afterwards
        object.__setattr__(self, "callback_url", urlsplit(self.url))

    @property
    def callback_path(self) -> str:
        return self.callback_url.path or "/"

    @property
    def timeout_tuple(self) -> tuple[int | float, int | float]:
        if isinstance(self.timeout, tuple):
            return self.timeout
        return (self.timeout, self.timeout)

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a Config from ``HUBABUBA_*`` environment variables.

        Explicit keyword arguments win over the environment.
        """
        values: dict[str, Any] = {}
        url = os.getenv("HUBABUBA_CALLBACK_URL")
        if url:
            values["url"] = url
        lease = os.getenv("HUBABUBA_LEASE_SECONDS")
        if lease:
            values["lease_seconds"] = int(lease)
        sync = os.getenv("HUBABUBA_SYNC_REQUESTS")
        if sync:
            values["sync_requests"] = sync.lower() in ("1", "true", "yes")
        values.update(overrides)
        return cls(**values)
