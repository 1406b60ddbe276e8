"""
Subscription items passed to :meth:`Subscriber.subscribe` and
:meth:`Subscriber.unsubscribe`.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class SubscriptionItem:
    """One subscription attempt.

    The core keeps no record of items. The caller owns tracking of which ids
    are pending or active and uses ``id`` to correlate the events emitted by
    the callback handler.

    Attributes:
        id: Opaque caller supplied identifier, unique per subscription.
        hub: URI of the hub, http or https.
        topic: URI of the subscribed resource.
        lease_seconds: Proposed lease. Only advisory, the hub decides.
    """

    id: str | None = None
    hub: str | None = None
    topic: str | None = None
    lease_seconds: int | str | None = None

    REQUIRED_FIELDS = ("id", "hub", "topic")

    def missing_fields(self) -> list[str]:
        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SubscriptionItem":
        """Build an item from a plain mapping.

        Accepts ``lease_seconds`` as well as the camel cased ``leaseSeconds``.
        """
        lease = data.get("lease_seconds", data.get("leaseSeconds"))
        return cls(
            id=data.get("id"),
            hub=data.get("hub"),
            topic=data.get("topic"),
            lease_seconds=lease,
        )
