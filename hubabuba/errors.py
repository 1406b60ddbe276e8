"""
Error types reported by hubabuba.

Outbound errors are handed to the completion callback of the call that caused
them, inbound errors are emitted on the ``error`` event. None of them are
raised across those boundaries.
"""

from collections.abc import Iterable


class HubabubaError(Exception):
    """Base error, optionally tagged with the subscription id it concerns."""

    def __init__(self, message: str, item_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.item_id = item_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, item_id={self.item_id!r})"


class ValidationError(HubabubaError):
    """A required field or query parameter is missing or malformed."""

    def __init__(
        self,
        message: str,
        item_id: str | None = None,
        missing: Iterable[str] = (),
    ) -> None:
        super().__init__(message, item_id)
        self.missing: tuple[str, ...] = tuple(missing)

    def __str__(self) -> str:
        if self.missing:
            return f"{self.message}: {', '.join(self.missing)}"
        return self.message


class UnsupportedTransportError(HubabubaError):
    """The hub URI uses a scheme other than http or https."""


class TransportError(HubabubaError):
    """The outbound request could not be delivered to the hub."""
