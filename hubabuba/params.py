"""
Helpers for extracting required query parameters and Link relations.
"""

from collections.abc import Iterable

from requests.utils import parse_header_links

from .callback_request import CallbackRequest
from .errors import ValidationError


def require_params(
    request: CallbackRequest,
    names: Iterable[str],
    message: str = "missing required query parameters",
) -> dict[str, str]:
    """Return the named query parameters, or raise listing the missing ones.

    A parameter counts as present when the key exists, even with an empty
    value.
    """
    values: dict[str, str] = {}
    missing: list[str] = []
    for name in names:
        value = request.get(name)
        if value is None:
            missing.append(name)
        else:
            values[name] = value
    if missing:
        raise ValidationError(message, item_id=request.get("id"), missing=missing)
    return values


def parse_link_relations(header: str | None) -> dict[str, str]:
    """Map each link relation in a ``Link`` header to its URI.

    ``<http://hub.example>; rel="hub", <http://blog.example/feed>; rel="self"``
    gives ``{"hub": "http://hub.example", "self": "http://blog.example/feed"}``.
    A ``rel`` with several space separated values registers the URI under
    each of them. The first link wins for a repeated relation.
    """
    relations: dict[str, str] = {}
    if not header:
        return relations
    for link in parse_header_links(header):
        url = link.get("url")
        if not url:
            continue
        for rel in link.get("rel", "").split():
            relations.setdefault(rel.lower(), url)
    return relations
