"""Logging filters for request context injection.

Adds the callback request context (request ID, subscription ID) to log
records without changing existing log statements.
"""

import logging

from hubabuba import request_context


class RequestContextFilter(logging.Filter):
    """
    Logging filter that adds a ``context`` attribute formatted as
    ``[req_id:subscription_id]``.

    Usage:
        >>> handler = logging.StreamHandler()
        >>> handler.addFilter(RequestContextFilter())
        >>> handler.setFormatter(logging.Formatter(
        ...     "%(asctime)s %(context)s %(name)s:%(levelname)s: %(message)s"
        ... ))
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = request_context.format_context_compact()  # type: ignore[attr-defined]
        return True


class StructuredContextFilter(logging.Filter):
    """
    Logging filter that adds ``request_id`` and ``subscription_id`` as
    separate record attributes, for JSON formatters.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        context = request_context.get_context_dict()
        record.request_id = context["request_id"]  # type: ignore[attr-defined]
        record.subscription_id = context["subscription_id"]  # type: ignore[attr-defined]
        return True
