"""Centralized logging configuration for hubabuba.

The library only creates module loggers under the ``hubabuba`` hierarchy and
never installs handlers on import. These helpers configure levels for its
subsystems with sensible defaults for different environments.
"""

import logging
from typing import Literal


def configure_hubabuba_logging(
    level: int = logging.INFO,
    *,
    handlers_level: int | None = None,
    transport_level: int | None = None,
) -> None:
    """
    Configure hubabuba logging.

    Args:
        level: Default level for all hubabuba loggers (default: INFO)
        handlers_level: Override for the inbound callback handler
        transport_level: Override for outbound hub requests (default: WARNING
            unless the main level is ERROR)

    Example:
        >>> import logging
        >>> from hubabuba.logging_config import configure_hubabuba_logging
        >>> configure_hubabuba_logging(logging.DEBUG)
    """
    logging.getLogger("hubabuba").setLevel(level)

    if handlers_level is not None:
        logging.getLogger("hubabuba.handlers").setLevel(handlers_level)

    if transport_level is not None:
        logging.getLogger("hubabuba.transport").setLevel(transport_level)
    else:
        # Request bodies are logged at DEBUG
        logging.getLogger("hubabuba.transport").setLevel(
            max(level, logging.WARNING) if level < logging.ERROR else level
        )

    _configure_third_party_loggers()


def _configure_third_party_loggers() -> None:
    noisy_libraries = [
        "urllib3",
        "urllib3.connectionpool",
        "requests",
        "httpx",
        "httpcore",
    ]

    for library in noisy_libraries:
        logging.getLogger(library).setLevel(logging.WARNING)


def configure_development_logging(*, verbose: bool = False) -> None:
    """
    Configure logging for development environments.

    Args:
        verbose: If True, enable DEBUG logging everywhere, request bodies
            included (default: False)
    """
    level = logging.DEBUG if verbose else logging.INFO
    configure_hubabuba_logging(
        level=level,
        transport_level=logging.DEBUG if verbose else logging.WARNING,
    )


def configure_testing_logging(*, debug: bool = False) -> None:
    """
    Configure logging for test environments, errors only unless ``debug``.

    Example:
        >>> import os
        >>> configure_testing_logging(debug=os.getenv("HUBABUBA_DEBUG") == "1")
    """
    if debug:
        configure_development_logging(verbose=True)
    else:
        configure_hubabuba_logging(logging.ERROR)


def get_context_format(
    *,
    include_timestamp: bool = True,
    include_context: bool = True,
    include_logger: bool = True,
    include_level: bool = True,
) -> str:
    """
    Generate a log format string with optional request context.

    Example:
        >>> get_context_format()
        '%(asctime)s %(context)s %(name)s:%(levelname)s: %(message)s'
        >>> get_context_format(include_timestamp=False, include_context=False)
        '%(name)s:%(levelname)s: %(message)s'
    """
    parts = []

    if include_timestamp:
        parts.append("%(asctime)s")

    if include_context:
        parts.append("%(context)s")

    logger_level = []
    if include_logger:
        logger_level.append("%(name)s")
    if include_level:
        logger_level.append("%(levelname)s")

    if logger_level:
        parts.append(":".join(logger_level))

    parts.append("%(message)s")

    return " ".join(parts)


def enable_request_context_filter(
    *,
    logger: str | logging.Logger = "hubabuba",
    structured: bool = False,
    handler_type: Literal["all", "stream", "file"] = "all",
) -> None:
    """
    Add request context filters to the handlers of ``logger``.

    Update the handlers' formats to include ``%(context)s`` (see
    :func:`get_context_format`) when ``structured`` is False.
    """
    from hubabuba.log_filter import RequestContextFilter, StructuredContextFilter

    if isinstance(logger, str):
        logger = logging.getLogger(logger)

    filter_class = StructuredContextFilter if structured else RequestContextFilter

    for handler in logger.handlers:
        # FileHandler inherits from StreamHandler
        if handler_type == "stream" and type(handler) is not logging.StreamHandler:
            continue
        if handler_type == "file" and not isinstance(handler, logging.FileHandler):
            continue

        handler.addFilter(filter_class())
