"""Logging setup for schema-messages.

Library code only ever asks for a logger. Handlers and levels are set up
by the host application, or through ``setup_logging`` for quick scripts.
"""

import logging
import sys

PACKAGE_LOGGER_NAME = "schema_messages"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger scoped under the package logger.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger with a stderr handler.

    Args:
        verbose: Log at DEBUG level
        quiet: Log at WARNING level only (wins over ``verbose``)
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in package_logger.handlers:
        if getattr(handler, "_schema_messages_handler", False):
            handler.setLevel(level)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    handler._schema_messages_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
