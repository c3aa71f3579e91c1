"""Centralized logging configuration for fsgraph.

All modules obtain their logger through :func:`get_logger`, which makes every
logger a child of the single package logger ``"fsgraph"``. Only that package
logger owns a handler; child loggers stay at ``NOTSET`` so one call to
:func:`set_global_log_level` changes the verbosity of the whole package.

The default handler writes to standard error. Standard output carries the
rendered graph produced by :func:`fsgraph.render.print_graph`, and that
output is compared byte for byte, so log records must never be mixed into
it. Traversal diagnostics are not logged above DEBUG either: they go to the
error sink passed to the builder, and the logger only mirrors them at DEBUG.

The package logger is configured when this module is imported, at INFO.
Applications that want their own handler call :func:`reset_logging` and then
:func:`setup_root_logger` with it.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "fsgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the package logger.

    Subsequent calls are no-ops until :func:`reset_logging` is called, so
    importing several fsgraph modules never stacks duplicate handlers. The
    package logger keeps propagating to the root logger, which lets an
    application or pytest capture fsgraph records as well.

    Args:
        level: Logging level for the package logger (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    # stdout carries print_graph output
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog hooks the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the package configuration.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.

    Returns:
        Logger instance with level NOTSET so the package level applies.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch every fsgraph logger to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch every fsgraph logger back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the configuration.

    The next call to :func:`get_logger` or :func:`setup_root_logger` installs
    a fresh handler. Tests use this to isolate logging state.
    """
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
