"""Logging setup shared by the wgraph library and its command line.

Library modules call ``get_logger(__name__)``; their records flow to the
``wgraph`` logger, which owns a single stdout handler. The CLI maps its
``--verbose``/``--quiet`` flags onto that logger with ``configure_logging``.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "wgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks the handler installed here so repeated setup does not stack handlers
_HANDLER_TAG = "_wgraph_handler"


def _installed_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_TAG, False):
            return handler
    return None


def setup_root_logger(
    level: int = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
    force: bool = False,
) -> logging.Logger:
    """Attach the package handler to the ``wgraph`` logger.

    Does nothing when a handler is already installed, unless ``force`` is set,
    in which case the old handler is replaced.

    Args:
        level: Level for the ``wgraph`` logger.
        format_string: Record format for the handler.
        handler: Handler to install; defaults to a stdout stream handler.
        force: Replace a previously installed handler.

    Returns:
        The ``wgraph`` logger.
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    existing = _installed_handler(root_logger)
    if existing is not None:
        if not force:
            return root_logger
        root_logger.removeHandler(existing)

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    setattr(handler, _HANDLER_TAG, True)

    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    # pytest's caplog listens on the root logger
    root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` that defers its level to ``wgraph``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``wgraph`` logger and its installed handler."""
    root_logger = setup_root_logger()
    root_logger.setLevel(level)
    handler = _installed_handler(root_logger)
    if handler is not None:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Translate command-line verbosity flags into a logging level.

    ``verbose`` wins when both are given.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Apply command-line verbosity to all wgraph loggers.

    Returns:
        The level that was applied.
    """
    level = level_for_flags(verbose=verbose, quiet=quiet)
    set_global_log_level(level)
    return level


setup_root_logger()
