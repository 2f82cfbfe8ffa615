"""Package logging for gsearch.

All modules log through children of the ``gsearch`` logger, which owns one
stdout handler. The engine emits DEBUG records, the loader and CLI emit INFO,
and the CLI picks the level from its ``--verbose``/``--quiet`` flags.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "gsearch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the package handler to the ``gsearch`` logger.

    Only the first call has an effect until ``reset_logging`` is called.

    Args:
        level: Initial level of the package logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Handler to attach, a stdout ``StreamHandler`` when omitted.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Records still reach the root logger, where pytest's caplog listens
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a gsearch module, usually ``get_logger(__name__)``.

    The returned logger has no level of its own, so it follows whatever level
    ``set_global_log_level`` gives the package logger.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a level; ``verbose`` wins over ``quiet``."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Detach the package handler so the next setup starts clean."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
