"""Logging helpers for nhtml.

Library code only ever obtains loggers through ``get_logger``, which keeps
every logger under the ``nhtml`` namespace. Handlers are installed solely by
the command-line front end via ``configure_logging``.

Example:
    >>> from nhtml.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Transpiling document")
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

ROOT_LOGGER = "nhtml"

_CLI_FORMAT = "%(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name under the ``nhtml`` namespace.

    Example:
        >>> get_logger("mymodule").name
        'nhtml.mymodule'
    """
    if not (name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}.")):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def verbosity_to_level(verbosity: int) -> int:
    """Map a ``-v``/``-q`` count to a logging level.

    0 is INFO, positive values lower the threshold to DEBUG, negative values
    raise it to WARNING and then ERROR.
    """
    if verbosity > 0:
        return logging.DEBUG
    if verbosity == 0:
        return logging.INFO
    if verbosity == -1:
        return logging.WARNING
    return logging.ERROR


def configure_logging(verbosity: int = 0, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stream handler to the ``nhtml`` root logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        verbosity: Net count of ``-v`` minus ``-q`` flags
        stream: Destination for log records (stderr by default)

    Returns:
        The configured ``nhtml`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_CLI_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbosity))
    logger.propagate = False
    return logger
