"""Package logging for ssmlite.

Every module logs through a child of the ``ssmlite`` logger. The package
root carries a NullHandler, so nothing is printed and no "no handlers"
warning appears unless the application configures logging itself:

    import logging
    logging.basicConfig()
    logging.getLogger("ssmlite").setLevel(logging.DEBUG)

Example:
    >>> from ssmlite.utils.logger import get_logger
    >>> get_logger("ssmlite.parser").name
    'ssmlite.parser'
"""

from __future__ import annotations

import logging

PACKAGE_LOGGER = "ssmlite"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the ``ssmlite`` child logger for ``name``.

    Module names inside the package (``__name__``) are used as-is; any other
    name is nested under the package logger.

    Example:
        >>> get_logger("mymodule").name
        'ssmlite.mymodule'
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
