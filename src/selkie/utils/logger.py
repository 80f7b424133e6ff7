"""Logging for Selkie.

All Selkie loggers live under the ``selkie`` namespace. The namespace root
carries a NullHandler, so rejected parts and ignored JSON keys stay silent
unless the application configures logging:

    >>> import logging
    >>> logging.getLogger("selkie").setLevel(logging.DEBUG)
    >>> logging.basicConfig()
"""

from __future__ import annotations

import logging

ROOT = "selkie"

logging.getLogger(ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the Selkie logger for a module.

    Names outside the ``selkie`` namespace are nested under it, so
    ``get_logger("mymodule").name == "selkie.mymodule"``.
    """
    if name != ROOT and not name.startswith(f"{ROOT}."):
        name = f"{ROOT}.{name}"
    return logging.getLogger(name)
