"""Logger lookup for lexis modules.

Every lexis logger sits under the "lexis" namespace, so one call such as
``logging.getLogger("lexis").setLevel(logging.DEBUG)`` controls scanner,
source provider and CLI output together.

Example:
    >>> from lexis.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning Main.java")
"""

from __future__ import annotations

import logging

_ROOT = "lexis"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the lexis namespace.

    Names already inside the namespace (``lexis``, ``lexis.scanner.core``)
    are used as given; anything else is nested, so ``"plugin"`` becomes
    ``"lexis.plugin"``.

    Example:
        >>> get_logger("plugin").name
        'lexis.plugin'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
