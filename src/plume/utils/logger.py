"""Logger lookup for Plume modules.

Every logger lives under the ``plume`` namespace, so applications can
tune the whole library with ``logging.getLogger("plume")``. The library
itself never adds handlers or sets levels.
"""

from __future__ import annotations

import logging

_ROOT = "plume"


def get_logger(name: str) -> logging.Logger:
    """Return the standard-library logger for a module.

    Names outside the ``plume`` namespace are moved under it.

    Example:
        >>> get_logger("plume.compiler").name
        'plume.compiler'
        >>> get_logger("helpers").name
        'plume.helpers'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
