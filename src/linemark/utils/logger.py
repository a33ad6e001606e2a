"""Logger lookup for linemark modules.

Every module logs through ``get_logger(__name__)`` so all output sits
under the ``linemark`` namespace. Processing only emits debug records for
structural events (front matter, block regions, tables) and a warning
when an until-close region never closes. No handlers are installed;
configure the ``linemark`` logger to see them.
"""

from __future__ import annotations

import logging

_ROOT = "linemark"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the linemark namespace.

    Args:
        name: Module name, usually ``__name__``; prefixed with
            ``linemark.`` unless already inside the namespace

    Example:
        >>> get_logger("linemark.processor.core").name
        'linemark.processor.core'
        >>> get_logger("mymodule").name
        'linemark.mymodule'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
