"""Logger lookup for the docfx exporter.

The exporter only emits records; installing handlers is left to the
application embedding it.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "docfx"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the docfx hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


__all__ = ["get_logger"]
