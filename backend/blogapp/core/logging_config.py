"""
Logging setup for the blog API.

Call ``configure_logging`` once at startup (``create_app`` does this); every
module then logs through ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_level(value: str | int | None) -> Optional[int]:
    """Map 'debug' / 'INFO' / 20 to a logging constant, None if unknown."""
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return value
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else None


def configure_logging(level: str | int | None = None, *, force: bool = False) -> logging.Logger:
    resolved = _parse_level(level) or logging.INFO
    root = logging.getLogger()
    if root.handlers and not force:
        root.setLevel(resolved)
    else:
        logging.basicConfig(level=resolved, format=LOG_FORMAT, force=force)
    return logging.getLogger("blogapp")


__all__ = ["LOG_FORMAT", "configure_logging"]
