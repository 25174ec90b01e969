"""Central level-based logger (standard library `logging`).

Env:
- LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: INFO)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

DEFAULT_LOGGER_NAME = "passstore"


def _level_from_env() -> int:
    raw = (os.getenv("LOG_LEVEL") or "INFO").upper().strip()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger.

    The root logger is configured once (idempotent); the level is re-read
    from the environment on every call.
    """
    level = _level_from_env()
    root = logging.getLogger()
    if not getattr(root, "_passstore_configured", False):
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s - %(message)s",
        )
        setattr(root, "_passstore_configured", True)
    root.setLevel(level)
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
