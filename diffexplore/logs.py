"""Debug logging setup.

The TUI owns the terminal, so records only go to a file and only when
``DIFFEXPLORE_DEBUG_LOG`` names one.
"""

from __future__ import annotations

import logging
import os

DEBUG_LOG_ENV = "DIFFEXPLORE_DEBUG_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(threadName)s %(name)s: %(message)s"


def configure_logging(environ: dict[str, str] | None = None) -> bool:
    """Route package logs to the debug file when configured; return whether enabled."""
    env = os.environ if environ is None else environ
    log_path = env.get(DEBUG_LOG_ENV, "").strip()
    if not log_path:
        return False
    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("diffexplore")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return True
