"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def setup_logging(level: str | None = None) -> logging.Logger:
    root = logging.getLogger()
    resolved = getattr(logging, (level or log_level()).upper(), logging.INFO)
    root.setLevel(resolved)

    # create_app() may run more than once per process; install one handler only.
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
