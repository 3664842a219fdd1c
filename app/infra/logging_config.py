"""Logging setup shared by the API process and scripts."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from app.config import get_settings

ROOT_LOGGER_NAME = "snippet_vault"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Third-party loggers that are too chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "urllib3", "httpx", "jose")


class LoggingConfig:
    """Configure the application logger once per process."""

    _configured = False

    def __init__(self, level: Optional[str] = None) -> None:
        if LoggingConfig._configured:
            return
        level_name = (level or get_settings().log_level).upper()
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(getattr(logging, level_name, logging.INFO))

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False

        for name in _QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

        LoggingConfig._configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger namespaced under the application logger."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
