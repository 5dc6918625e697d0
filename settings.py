"""
Application settings for Nebula Boards API.

Values are read once from environment variables at import time.
"""

import logging
import os
import sys
from typing import List


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


ENVIRONMENT = os.getenv("ENVIRONMENT", "development")

# Uvicorn server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))

# CORS origins used outside development
CORS_ALLOW_ORIGINS = _env_list("CORS_ALLOW_ORIGINS", "http://localhost:3000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class _ExtraFormatter(logging.Formatter):
    """Appends the `extra={...}` context of a record as key=value pairs."""

    _reserved = set(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = {
            key: value for key, value in record.__dict__.items()
            if key not in self._reserved
        }
        if context:
            line += " " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


def _build_logger() -> logging.Logger:
    app_logger = logging.getLogger("nebula_boards")
    app_logger.setLevel(LOG_LEVEL)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_ExtraFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        app_logger.addHandler(handler)

    app_logger.propagate = False
    return app_logger


logger = _build_logger()
