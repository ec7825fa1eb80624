"""
Server configuration.

All settings come from environment variables (or a local .env file):
  PORT=8080
  HOST=0.0.0.0
  LOG_LEVEL=INFO
  CORS_ORIGINS=*            # comma-separated, e.g. http://localhost:5173
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"

# Levels uvicorn accepts; WARN is the stdlib alias for WARNING
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")
_LOG_LEVEL_ALIASES = {"WARN": "WARNING"}


def _read_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning("Invalid PORT value: %r. Using default: %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("PORT %d out of range. Using default: %d", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def _read_log_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    level = _LOG_LEVEL_ALIASES.get(level, level)
    if level not in LOG_LEVELS:
        logger.warning("Invalid LOG_LEVEL value: %r. Using default: %s", raw, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


PORT = _read_port(os.environ.get("PORT"))
HOST = os.environ.get("HOST", "0.0.0.0")
LOG_LEVEL = _read_log_level(os.environ.get("LOG_LEVEL"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
