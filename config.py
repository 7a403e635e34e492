"""Centralized configuration for environment variables and external APIs.

This module is the single source of truth for configuration used across the
application. Import the getters from here rather than calling os.getenv
directly in multiple places. Values are read at call time so tests and
long-running processes pick up environment changes.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()


# --- Overpass API Configuration ---
DEFAULT_OVERPASS_API_URL: Final[str] = (
    "https://maps.mail.ru/osm/tools/overpass/api/interpreter"
)
DEFAULT_OVERPASS_USER_AGENT: Final[str] = "StreetLists/1.0"

# --- Export Configuration ---
DEFAULT_EXPORT_DIR: Final[str] = "exports"

# --- Logging ---
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
LOG_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def _env(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


def get_overpass_api_url() -> str:
    return _env("OVERPASS_API_URL", DEFAULT_OVERPASS_API_URL).rstrip("?")


def get_overpass_user_agent() -> str:
    return _env("OVERPASS_USER_AGENT", DEFAULT_OVERPASS_USER_AGENT)


def get_export_dir() -> Path:
    return Path(_env("STREET_EXPORT_DIR", DEFAULT_EXPORT_DIR))


def get_log_level() -> int:
    """Resolve LOG_LEVEL to a logging level, falling back to INFO."""
    name = _env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.INFO


__all__ = [
    "DEFAULT_EXPORT_DIR",
    "DEFAULT_OVERPASS_API_URL",
    "DEFAULT_OVERPASS_USER_AGENT",
    "LOG_FORMAT",
    "get_export_dir",
    "get_log_level",
    "get_overpass_api_url",
    "get_overpass_user_agent",
]
