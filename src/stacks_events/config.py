"""Runtime settings for the event catalog and its local collaborators.

Values come from the environment (optionally seeded from a ``.env`` file).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import dotenv

dotenv.load_dotenv(".env")

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIR = "log"
DEFAULT_BUS_MAXSIZE = 100
DEFAULT_OPERATION_CODE = 0


def _int_env(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("ignoring non-integer %s=%r, using %s", key, raw, default)
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    # None disables the file handler
    log_dir: Optional[str] = DEFAULT_LOG_DIR
    bus_maxsize: int = DEFAULT_BUS_MAXSIZE
    default_operation_code: int = DEFAULT_OPERATION_CODE

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO


def load_settings() -> Settings:
    """Read settings from ``STACKS_EVENTS_*`` environment variables."""
    log_dir = os.getenv("STACKS_EVENTS_LOG_DIR", DEFAULT_LOG_DIR)
    return Settings(
        log_level=os.getenv("STACKS_EVENTS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        log_dir=log_dir or None,
        bus_maxsize=_int_env("STACKS_EVENTS_BUS_MAXSIZE", DEFAULT_BUS_MAXSIZE),
        default_operation_code=_int_env("STACKS_EVENTS_DEFAULT_OPERATION_CODE", DEFAULT_OPERATION_CODE),
    )
