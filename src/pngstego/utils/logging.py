"""Logging utilities for pngstego."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "INFO"
ENV_LOG_LEVEL = "PNGSTEGO_LOG_LEVEL"


def resolve_level(level: Optional[str] = None) -> int:
    """Map a level name from the argument or environment to a logging level."""
    log_level = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, log_level, logging.INFO)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the application."""
    logging.basicConfig(
        level=resolve_level(level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
