"""Configuration and logging helpers."""

from __future__ import annotations

from .config import Settings, get_settings
from .logging import JsonLogFormatter, configure_logging

__all__ = ["JsonLogFormatter", "Settings", "configure_logging", "get_settings"]
