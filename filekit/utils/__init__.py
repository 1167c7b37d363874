"""Utility functions and helpers."""

from .config import load_config, Config
from .logging import setup_logging, get_logger, set_logging_enabled, is_logging_enabled

__all__ = [
    "load_config", "Config",
    "setup_logging", "get_logger",
    "set_logging_enabled", "is_logging_enabled"
]
