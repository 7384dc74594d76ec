"""Core system utilities for logging."""

from .logger import logger, setup_logging

__all__ = [
    "setup_logging",
    "logger",
]
