"""Structured logging module.

This module provides utilities for structured logging using structlog.
"""

from .setup import build_processors, get_logger, setup_logging

__all__ = [
    "build_processors",
    "get_logger",
    "setup_logging",
]
