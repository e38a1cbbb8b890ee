"""Logging utilities for the podcastr project."""

from .logging_decorator import (
    DEFAULT_LOG_FILE,
    setup_logging,
    log_function,
    log_with_timer,
)

__all__ = [
    "DEFAULT_LOG_FILE",
    "setup_logging",
    "log_function",
    "log_with_timer",
]
