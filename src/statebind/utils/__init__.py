"""Utility helpers shared across statebind."""

from .logging import QuietNotificationFilter, get_log_path, setup_logging

__all__ = ["QuietNotificationFilter", "setup_logging", "get_log_path"]
