"""Logging set-up for applications built on statebind.

Subjects log every dispatch at DEBUG with the notification name attached to
the record (``record.notification``). :class:`QuietNotificationFilter` drops
those records for notifications marked quiet in
:mod:`statebind.core.notifications`, so high-frequency names such as
``subject:change:<property>`` do not flood the log file.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from ..core.notifications import is_quiet

__all__ = ["QuietNotificationFilter", "setup_logging", "get_log_path"]

LOG_FILE_NAME = "statebind.log"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LOG_DIR = Path.home() / ".statebind" / "logs"
# Transport libraries the request controllers pull in
_HTTP_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")

_log_path: Path | None = None


class QuietNotificationFilter(logging.Filter):
    """Reject dispatch records whose notification is currently quiet."""

    def filter(self, record: logging.LogRecord) -> bool:
        notification = getattr(record, "notification", None)
        if notification is None:
            return True
        return not is_quiet(notification)


def setup_logging(
    level: int = logging.INFO,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    force: bool = False,
) -> Path:
    """Install a rotating log file (and optionally stderr) on the root logger.

    Every handler carries a :class:`QuietNotificationFilter`. Repeated calls
    return the existing log path unless ``force`` is set.

    Returns:
        The path of the log file.
    """

    global _log_path
    if _log_path is not None and not force:
        return _log_path

    directory = Path(log_dir or os.environ.get("STATEBIND_LOG_DIR") or _DEFAULT_LOG_DIR).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / LOG_FILE_NAME

    handlers: list[logging.Handler] = [
        logging.handlers.RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    ]
    if console:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    quiet = QuietNotificationFilter()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(quiet)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    logging.captureWarnings(True)

    # httpx logs every request at INFO; keep it at WARNING unless the app is quieter still.
    http_level = max(level, logging.WARNING)
    for name in _HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)

    _log_path = path
    return path


def get_log_path() -> Path | None:
    """Return the log file configured by :func:`setup_logging`, if any."""

    return _log_path
