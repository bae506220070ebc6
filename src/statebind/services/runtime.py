"""Apply settings to the running process."""

from __future__ import annotations

import logging
from pathlib import Path

from ..core.notifications import set_quiet
from ..utils.logging import setup_logging
from .settings import Settings

LOGGER = logging.getLogger(__name__)


def apply_settings(
    settings: Settings,
    *,
    log_dir: Path | str | None = None,
    console: bool = True,
) -> Path:
    """Configure logging and notification log filtering from ``settings``.

    Returns:
        The path of the log file in use.
    """

    log_path = setup_logging(settings.log_level(), log_dir=log_dir, console=console, force=True)
    set_quiet(settings.quiet_notifications)
    LOGGER.debug(
        "Applied settings: level=%s, quiet=%s",
        logging.getLevelName(settings.log_level()),
        settings.quiet_notifications,
    )
    return log_path
