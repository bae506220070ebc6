"""Service helpers: settings and runtime wiring."""

from .runtime import apply_settings
from .settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
    "apply_settings",
]
