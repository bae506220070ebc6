"""Connection and logging settings for controllers and the running process.

Nothing here is written to disk. :func:`load_settings` builds a
:class:`Settings` from defaults, caller overrides and ``STATEBIND_*``
environment variables, in that order of precedence (environment wins).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

__all__ = ["Settings", "load_settings"]

LOGGER = logging.getLogger(__name__)

# Environment variable -> (field, converter)
_ENV_FIELDS: Mapping[str, tuple[str, str]] = {
    "STATEBIND_BASE_URL": ("base_url", "str"),
    "STATEBIND_API_KEY": ("api_key", "str"),
    "STATEBIND_REQUEST_METHOD": ("request_method", "str"),
    "STATEBIND_REQUEST_TIMEOUT": ("request_timeout", "float"),
    "STATEBIND_DEBUG_LOGGING": ("debug_logging", "bool"),
    "STATEBIND_QUIET_NOTIFICATIONS": ("quiet_notifications", "list"),
}
_TRUE_VALUES = {"1", "true", "yes", "on", "debug"}


@dataclass(slots=True)
class Settings:
    """Settings shared by request controllers and :func:`apply_settings`."""

    base_url: str = ""
    api_key: str = ""
    request_method: str = "post"
    request_timeout: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    debug_logging: bool = False
    quiet_notifications: list[str] = field(default_factory=lambda: ["subject:change:"])

    def log_level(self) -> int:
        return logging.DEBUG if self.debug_logging else logging.INFO

    def request_headers(self) -> dict[str, str]:
        """Return the headers every outbound request should carry."""

        headers = dict(self.default_headers)
        if self.api_key:
            headers.setdefault("Authorization", f"Bearer {self.api_key}")
        return headers


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Return settings with caller overrides, then environment overrides, applied.

    Unknown keys and ``None`` values in ``overrides`` are ignored. Environment
    values that cannot be converted are logged and skipped.
    """

    settings = Settings()
    if overrides:
        settings = _apply(settings, overrides, source="caller")

    env = os.environ if environ is None else environ
    from_env: dict[str, Any] = {}
    for env_name, (field_name, kind) in _ENV_FIELDS.items():
        raw = env.get(env_name)
        if raw is None:
            continue
        try:
            from_env[field_name] = _convert(raw, kind)
        except ValueError:
            LOGGER.warning("Ignoring %s=%r: expected %s", env_name, raw, kind)
    if from_env:
        settings = _apply(settings, from_env, source="environment")
    return settings


def _apply(settings: Settings, values: Mapping[str, Any], *, source: str) -> Settings:
    known = {item.name for item in fields(Settings)}
    accepted = {key: value for key, value in values.items() if key in known and value is not None}
    if not accepted:
        return settings
    LOGGER.debug("Applying %s settings: %s", source, sorted(accepted))
    return replace(settings, **accepted)


def _convert(raw: str, kind: str) -> Any:
    if kind == "float":
        return float(raw)
    if kind == "bool":
        return raw.strip().lower() in _TRUE_VALUES
    if kind == "list":
        return [item.strip() for item in raw.split(",") if item.strip()]
    return raw
