"""Well-known notification names published by subjects and collections."""

from __future__ import annotations

from typing import Iterable

SUBJECT_DESTROY = "subject:destroy"
SUBJECT_DIRTY = "subject:dirty"
SUBJECT_CLEAN = "subject:clean"
SUBJECT_CHANGE_PREFIX = "subject:change:"

COLLECTION_ADD = "collection:add"
COLLECTION_REMOVE = "collection:remove"
COLLECTION_CLEAR = "collection:clear"

# Prefixes whose dispatch records QuietNotificationFilter drops
_QUIET_PREFIXES: set[str] = {SUBJECT_CHANGE_PREFIX}


def change_notification(property_name: str) -> str:
    """Return the notification name fired when ``property_name`` changes."""

    return f"{SUBJECT_CHANGE_PREFIX}{property_name}"


def mark_quiet(prefix: str) -> None:
    """Stop logging dispatches for notifications starting with ``prefix``."""

    _QUIET_PREFIXES.add(prefix)


def unmark_quiet(prefix: str) -> None:
    _QUIET_PREFIXES.discard(prefix)


def set_quiet(prefixes: Iterable[str]) -> None:
    """Replace every quiet prefix with ``prefixes`` (empty entries ignored)."""

    _QUIET_PREFIXES.clear()
    _QUIET_PREFIXES.update(prefix for prefix in prefixes if prefix)


def quiet_prefixes() -> frozenset[str]:
    return frozenset(_QUIET_PREFIXES)


def is_quiet(name: str) -> bool:
    return any(name.startswith(prefix) for prefix in _QUIET_PREFIXES)


__all__ = [
    "SUBJECT_DESTROY",
    "SUBJECT_DIRTY",
    "SUBJECT_CLEAN",
    "SUBJECT_CHANGE_PREFIX",
    "COLLECTION_ADD",
    "COLLECTION_REMOVE",
    "COLLECTION_CLEAR",
    "change_notification",
    "mark_quiet",
    "unmark_quiet",
    "set_quiet",
    "quiet_prefixes",
    "is_quiet",
]
