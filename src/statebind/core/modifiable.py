"""Dirty-tracked property store built on :class:`Subject`."""

from __future__ import annotations

from typing import Any

from .notifications import SUBJECT_CLEAN, SUBJECT_DIRTY, change_notification
from .subject import Subject


class ModifiableSubject(Subject):
    """Subject holding named properties and a dirty flag.

    Changing a property through :meth:`set` publishes
    ``subject:change:<property>`` followed by ``subject:dirty``. Keyword
    arguments passed to the constructor are stored silently, so a freshly
    built subject starts clean.
    """

    def __init__(self, **properties: Any) -> None:
        super().__init__()
        self._dirty = False
        self._properties: dict[str, Any] = {}
        for name, value in properties.items():
            self.set(name, value, silent=True)

    def get(self, property_name: str) -> Any:
        """Return the stored value, or None when it was never set."""

        return self._properties.get(property_name)

    def properties(self) -> list[str]:
        """Return the names of all properties ever set, in insertion order."""

        return list(self._properties)

    def set(self, property_name: str, value: Any, silent: bool = False) -> bool:
        """Store ``value`` under ``property_name``.

        Returns False without side effects when the stored value already
        equals ``value``. Otherwise stores it and, unless ``silent``,
        notifies the change and marks the subject dirty.
        """

        if self.get(property_name) == value:
            return False
        self._properties[property_name] = value
        if not silent:
            self.notify(change_notification(property_name))
            self.dirty()
        return True

    def clean(self) -> None:
        """Clear the dirty flag and notify ``subject:clean``."""

        self._dirty = False
        self.notify(SUBJECT_CLEAN)

    def dirty(self) -> None:
        """Raise the dirty flag and notify ``subject:dirty``."""

        self._dirty = True
        self.notify(SUBJECT_DIRTY)

    def is_dirty(self) -> bool:
        return self._dirty

    def snapshot(self) -> dict[str, Any]:
        """Return a shallow copy of the stored properties."""

        return dict(self._properties)


class KeyedSubject(ModifiableSubject):
    """Modifiable subject whose equality is decided by a key property.

    Two keyed subjects are equal when one is an instance of the other's
    class and both carry the same non-None value for ``key_property``.
    This lets a :class:`~statebind.core.collection.Collection` treat a
    freshly loaded copy of an entity as the member it already holds.

    Example::

        class Track(KeyedSubject):
            key_property = "track_id"

        Track(track_id=7).is_equal(Track(track_id=7))  # True
    """

    key_property: str = "id"

    def key(self) -> Any:
        return self.get(self.key_property)

    def is_equal(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, KeyedSubject):
            return False
        if not (isinstance(other, type(self)) or isinstance(self, type(other))):
            return False
        if self.key_property != other.key_property:
            return False
        key = self.key()
        return key is not None and key == other.key()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.key_property}={self.key()!r}>"


__all__ = ["ModifiableSubject", "KeyedSubject"]
