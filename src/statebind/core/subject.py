"""Notification hub shared by every observable object.

A :class:`Subject` maps notification names to ordered lists of observer
callbacks. Publishing is synchronous: :meth:`Subject.notify` calls each
observer in subscription order, always passing the subject itself as the
first argument.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Protocol, runtime_checkable

from .notifications import SUBJECT_DESTROY

LOGGER = logging.getLogger(__name__)

# Observer type: called as ``observer(subject, *args)``
Observer = Callable[..., Any]


@runtime_checkable
class Equatable(Protocol):
    """Anything that can decide whether it represents the same entity as another."""

    def is_equal(self, other: Any) -> bool: ...


class Subject:
    """Identity-bearing publisher of named notifications.

    Example::

        subject = Subject()

        def on_saved(source: Subject, path: str) -> None:
            print(f"saved {path}")

        subject.subscribe("saved", on_saved)
        subject.notify("saved", "/tmp/notes.md")
        subject.unsubscribe("saved", on_saved)

    Thread Safety:
        This implementation is NOT thread-safe. Subscribe, unsubscribe and
        notify from the thread that owns the UI.

    Attributes:
        _notification_to_observers: Mapping from notification name to the
            observers registered for it, in call order.
    """

    def __init__(self) -> None:
        self._notification_to_observers: dict[str, list[Observer]] = {}

    def is_equal(self, other: Any) -> bool:
        """Return True when ``other`` is this very subject."""

        return self is other

    def destroy(self) -> None:
        """Announce destruction, then drop every subscription.

        Observers of ``subject:destroy`` still receive the notification
        because the registry is cleared only after it has been delivered.
        """

        self.notify(SUBJECT_DESTROY)
        self._notification_to_observers = {}
        LOGGER.debug("Destroyed %s", _subject_name(self))

    def notifications(self) -> list[str]:
        """Return the notification names that currently have observers."""

        return list(self._notification_to_observers)

    def observers(self) -> list[Observer]:
        """Return every registered observer once, in first-seen order."""

        unique: list[Observer] = []
        for observers in self._notification_to_observers.values():
            for observer in observers:
                if observer not in unique:
                    unique.append(observer)
        return unique

    def notify(self, notification: str, *args: Any) -> None:
        """Call every observer of ``notification`` with ``(self, *args)``.

        The observer list is copied before dispatch, so observers that
        subscribe or unsubscribe while being notified only affect later
        calls. Exceptions raised by an observer propagate to the caller.
        """

        observers = self._notification_to_observers.get(notification)
        if not observers:
            return

        LOGGER.debug(
            "Notifying %s from %s to %d observer(s)",
            notification,
            _subject_name(self),
            len(observers),
            extra={"notification": notification},
        )

        for observer in list(observers):
            observer(self, *args)

    def subscribe(self, notification: str, observer: Observer) -> None:
        """Register ``observer`` for ``notification``.

        Note:
            Subscribing the same observer twice results in two invocations
            per notification.
        """

        self._notification_to_observers.setdefault(notification, []).append(observer)
        LOGGER.debug(
            "Subscribed %s to %s on %s",
            _observer_name(observer),
            notification,
            _subject_name(self),
        )

    def unsubscribe(self, notification: str, observer: Observer) -> None:
        """Remove every registration of ``observer`` for ``notification``.

        Observers are compared with ``==`` so a freshly bound method matches
        the bound method that was subscribed. Safe to call for observers
        that were never subscribed.
        """

        observers = self._notification_to_observers.get(notification)
        if observers is None:
            return

        remaining = [existing for existing in observers if existing != observer]
        if len(remaining) == len(observers):
            return
        if remaining:
            self._notification_to_observers[notification] = remaining
        else:
            del self._notification_to_observers[notification]
        LOGGER.debug(
            "Unsubscribed %s from %s on %s",
            _observer_name(observer),
            notification,
            _subject_name(self),
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {id(self):#x}>"


def _subject_name(subject: Subject) -> str:
    return f"{type(subject).__name__}@{id(subject):#x}"


def _observer_name(observer: Observer) -> str:
    """Get a human-readable name for an observer for logging purposes."""
    if hasattr(observer, "__self__") and hasattr(observer, "__func__"):
        cls_name = type(observer.__self__).__name__
        return f"{cls_name}.{observer.__func__.__name__}"
    if hasattr(observer, "__name__"):
        return observer.__name__
    return repr(observer)


__all__ = ["Equatable", "Observer", "Subject"]
