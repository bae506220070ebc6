"""Base view binding one UI element to one subject."""

from __future__ import annotations

import logging
from typing import Any

from ..core.errors import DrawNotImplementedError
from ..core.notifications import SUBJECT_DESTROY
from ..core.subject import Observer, Subject
from .handles import ElementHandle

LOGGER = logging.getLogger(__name__)


class _ViewCallback:
    """Registration made by one view; compares by identity.

    The subject only ever sees the wrapper, so a view never removes a
    registration of the same function made by another observer.
    """

    __slots__ = ("fn",)

    def __init__(self, fn: Observer) -> None:
        self.fn = fn

    def __call__(self, *args: Any) -> Any:
        return self.fn(*args)

    def __repr__(self) -> str:
        return f"<view callback {self.fn!r}>"


class View:
    """UI element bound to a subject for exactly the subject's lifetime.

    The constructor calls :meth:`draw` to build the element, then
    subscribes to ``subject:destroy`` so the view tears itself down when
    its subject goes away. Every subscription made through the view is
    recorded in a registry private to the view, which lets
    :meth:`tear_down` remove exactly what the view added and nothing else.

    Re-subscribing a notification name keeps the earlier callbacks: the
    registry stores a list per name. :meth:`unsubscribe` drops the most
    recently recorded callback for a name and :meth:`unsubscribe_all`
    drops all of them, so no callback is ever left behind on the subject.

    Subclasses must implement :meth:`draw`.
    """

    def __init__(self, subject: Subject) -> None:
        self._subject = subject
        self._subscribed_functions: dict[str, list[_ViewCallback]] = {}
        self._element: Any = self.draw()
        self.subscribe(SUBJECT_DESTROY, self._on_subject_destroyed)

    def draw(self) -> ElementHandle:
        """Build and return the element handle for this view."""

        raise DrawNotImplementedError(
            message=f"{type(self).__name__}.draw must be defined in a subclass",
            view_class=type(self).__name__,
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    def get_element(self) -> Any:
        return self._element

    def get_subject(self) -> Subject:
        return self._subject

    def notifications(self) -> list[str]:
        """Return the notification names this view is subscribed to."""

        return list(self._subscribed_functions)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscribe(self, notification: str, fn: Observer) -> None:
        """Subscribe ``fn`` to ``notification`` on the bound subject."""

        callback = _ViewCallback(fn)
        self._subscribed_functions.setdefault(notification, []).append(callback)
        self._subject.subscribe(notification, callback)

    def unsubscribe(self, notification: str) -> None:
        """Drop the most recently recorded callback for ``notification``."""

        recorded = self._subscribed_functions.get(notification)
        if not recorded:
            return
        callback = recorded.pop()
        if not recorded:
            del self._subscribed_functions[notification]
        self._subject.unsubscribe(notification, callback)

    def unsubscribe_all(self) -> None:
        """Drop every subscription this view made."""

        for notification in list(self._subscribed_functions):
            while notification in self._subscribed_functions:
                self.unsubscribe(notification)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def update(self) -> None:
        """Refresh the element from the subject. No-op in the base class."""

    def tear_down(self) -> None:
        """Hide and detach the element, then drop every subscription.

        Safe to call more than once and when no element was drawn.
        """

        element = self.get_element()
        if element is not None:
            element.hide()
            element.remove_from_parent()
        self.unsubscribe_all()
        LOGGER.debug("Tore down %s bound to %r", type(self).__name__, self._subject)

    def _on_subject_destroyed(self, _subject: Subject) -> None:
        self.tear_down()


__all__ = ["View"]
