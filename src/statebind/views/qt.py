"""PySide6 implementations of the element and field handles."""

from __future__ import annotations

import logging
from typing import Any, Callable

from PySide6.QtWidgets import QWidget

from ..core.errors import FieldEventError

LOGGER = logging.getLogger(__name__)


class QtElement:
    """Element handle wrapping a ``QWidget``."""

    __slots__ = ("_widget",)

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    @property
    def widget(self) -> QWidget:
        return self._widget

    def hide(self) -> None:
        self._widget.hide()

    def remove_from_parent(self) -> None:
        if self._widget.parent() is None:
            return
        self._widget.setParent(None)

    def is_visible(self) -> bool:
        return self._widget.isVisible()


class QtField:
    """Field handle mapping event names onto the widget's Qt signals.

    ``observe("textChanged", callback)`` connects ``callback`` to
    ``widget.textChanged``; the signal's arguments are passed through.
    """

    __slots__ = ("_widget",)

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    @property
    def widget(self) -> QWidget:
        return self._widget

    def observe(self, event: str, callback: Callable[..., Any]) -> None:
        self._signal(event).connect(callback)
        LOGGER.debug("Connected %s.%s", type(self._widget).__name__, event)

    def stop_observing(self, event: str, callback: Callable[..., Any]) -> None:
        self._signal(event).disconnect(callback)
        LOGGER.debug("Disconnected %s.%s", type(self._widget).__name__, event)

    def _signal(self, event: str) -> Any:
        signal = getattr(self._widget, event, None)
        if signal is None or not hasattr(signal, "connect"):
            raise FieldEventError(
                message=f"{type(self._widget).__name__} has no signal named {event!r}",
                event=event,
            )
        return signal


__all__ = ["QtElement", "QtField"]
