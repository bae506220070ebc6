"""Contracts for the UI handles a view manipulates.

Views never talk to a toolkit directly. ``draw()`` returns an element
handle and action views expose a field handle; :mod:`statebind.views.qt`
implements both for PySide6 widgets.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class ElementHandle(Protocol):
    """The top-level element produced by :meth:`View.draw`."""

    def hide(self) -> None: ...

    def remove_from_parent(self) -> None:
        """Detach from the parent container; no-op when already detached."""
        ...

    def is_visible(self) -> bool: ...


@runtime_checkable
class FieldHandle(Protocol):
    """The interactive element of an action view."""

    def observe(self, event: str, callback: Callable[..., Any]) -> None: ...


@runtime_checkable
class DetachableFieldHandle(FieldHandle, Protocol):
    """Field handle that can also drop an observation."""

    def stop_observing(self, event: str, callback: Callable[..., Any]) -> None: ...


__all__ = ["ElementHandle", "FieldHandle", "DetachableFieldHandle"]
