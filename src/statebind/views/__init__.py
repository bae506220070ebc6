"""View layer: subscription lifecycle and PySide6 adapters.

:class:`View` and :class:`ActionView` only depend on the handle protocols;
the Qt adapters and ready-made widgets live in :mod:`statebind.views.qt`
and :mod:`statebind.views.widgets`.
"""

from .action_view import ActionView
from .handles import DetachableFieldHandle, ElementHandle, FieldHandle
from .view import View

__all__ = [
    "View",
    "ActionView",
    "ElementHandle",
    "FieldHandle",
    "DetachableFieldHandle",
]
