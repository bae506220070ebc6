"""Ready-made PySide6 views for the common property/input cases."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from PySide6.QtWidgets import QLabel, QLineEdit, QWidget

from ..core.modifiable import ModifiableSubject
from ..core.notifications import change_notification
from .action_view import ActionView
from .qt import QtElement, QtField
from .view import View

Formatter = Callable[[Any], str]


def _default_format(value: Any) -> str:
    return "" if value is None else str(value)


class PropertyLabelView(View):
    """``QLabel`` that mirrors one property of a modifiable subject."""

    def __init__(
        self,
        subject: ModifiableSubject,
        property_name: str,
        *,
        parent: QWidget | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self._property_name = property_name
        self._parent = parent
        self._formatter = formatter or _default_format
        self._label: QLabel | None = None
        super().__init__(subject)
        self.subscribe(change_notification(property_name), self._on_property_changed)

    def draw(self) -> QtElement:
        self._label = QLabel(self._current_text(), self._parent)
        self._label.setObjectName(f"statebind-{self._property_name}")
        return QtElement(self._label)

    def label(self) -> QLabel | None:
        return self._label

    def update(self) -> None:
        if self._label is not None:
            self._label.setText(self._current_text())

    def _current_text(self) -> str:
        subject = self.get_subject()
        return self._formatter(subject.get(self._property_name))  # type: ignore[attr-defined]

    def _on_property_changed(self, _subject: ModifiableSubject) -> None:
        self.update()


class LineEditActionView(ActionView):
    """``QLineEdit`` that reports edits to a controller action.

    By default the action is called once editing finishes, with no extra
    arguments; observe ``textChanged`` instead to receive every keystroke
    as ``(subject, text)``.
    """

    def __init__(
        self,
        subject: ModifiableSubject,
        *,
        action: str,
        controller: Any,
        property_name: str | None = None,
        events: str | Iterable[str | None] | None = ("editingFinished",),
        parent: QWidget | None = None,
    ) -> None:
        self._property_name = property_name
        self._parent = parent
        self._line_edit: QLineEdit | None = None
        super().__init__(subject, action=action, controller=controller, events=events)

    def draw(self) -> QtElement:
        self._line_edit = QLineEdit(self._parent)
        if self._property_name:
            value = self.get_subject().get(self._property_name)  # type: ignore[attr-defined]
            self._line_edit.setText(_default_format(value))
        self._field = QtField(self._line_edit)
        return QtElement(self._line_edit)

    def line_edit(self) -> QLineEdit | None:
        return self._line_edit

    def text(self) -> str:
        return self._line_edit.text() if self._line_edit is not None else ""


__all__ = ["PropertyLabelView", "LineEditActionView"]
