"""Unit tests for :mod:`statebind.views.action_view`."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from statebind.core.errors import MisconfiguredCollaboratorError
from statebind.core.modifiable import ModifiableSubject
from statebind.core.subject import Subject
from statebind.views.action_view import ActionView


class _StubElement:
    def __init__(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def remove_from_parent(self) -> None:
        return None

    def is_visible(self) -> bool:
        return self.visible


class _StubField:
    """Field that can be observed, detached and triggered by hand."""

    def __init__(self) -> None:
        self.observed: list[str] = []
        self._callbacks: dict[str, list[Callable[..., Any]]] = {}

    def observe(self, event: str, callback: Callable[..., Any]) -> None:
        self.observed.append(event)
        self._callbacks.setdefault(event, []).append(callback)

    def stop_observing(self, event: str, callback: Callable[..., Any]) -> None:
        callbacks = self._callbacks.get(event, [])
        self._callbacks[event] = [existing for existing in callbacks if existing != callback]

    def emit(self, event: str, *args: Any) -> list[Any]:
        return [callback(*args) for callback in list(self._callbacks.get(event, []))]


class _ObserveOnlyField:
    def __init__(self) -> None:
        self.callbacks: list[Callable[..., Any]] = []

    def observe(self, event: str, callback: Callable[..., Any]) -> None:
        self.callbacks.append(callback)


class _InputView(ActionView):
    def __init__(self, subject: Subject, *, field: Any = None, **kwargs: Any) -> None:
        self._stub_field = field if field is not None else _StubField()
        super().__init__(subject, **kwargs)

    def draw(self) -> _StubElement:
        self._field = self._stub_field
        return _StubElement()


class _FieldlessView(ActionView):
    def draw(self) -> _StubElement:
        return _StubElement()


@pytest.fixture
def subject() -> ModifiableSubject:
    return ModifiableSubject(title="Draft")


def test_events_are_deduplicated_and_null_filtered(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller, events=["input", "input", "change", None])

    assert set(view.get_field().observed) == {"input", "change"}
    assert view.get_field().observed == ["input", "change"]
    assert view.observed_events() == ("input", "change")


def test_single_event_name_is_accepted(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller, events="change")

    assert view.observed_events() == ("change",)


def test_no_events_wires_nothing(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller)

    assert view.get_field().observed == []
    assert view.observed_events() == ()


def test_observe_field_events_skips_already_wired(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller, events=["input"])

    view.observe_field_events(["input", "blur", ""])

    assert view.get_field().observed == ["input", "blur"]


def test_field_event_fires_controller_action(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller, events=["change"])

    view.get_field().emit("change", "new text")

    assert controller.calls == [("save", subject, ("new text",))]


def test_fire_prepends_subject_and_returns_result(subject) -> None:
    class Adder:
        def total(self, source: ModifiableSubject, *values: int) -> tuple[str, int]:
            return source.get("title"), sum(values)

    view = _InputView(subject, action="total", controller=Adder())

    assert view.fire(1, 2, 3) == ("Draft", 6)


def test_accessors(subject, controller) -> None:
    view = _InputView(subject, action="rename", controller=controller)

    assert view.get_controller() is controller
    assert view.get_subject() is subject
    assert view.get_field() is not None


def test_missing_action_raises_at_fire_time(subject, controller) -> None:
    view = _InputView(subject, action="publish", controller=controller, events=["change"])

    with pytest.raises(MisconfiguredCollaboratorError) as excinfo:
        view.get_field().emit("change")

    assert excinfo.value.action == "publish"
    assert excinfo.value.controller_class == "RecordingController"
    assert isinstance(excinfo.value, AttributeError)


def test_non_callable_action_raises(subject) -> None:
    class Holder:
        save = "not a method"

    view = _InputView(subject, action="save", controller=Holder())

    with pytest.raises(MisconfiguredCollaboratorError):
        view.fire()


def test_missing_controller_raises(subject) -> None:
    view = _InputView(subject, action="save", controller=None)

    with pytest.raises(MisconfiguredCollaboratorError):
        view.fire()


def test_fieldless_view_is_inert(subject, controller) -> None:
    view = _FieldlessView(subject, action="save", controller=controller, events=["change"])

    assert view.get_field() is None
    assert view.observed_events() == ()
    view.tear_down()
    assert subject.notifications() == []


def test_tear_down_unwires_field(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller, events=["change", "input"])
    field = view.get_field()

    view.tear_down()
    field.emit("change", "ignored")
    field.emit("input", "ignored")

    assert controller.calls == []
    assert view.observed_events() == ()
    assert not view.get_element().is_visible()
    assert subject.notifications() == []


def test_subject_destroy_unwires_field(subject, controller) -> None:
    view = _InputView(subject, action="save", controller=controller, events=["change"])

    subject.destroy()
    view.get_field().emit("change")

    assert controller.calls == []


def test_observe_only_field_is_left_connected_on_teardown(subject, controller) -> None:
    field = _ObserveOnlyField()
    view = _InputView(subject, field=field, action="save", controller=controller, events=["change"])

    view.tear_down()

    assert len(field.callbacks) == 1
    assert view.observed_events() == ()
