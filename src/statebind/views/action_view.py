"""Views that turn user input into controller actions."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from ..core.errors import MisconfiguredCollaboratorError
from ..core.subject import Subject
from .handles import DetachableFieldHandle, FieldHandle
from .view import View

LOGGER = logging.getLogger(__name__)


class ActionView(View):
    """View whose field forwards input events to one controller action.

    Subclasses implement :meth:`draw` and assign ``self._field`` there; the
    field is what the user interacts with. Each event named in ``events``
    is wired to :meth:`fire`, which calls ``controller.<action>(subject,
    *args)``.

    A view whose ``draw`` leaves the field unset is valid but inert.

    Args:
        subject: The subject the view is bound to.
        action: Name of the controller method to call when fired.
        controller: Object exposing ``action``.
        events: Field event name(s) to observe. Duplicates and empty
            entries are ignored.
    """

    def __init__(
        self,
        subject: Subject,
        *,
        action: str,
        controller: Any,
        events: str | Iterable[str | None] | None = None,
    ) -> None:
        self._action = action
        self._controller = controller
        # Assigned by draw()
        self._field: FieldHandle | None = None
        self._observed_events: list[str] = []
        super().__init__(subject)

        # Keep the bound method so the same callable can be disconnected later.
        self._bound_fire = self.fire
        self.observe_field_events(events)

    def get_field(self) -> FieldHandle | None:
        return self._field

    def get_controller(self) -> Any:
        return self._controller

    def observed_events(self) -> tuple[str, ...]:
        """Return the field events currently wired to :meth:`fire`."""

        return tuple(self._observed_events)

    def observe_field_events(self, events: str | Iterable[str | None] | None) -> None:
        """Wire ``events`` on the field to :meth:`fire`."""

        field = self.get_field()
        if field is None:
            return
        if events is None:
            return
        if isinstance(events, str):
            events = [events]

        for event in dict.fromkeys(events):
            if not event or event in self._observed_events:
                continue
            field.observe(event, self._bound_fire)
            self._observed_events.append(event)
            LOGGER.debug(
                "Wired %s.%s to %s",
                type(self).__name__,
                event,
                self._action,
            )

    def fire(self, *args: Any) -> Any:
        """Call the configured controller action with the subject prepended.

        Raises:
            MisconfiguredCollaboratorError: If the controller does not
                expose a callable named ``action``.
        """

        operation = None
        if isinstance(self._action, str) and self._action:
            operation = getattr(self._controller, self._action, None)
        if not callable(operation):
            raise MisconfiguredCollaboratorError(
                message=(
                    f"{type(self._controller).__name__} has no callable action "
                    f"{self._action!r}"
                ),
                action=self._action,
                controller_class=type(self._controller).__name__,
            )
        return operation(self.get_subject(), *args)

    def tear_down(self) -> None:
        """Disconnect the field, then tear down like any other view."""

        field = self.get_field()
        if isinstance(field, DetachableFieldHandle):
            for event in self._observed_events:
                field.stop_observing(event, self._bound_fire)
        self._observed_events = []
        super().tear_down()


__all__ = ["ActionView"]
