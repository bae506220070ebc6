"""Base controller that action views call into."""

from __future__ import annotations

from ..services.settings import Settings


class Controller:
    """Collaborator receiving ``action(subject, *args)`` calls from views.

    The base class has no actions of its own; subclasses define one method
    per action an :class:`~statebind.views.action_view.ActionView` may fire.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or Settings()

    @property
    def settings(self) -> Settings:
        return self._settings


__all__ = ["Controller"]
