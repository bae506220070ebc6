"""Controllers that report subject changes to an HTTP endpoint."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import httpx

from ..core.errors import RequestConfigError
from ..services.settings import Settings
from .base import Controller

LOGGER = logging.getLogger(__name__)

ResponseCallback = Callable[[Any], None]


class RequestController(Controller):
    """Controller that sends one HTTP request per :meth:`make_request`.

    The request goes to ``action_path`` (resolved against
    ``settings.base_url`` when the controller owns its client) with
    ``action_method``. Parameters travel in the query string for GET and as
    a form body otherwise. Responses are decoded as JSON.

    Subclasses customize behavior through the hooks :meth:`parameters`,
    :meth:`on_create`, :meth:`on_success`, :meth:`on_failure` and
    :meth:`on_complete`. Transport errors, non-2xx statuses and undecodable
    bodies are handed to :meth:`on_failure`; nothing is retried.

    Args:
        action_path: Path or URL the controller talks to.
        action_method: HTTP method; defaults to ``settings.request_method``.
        settings: Connection settings (base URL, timeout, headers).
        client: Optional pre-configured ``httpx.Client``; when given it is
            used as-is and never closed by the controller.
    """

    def __init__(
        self,
        *,
        action_path: str | None = None,
        action_method: str | None = None,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(settings)
        self._action_path = action_path
        self._action_method = action_method or self.settings.request_method
        self._client = client
        self._owns_client = client is None

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def method(self) -> str:
        """Return the HTTP method of the request."""

        if not self._action_method:
            raise RequestConfigError(message=f"{type(self).__name__}: method must be defined")
        return self._action_method.upper()

    def path(self) -> str:
        """Return the path the request is sent to."""

        if not self._action_path:
            raise RequestConfigError(message=f"{type(self).__name__}: path must be defined")
        return self._action_path

    def parameters(self) -> dict[str, Any]:
        """Default parameters merged under every request's own parameters."""

        return {}

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def make_request(
        self,
        params: Mapping[str, Any] | None = None,
        callback: ResponseCallback | None = None,
    ) -> bool:
        """Send the request and dispatch the outcome to the hooks.

        ``callback`` is called with the decoded payload after
        :meth:`on_success`.

        Returns:
            True once the request has been attempted.

        Raises:
            RequestConfigError: If the path or method is missing.
        """

        method = self.method()
        path = self.path()
        data = {**self.parameters(), **dict(params or {})}

        LOGGER.debug("%s %s with %d parameter(s)", method, path, len(data))
        try:
            self.on_create()
            response = self._send(method, path, data)
            response.raise_for_status()
            payload = response.json() if response.content else None
        except (httpx.HTTPError, ValueError) as exc:
            LOGGER.warning("%s %s failed: %s", method, path, exc)
            self.on_failure(exc)
        else:
            self.on_success(payload)
            if callback is not None:
                callback(payload)
        finally:
            self.on_complete()
        return True

    def close(self) -> None:
        """Close the HTTP client if the controller created it."""

        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "RequestController":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def on_create(self) -> None:
        """Called right before the request is sent."""

    def on_success(self, payload: Any) -> None:
        """Called with the decoded JSON payload of a successful response."""

    def on_failure(self, error: Exception) -> None:
        """Called with the error of a failed request."""

    def on_complete(self) -> None:
        """Called after every request, successful or not."""

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _send(self, method: str, path: str, data: dict[str, Any]) -> httpx.Response:
        client = self._get_client()
        headers = self.settings.request_headers()
        if method == "GET":
            return client.request(method, path, params=data, headers=headers)
        return client.request(method, path, data=data, headers=headers)

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.settings.base_url,
                timeout=self.settings.request_timeout,
            )
            self._owns_client = True
        return self._client


class SingleRequestController(RequestController):
    """Request controller that allows only one request in flight.

    A :meth:`make_request` issued while another request has not completed
    yet, for instance from a hook or a callback, is ignored. The lock is
    released when :meth:`make_request` returns or raises.
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    def make_request(
        self,
        params: Mapping[str, Any] | None = None,
        callback: ResponseCallback | None = None,
    ) -> bool:
        """Send the request unless one is already in progress.

        Returns:
            False when the call was ignored because a request is in flight.
        """

        if self._in_progress:
            LOGGER.debug("Request to %s already in progress; ignoring", self._action_path)
            return False
        self._in_progress = True
        try:
            return super().make_request(params, callback)
        finally:
            self._in_progress = False


__all__ = ["RequestController", "SingleRequestController", "ResponseCallback"]
