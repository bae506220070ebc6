"""Tests for the base and HTTP request controllers."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest

from statebind.controllers import Controller, RequestController, SingleRequestController
from statebind.core.errors import RequestConfigError
from statebind.services.settings import Settings

BASE_URL = "https://example.test"


class _RecordingHandler:
    """Mock transport handler that records requests and replays a response."""

    def __init__(self, response: httpx.Response | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.response = response or httpx.Response(200, json={"ok": True})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response


class _HookedController(RequestController):
    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.events: list[tuple[str, Any]] = []

    def parameters(self) -> dict[str, Any]:
        return {"client": "statebind", "page": 1}

    def on_create(self) -> None:
        self.events.append(("create", None))

    def on_success(self, payload: Any) -> None:
        self.events.append(("success", payload))

    def on_failure(self, error: Exception) -> None:
        self.events.append(("failure", error))

    def on_complete(self) -> None:
        self.events.append(("complete", None))


def _client(handler: _RecordingHandler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler), base_url=BASE_URL)


def test_controller_defaults_settings() -> None:
    controller = Controller()

    assert isinstance(controller.settings, Settings)


def test_controller_keeps_given_settings() -> None:
    settings = Settings(base_url="https://api")

    assert Controller(settings).settings is settings


def test_successful_post_runs_hooks_in_order() -> None:
    handler = _RecordingHandler(httpx.Response(200, json={"id": 9}))
    controller = _HookedController(action_path="/tracks", action_method="post", client=_client(handler))
    results: list[Any] = []

    assert controller.make_request({"page": 2, "title": "Song"}, callback=results.append) is True

    assert [name for name, _ in controller.events] == ["create", "success", "complete"]
    assert controller.events[1][1] == {"id": 9}
    assert results == [{"id": 9}]

    request = handler.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/tracks"
    assert parse_qs(request.content.decode()) == {
        "client": ["statebind"],
        "page": ["2"],
        "title": ["Song"],
    }


def test_get_sends_parameters_in_query_string() -> None:
    handler = _RecordingHandler()
    controller = RequestController(action_path="/search", action_method="get", client=_client(handler))

    controller.make_request({"q": "blue"})

    request = handler.requests[0]
    assert request.method == "GET"
    assert request.url.params["q"] == "blue"
    assert request.content == b""


def test_failure_status_calls_on_failure_not_callback() -> None:
    handler = _RecordingHandler(httpx.Response(500, text="boom"))
    controller = _HookedController(action_path="/tracks", action_method="post", client=_client(handler))
    results: list[Any] = []

    assert controller.make_request(callback=results.append) is True

    names = [name for name, _ in controller.events]
    assert names == ["create", "failure", "complete"]
    assert isinstance(controller.events[1][1], httpx.HTTPStatusError)
    assert results == []


def test_transport_error_calls_on_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler), base_url=BASE_URL)
    controller = _HookedController(action_path="/tracks", action_method="post", client=client)

    controller.make_request()

    assert isinstance(controller.events[1][1], httpx.ConnectError)
    assert controller.events[-1][0] == "complete"


def test_invalid_json_calls_on_failure() -> None:
    handler = _RecordingHandler(httpx.Response(200, text="not json"))
    controller = _HookedController(action_path="/tracks", action_method="post", client=_client(handler))

    controller.make_request()

    assert controller.events[1][0] == "failure"
    assert isinstance(controller.events[1][1], json.JSONDecodeError)


def test_empty_body_succeeds_with_none_payload() -> None:
    handler = _RecordingHandler(httpx.Response(204))
    controller = _HookedController(action_path="/tracks", action_method="delete", client=_client(handler))
    results: list[Any] = []

    controller.make_request(callback=results.append)

    assert controller.events[1] == ("success", None)
    assert results == [None]


def test_settings_supply_method_and_headers() -> None:
    handler = _RecordingHandler()
    settings = Settings(api_key="secret", request_method="put", default_headers={"X-App": "demo"})
    controller = RequestController(action_path="/tracks/1", settings=settings, client=_client(handler))

    controller.make_request()

    request = handler.requests[0]
    assert controller.method() == "PUT"
    assert request.method == "PUT"
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["X-App"] == "demo"


def test_missing_path_raises() -> None:
    controller = RequestController(action_method="post")

    with pytest.raises(RequestConfigError, match="path must be defined"):
        controller.make_request()


def test_missing_method_raises() -> None:
    controller = RequestController(action_path="/x", settings=Settings(request_method=""))

    with pytest.raises(RequestConfigError, match="method must be defined"):
        controller.method()


def test_owned_client_is_created_lazily_and_closed() -> None:
    controller = RequestController(action_path="/x", settings=Settings(base_url=BASE_URL, request_timeout=5))

    client = controller._get_client()

    assert str(client.base_url).rstrip("/") == BASE_URL
    assert client.timeout.read == 5
    with controller:
        pass
    assert client.is_closed


def test_injected_client_is_not_closed() -> None:
    client = _client(_RecordingHandler())
    controller = RequestController(action_path="/x", client=client)

    controller.close()

    assert not client.is_closed
    client.close()


class TestSingleRequestController:
    """Single-flight behavior."""

    def test_request_from_callback_is_ignored(self) -> None:
        handler = _RecordingHandler()
        controller = SingleRequestController(action_path="/tracks", action_method="post", client=_client(handler))
        nested: list[bool] = []

        def callback(_payload: Any) -> None:
            assert controller.in_progress
            nested.append(controller.make_request())

        assert controller.make_request(callback=callback) is True

        assert nested == [False]
        assert len(handler.requests) == 1
        assert not controller.in_progress

    def test_lock_released_after_failure(self) -> None:
        handler = _RecordingHandler(httpx.Response(404))
        controller = SingleRequestController(action_path="/tracks", action_method="get", client=_client(handler))

        controller.make_request()
        controller.make_request()

        assert len(handler.requests) == 2
        assert not controller.in_progress

    def test_lock_released_when_on_create_raises(self) -> None:
        handler = _RecordingHandler()

        class _FlakyController(SingleRequestController):
            def __init__(self, **kwargs: Any) -> None:
                super().__init__(**kwargs)
                self.completed = 0
                self.fail_next = True

            def on_create(self) -> None:
                if self.fail_next:
                    self.fail_next = False
                    raise RuntimeError("not ready")

            def on_complete(self) -> None:
                self.completed += 1

        controller = _FlakyController(action_path="/tracks", action_method="post", client=_client(handler))

        with pytest.raises(RuntimeError, match="not ready"):
            controller.make_request()

        assert controller.completed == 1
        assert not controller.in_progress
        assert controller.make_request() is True
        assert len(handler.requests) == 1

    def test_lock_released_when_on_complete_is_overridden(self) -> None:
        handler = _RecordingHandler()

        class _Quiet(SingleRequestController):
            def on_complete(self) -> None:
                return None

        controller = _Quiet(action_path="/tracks", action_method="post", client=_client(handler))

        assert controller.make_request() is True
        assert controller.make_request() is True
        assert len(handler.requests) == 2

    def test_config_error_does_not_hold_lock(self) -> None:
        controller = SingleRequestController(action_method="post")

        with pytest.raises(RequestConfigError):
            controller.make_request()

        assert not controller.in_progress


def test_on_complete_runs_when_on_create_raises() -> None:
    handler = _RecordingHandler()

    class _Broken(_HookedController):
        def on_create(self) -> None:
            super().on_create()
            raise RuntimeError("boom")

    controller = _Broken(action_path="/tracks", action_method="post", client=_client(handler))

    with pytest.raises(RuntimeError):
        controller.make_request()

    assert [name for name, _ in controller.events] == ["create", "complete"]
    assert handler.requests == []
