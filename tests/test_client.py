from __future__ import annotations

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from ekeys.core.keyframes import Keyframe
from ekeys.runtime.app import create_app
from ekeys.sdk.client import EKeysClient


def _app_transport() -> httpx.MockTransport:
    app_client = TestClient(create_app())

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        res = app_client.request(request.method, request.url.path, json=body)
        return httpx.Response(res.status_code, json=res.json())

    return httpx.MockTransport(handler)


def test_client_round_trips_through_the_app() -> None:
    client = EKeysClient("http://ekeys.test", transport=_app_transport())
    keys = [
        Keyframe(key_time=0, key_value=0, ease_out=0),
        {"keyTime": 10, "keyValue": 100, "easeIn": 0},
    ]

    assert client.health() is True
    assert "easeOutCubic" in client.presets()
    assert client.evaluate(keys, 5) == 50.0
    assert client.evaluate(keys, 5, preset="easeInQuad") == 25.0
    assert client.sample(keys, [0, 2.5, 10]) == [0, 25.0, 100]
    normalized = client.normalize(list(reversed(keys)))
    assert [k["keyTime"] for k in normalized] == [0, 10]


def test_client_raises_on_http_errors() -> None:
    client = EKeysClient("http://ekeys.test", transport=_app_transport())
    with pytest.raises(RuntimeError, match="Failed to evaluate keyframes: 400"):
        client.evaluate([{"value": 1, "keyTime": 0}], 0)
    with pytest.raises(RuntimeError, match="404"):
        client.evaluate([{"keyTime": 0, "keyValue": 1}], 0, preset="nope")


def test_client_request_shape() -> None:
    seen: list[tuple[str, str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"value": [1.0, 2.0]})

    client = EKeysClient("http://ekeys.test/", transport=httpx.MockTransport(handler))
    assert client.base_url == "http://ekeys.test"
    assert client.evaluate([{"keyTime": 0, "keyValue": [1, 2]}], 0.5) == [1.0, 2.0]
    assert seen == [("POST", "/api/evaluate", {"keyframes": [{"keyTime": 0, "keyValue": [1, 2]}], "time": 0.5})]


def test_health_is_false_when_unreachable() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = EKeysClient("http://ekeys.test", transport=httpx.MockTransport(handler))
    assert client.health() is False
