from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from ekeys.api import create_api_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_api_app())


LINEAR_KEYS = [
    {"keyTime": 0, "keyValue": 0, "easeOut": 0},
    {"keyTime": 10, "keyValue": 100, "easeIn": 0},
]


def test_health_and_version(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"ok": True}
    from ekeys import __version__

    assert client.get("/api/version").json() == {"version": __version__}


def test_presets_listing(client: TestClient) -> None:
    res = client.get("/api/presets")
    assert res.status_code == 200
    names = res.json()["presets"]
    assert "linear" in names
    assert names == sorted(names)


def test_evaluate_scalar_and_vector(client: TestClient) -> None:
    res = client.post("/api/evaluate", json={"keyframes": LINEAR_KEYS, "time": 5})
    assert res.status_code == 200
    assert res.json() == {"value": 50.0}

    vec = [
        {"keyTime": 0, "keyValue": [0, 0], "easeOut": 0},
        {"keyTime": 10, "keyValue": [10, 20], "easeIn": 0},
    ]
    res = client.post("/api/evaluate", json={"keyframes": vec, "time": 5})
    assert res.json() == {"value": [5.0, 10.0]}


def test_evaluate_boundary_keeps_ints(client: TestClient) -> None:
    res = client.post("/api/evaluate", json={"keyframes": LINEAR_KEYS, "time": 50})
    assert res.json()["value"] == 100


def test_evaluate_with_preset(client: TestClient) -> None:
    res = client.post("/api/evaluate", json={"keyframes": LINEAR_KEYS, "time": 5, "preset": "easeInQuad"})
    assert res.json() == {"value": 25.0}

    missing = client.post("/api/evaluate", json={"keyframes": LINEAR_KEYS, "time": 5, "preset": "nope"})
    assert missing.status_code == 404
    assert "nope" in missing.json()["detail"]


@pytest.mark.parametrize(
    ("body", "fragment"),
    [
        ({"time": 1}, "Missing field: keyframes"),
        ({"keyframes": LINEAR_KEYS}, "Missing field: time"),
        ({"keyframes": "x", "time": 1}, "keyframes must be a list"),
        ({"keyframes": LINEAR_KEYS, "time": "soon"}, "must be of type number"),
        ({"keyframes": [{"time": 0, "keyValue": 1}], "time": 1}, 'Did you mean "keyTime"?'),
        ({"keyframes": [{"keyValue": 1}], "time": 1}, "keyTime is required in keyframe 0"),
        ({"keyframes": [], "time": 1}, "At least one keyframe"),
    ],
)
def test_evaluate_errors_are_400(client: TestClient, body: dict, fragment: str) -> None:
    res = client.post("/api/evaluate", json=body)
    assert res.status_code == 400
    assert fragment in res.json()["detail"]


def test_dimension_mismatch_is_400(client: TestClient) -> None:
    keys = [{"keyTime": 0, "keyValue": [0, 0]}, {"keyTime": 1, "keyValue": [0, 0, 0]}]
    res = client.post("/api/evaluate", json={"keyframes": keys, "time": 0.5})
    assert res.status_code == 400
    assert "same dimension" in res.json()["detail"]


def test_overflowing_result_is_400(client: TestClient) -> None:
    keys = [
        {"keyTime": 0, "keyValue": -1e308, "easeOut": 0},
        {"keyTime": 10, "keyValue": 1e308, "easeIn": 0},
    ]
    res = client.post("/api/evaluate", json={"keyframes": keys, "time": 5})
    assert res.status_code == 400
    assert "not finite" in res.json()["detail"]

    res = client.post("/api/sample", json={"keyframes": keys, "times": [0, 5, 10]})
    assert res.status_code == 400


def test_sample_with_explicit_times(client: TestClient) -> None:
    res = client.post("/api/sample", json={"keyframes": LINEAR_KEYS, "times": [-1, 2.5, 5, 11]})
    assert res.status_code == 200
    assert res.json()["values"] == [0, 25.0, 50.0, 100]


def test_sample_with_range(client: TestClient) -> None:
    res = client.post("/api/sample", json={"keyframes": LINEAR_KEYS, "start": 0, "end": 10, "count": 3})
    assert res.status_code == 200
    data = res.json()
    assert data["times"] == [0.0, 5.0, 10.0]
    assert data["values"] == [0, 50.0, 100]


@pytest.mark.parametrize(
    "extra",
    [
        {},
        {"times": [1], "start": 0, "end": 1, "count": 2},
        {"start": 0, "end": 1},
        {"start": 0, "end": 1, "count": 1},
        {"start": "a", "end": 1, "count": 3},
        {"times": "1,2"},
        {"times": [1, "x"]},
    ],
)
def test_sample_errors_are_400(client: TestClient, extra: dict) -> None:
    res = client.post("/api/sample", json={"keyframes": LINEAR_KEYS, **extra})
    assert res.status_code == 400


def test_normalize_sorts_and_fills_defaults(client: TestClient) -> None:
    res = client.post(
        "/api/keyframes/normalize",
        json={"keyframes": [{"keyTime": 2, "keyValue": [1, 2]}, {"keyTime": 1, "keyValue": [0, 0], "easeIn": 50}]},
    )
    assert res.status_code == 200
    assert res.json()["keyframes"] == [
        {"keyTime": 1, "keyValue": [0, 0], "easeIn": 50, "easeOut": 33, "velocityIn": 0, "velocityOut": 0},
        {"keyTime": 2, "keyValue": [1, 2], "easeIn": 33, "easeOut": 33, "velocityIn": 0, "velocityOut": 0},
    ]


def test_cors_origins_are_opt_in() -> None:
    headers = {"Origin": "http://localhost:5173"}
    res = TestClient(create_api_app()).get("/healthz", headers=headers)
    assert "access-control-allow-origin" not in res.headers

    app = create_api_app(allow_origins=["http://localhost:5173"])
    res = TestClient(app).get("/healthz", headers=headers)
    assert res.headers["access-control-allow-origin"] == "http://localhost:5173"
