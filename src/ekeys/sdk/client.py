from __future__ import annotations

from typing import Any, Iterable

import httpx

from ..api.serializers import keyframe_from_any
from ..core.keyframes import Keyframe


class EKeysClient:
    """HTTP client for a running ekeys server.

    Contract (current):
    - GET  /healthz
    - GET  /api/presets
    - POST /api/keyframes/normalize  {"keyframes": [...]}
    - POST /api/evaluate             {"keyframes": [...], "time": t, "preset"?: name}
    - POST /api/sample               {"keyframes": [...], "times": [...], "preset"?: name}

    Keyframes may be `Keyframe` objects or descriptor dicts.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def _client(self, timeout_s: float) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=timeout_s, transport=self._transport)

    def _get(self, path: str, *, what: str, timeout_s: float) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.get(path)
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to {what}: {res.status_code} {res.text}")
            return dict(res.json())

    def _post(self, path: str, body: dict[str, Any], *, what: str, timeout_s: float) -> dict[str, Any]:
        with self._client(timeout_s) as client:
            res = client.post(path, json=body)
            if res.status_code >= 400:
                raise RuntimeError(f"Failed to {what}: {res.status_code} {res.text}")
            return dict(res.json())

    def health(self, *, timeout_s: float = 2.0) -> bool:
        try:
            data = self._get("/healthz", what="check health", timeout_s=timeout_s)
        except (httpx.HTTPError, RuntimeError):
            return False
        return bool(data.get("ok"))

    def presets(self, *, timeout_s: float = 10.0) -> list[str]:
        data = self._get("/api/presets", what="list presets", timeout_s=timeout_s)
        return [str(n) for n in data.get("presets", [])]

    def normalize(self, keyframes: Iterable[Keyframe | dict[str, Any]], *, timeout_s: float = 10.0) -> list[dict[str, Any]]:
        body = {"keyframes": [keyframe_from_any(k) for k in keyframes]}
        data = self._post("/api/keyframes/normalize", body, what="normalize keyframes", timeout_s=timeout_s)
        return list(data["keyframes"])

    def evaluate(
        self,
        keyframes: Iterable[Keyframe | dict[str, Any]],
        time: float,
        *,
        preset: str | None = None,
        timeout_s: float = 10.0,
    ) -> float | list[float]:
        body: dict[str, Any] = {"keyframes": [keyframe_from_any(k) for k in keyframes], "time": time}
        if preset is not None:
            body["preset"] = preset
        data = self._post("/api/evaluate", body, what="evaluate keyframes", timeout_s=timeout_s)
        return data["value"]

    def sample(
        self,
        keyframes: Iterable[Keyframe | dict[str, Any]],
        times: Iterable[float],
        *,
        preset: str | None = None,
        timeout_s: float = 30.0,
    ) -> list[float | list[float]]:
        body: dict[str, Any] = {
            "keyframes": [keyframe_from_any(k) for k in keyframes],
            "times": list(times),
        }
        if preset is not None:
            body["preset"] = preset
        data = self._post("/api/sample", body, what="sample keyframes", timeout_s=timeout_s)
        return list(data["values"])
