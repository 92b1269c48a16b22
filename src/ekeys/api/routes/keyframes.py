from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from ...core.animation import Animation
from ...core.errors import EKeysError, UnknownPresetError
from ...core.keyframes import normalize_keyframes
from ...core.presets import preset_names
from ..parsing import parse_evaluate_body, parse_keyframes, parse_sample_body
from ..serializers import keyframes_to_list, value_to_json


def _http_error(ex: Exception) -> HTTPException:
    if isinstance(ex, UnknownPresetError):
        return HTTPException(status_code=404, detail=str(ex))
    return HTTPException(status_code=400, detail=str(ex))


def mount_keyframes_api(app: FastAPI) -> None:
    """Mount keyframe evaluation endpoints.

    Every request carries its own keyframes; nothing is stored between requests.
    """

    @app.get("/api/presets")
    def list_presets() -> dict[str, list[str]]:
        return {"presets": preset_names()}

    @app.post("/api/keyframes/normalize")
    def normalize(body: dict) -> dict[str, Any]:
        try:
            keys = normalize_keyframes(parse_keyframes(body))
        except (EKeysError, ValueError) as ex:
            raise _http_error(ex)
        return {"keyframes": keyframes_to_list(keys)}

    @app.post("/api/evaluate")
    def evaluate(body: dict) -> dict[str, Any]:
        try:
            keys, time, preset = parse_evaluate_body(body)
            value = value_to_json(Animation(keys, interpolator=preset).evaluate(time))
        except (EKeysError, ValueError) as ex:
            raise _http_error(ex)
        return {"value": value}

    @app.post("/api/sample")
    def sample(body: dict) -> dict[str, Any]:
        try:
            keys, times, preset = parse_sample_body(body)
            anim = Animation(keys, interpolator=preset)
            values = [value_to_json(v) for v in anim.sample(times)]
        except (EKeysError, ValueError) as ex:
            raise _http_error(ex)
        return {"times": times, "values": values}
