from __future__ import annotations

from typing import Any

import numpy as np

MAX_SAMPLE_COUNT = 100_000


def parse_keyframes(body: dict[str, Any]) -> list[Any]:
    if "keyframes" not in body:
        raise ValueError("Missing field: keyframes")
    keys = body.get("keyframes")
    if not isinstance(keys, list):
        raise ValueError("keyframes must be a list")
    return keys


def parse_preset(body: dict[str, Any]) -> str | None:
    preset = body.get("preset")
    if preset is None:
        return None
    name = str(preset).strip()
    if not name:
        raise ValueError("Invalid preset")
    return name


def parse_finite(value: Any, *, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field}")
    try:
        v = float(value)
    except Exception as ex:
        raise ValueError(f"Invalid {field}") from ex
    if not np.isfinite(v):
        raise ValueError(f"Invalid {field}")
    return v


def parse_evaluate_body(body: dict[str, Any]) -> tuple[list[Any], Any, str | None]:
    """Split an evaluate request into (keyframes, time, preset).

    `time` is passed through untouched; its type is checked by the evaluator so the
    HTTP and in-process paths report the same errors.
    """

    keys = parse_keyframes(body)
    if "time" not in body:
        raise ValueError("Missing field: time")
    return keys, body.get("time"), parse_preset(body)


def parse_sample_body(body: dict[str, Any]) -> tuple[list[Any], list[Any], str | None]:
    """Split a sample request into (keyframes, times, preset).

    Times come either as an explicit ``times`` list or as ``start``/``end``/``count``,
    expanded to `count` evenly spaced times including both ends.
    """

    keys = parse_keyframes(body)
    preset = parse_preset(body)

    has_times = "times" in body
    has_range = any(k in body for k in ("start", "end", "count"))
    if has_times == has_range:
        raise ValueError("Provide either times or start/end/count")

    if has_times:
        times = body.get("times")
        if not isinstance(times, list):
            raise ValueError("times must be a list")
        return keys, times, preset

    if not all(k in body for k in ("start", "end", "count")):
        raise ValueError("start, end and count must be provided together")
    start = parse_finite(body.get("start"), field="start")
    end = parse_finite(body.get("end"), field="end")
    raw_count = body.get("count")
    if isinstance(raw_count, bool):
        raise ValueError("Invalid count")
    try:
        count = int(raw_count)
    except Exception as ex:
        raise ValueError("Invalid count") from ex
    if count < 2:
        raise ValueError("count must be >= 2")
    if count > MAX_SAMPLE_COUNT:
        raise ValueError(f"count must be <= {MAX_SAMPLE_COUNT}")
    return keys, np.linspace(start, end, count, dtype=np.float64).tolist(), preset
