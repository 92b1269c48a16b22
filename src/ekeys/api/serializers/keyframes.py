from __future__ import annotations

from typing import Any, Iterable

from ...core.animation import AnimatedValue
from ...core.errors import InvalidRangeError, is_finite
from ...core.keyframes import Keyframe


def _number_to_json(v: Any) -> int | float:
    # ints stay ints so boundary values round-trip unchanged
    if isinstance(v, int) and not isinstance(v, bool):
        return int(v)
    return float(v)


def key_value_to_json(value: Any) -> int | float | list[int | float]:
    if isinstance(value, (tuple, list)):
        return [_number_to_json(x) for x in value]
    return _number_to_json(value)


def keyframe_to_dict(key: Keyframe) -> dict[str, Any]:
    return {
        "keyTime": _number_to_json(key.key_time),
        "keyValue": key_value_to_json(key.key_value),
        "easeIn": _number_to_json(key.ease_in),
        "easeOut": _number_to_json(key.ease_out),
        "velocityIn": _number_to_json(key.velocity_in),
        "velocityOut": _number_to_json(key.velocity_out),
    }


def keyframes_to_list(keys: Iterable[Keyframe]) -> list[dict[str, Any]]:
    return [keyframe_to_dict(k) for k in keys]


def value_to_json(value: AnimatedValue) -> int | float | list[int | float]:
    out = key_value_to_json(value)
    # JSON has no inf or nan, so an overflowing result is an error rather than null
    items = out if isinstance(out, list) else [out]
    if not all(is_finite(v) for v in items):
        raise InvalidRangeError(f"Evaluated value is not finite: {value}")
    return out


def keyframe_from_any(key: Keyframe | dict[str, Any]) -> Any:
    """Descriptor form of `key`, so SDK callers can mix `Keyframe` objects and dicts."""
    if isinstance(key, Keyframe):
        return keyframe_to_dict(key)
    return key
