from __future__ import annotations

from .keyframes import (
    key_value_to_json,
    keyframe_from_any,
    keyframe_to_dict,
    keyframes_to_list,
    value_to_json,
)

__all__ = [
    "key_value_to_json",
    "keyframe_to_dict",
    "keyframes_to_list",
    "keyframe_from_any",
    "value_to_json",
]
