from __future__ import annotations

from .animation import Animation, AnimatedValue, animate, resolve_interpolator
from .easing import EasingFunction, linear, make_easing, segment_easing
from .errors import (
    DimensionMismatchError,
    EKeysError,
    InvalidRangeError,
    MissingArgumentError,
    TypeMismatchError,
    UnknownFieldError,
    UnknownPresetError,
)
from .interpolation import interpolate, values_equal
from .keyframes import Keyframe, normalize_keyframes, validate_keyframe
from .locator import Bracket, locate
from .presets import PRESETS, Interpolator, get_preset, preset_interpolator, preset_names

__all__ = [
    "Animation",
    "AnimatedValue",
    "animate",
    "resolve_interpolator",
    "EasingFunction",
    "linear",
    "make_easing",
    "segment_easing",
    "EKeysError",
    "MissingArgumentError",
    "TypeMismatchError",
    "UnknownFieldError",
    "DimensionMismatchError",
    "InvalidRangeError",
    "UnknownPresetError",
    "interpolate",
    "values_equal",
    "Keyframe",
    "validate_keyframe",
    "normalize_keyframes",
    "Bracket",
    "locate",
    "PRESETS",
    "Interpolator",
    "get_preset",
    "preset_interpolator",
    "preset_names",
]
