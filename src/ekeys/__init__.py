from __future__ import annotations

__version__ = "0.1.0"

from .core import (
    PRESETS,
    Animation,
    DimensionMismatchError,
    EKeysError,
    InvalidRangeError,
    Keyframe,
    MissingArgumentError,
    TypeMismatchError,
    UnknownFieldError,
    UnknownPresetError,
    animate,
    get_preset,
    make_easing,
    normalize_keyframes,
    preset_interpolator,
    preset_names,
    validate_keyframe,
)
from .runtime.server import EKeysServer, run
from .sdk.client import EKeysClient

__all__ = [
    "__version__",
    "Animation",
    "animate",
    "Keyframe",
    "validate_keyframe",
    "normalize_keyframes",
    "make_easing",
    "PRESETS",
    "get_preset",
    "preset_interpolator",
    "preset_names",
    "EKeysError",
    "MissingArgumentError",
    "TypeMismatchError",
    "UnknownFieldError",
    "DimensionMismatchError",
    "InvalidRangeError",
    "UnknownPresetError",
    "run",
    "EKeysServer",
    "EKeysClient",
]
