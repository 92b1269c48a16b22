from __future__ import annotations

import math
from types import MappingProxyType
from typing import Callable, Mapping

from .easing import EasingFunction
from .errors import UnknownPresetError

Interpolator = Callable[[float, float, float], float]


def _ease_in_elastic(t: float) -> float:
    if t == 0:
        return 0.0
    return (0.04 - 0.04 / t) * math.sin(25 * t) + 1


def _ease_out_elastic(t: float) -> float:
    if t == 1:
        return 1.0
    return ((0.04 * t) / (t - 1)) * math.sin(25 * (t - 1))


def _ease_in_out_elastic(t: float) -> float:
    t -= 0.5
    if t < 0:
        return (0.02 + 0.01 / t) * math.sin(50 * t)
    if t == 0:
        return 0.5
    return (0.02 - 0.01 / t) * math.sin(50 * t) + 1


_PRESETS: dict[str, EasingFunction] = {
    # no easing, no acceleration
    "linear": lambda t: t,
    "easeInQuad": lambda t: t * t,
    "easeOutQuad": lambda t: t * (2 - t),
    "easeInOutQuad": lambda t: 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t,
    "easeInCubic": lambda t: t * t * t,
    "easeOutCubic": lambda t: (t - 1) ** 3 + 1,
    "easeInOutCubic": lambda t: 4 * t * t * t if t < 0.5 else (t - 1) * (2 * t - 2) * (2 * t - 2) + 1,
    "easeInQuart": lambda t: t * t * t * t,
    "easeOutQuart": lambda t: 1 - (t - 1) ** 4,
    "easeInOutQuart": lambda t: 8 * t**4 if t < 0.5 else 1 - 8 * (t - 1) ** 4,
    "easeInQuint": lambda t: t**5,
    "easeOutQuint": lambda t: 1 + (t - 1) ** 5,
    "easeInOutQuint": lambda t: 16 * t**5 if t < 0.5 else 1 + 16 * (t - 1) ** 5,
    # overshooting curves; endpoints special-cased where the formula divides by zero
    "easeInElastic": _ease_in_elastic,
    "easeOutElastic": _ease_out_elastic,
    "easeInOutElastic": _ease_in_out_elastic,
}

PRESETS: Mapping[str, EasingFunction] = MappingProxyType(_PRESETS)


def preset_names() -> list[str]:
    return sorted(PRESETS)


def get_preset(name: str) -> EasingFunction:
    try:
        return PRESETS[str(name)]
    except KeyError:
        raise UnknownPresetError(str(name)) from None


def preset_interpolator(name: str) -> Interpolator:
    """Wrap a named curve so it can be passed wherever a custom interpolator is accepted.

    The per-key ease percentages are ignored; the curve alone decides the shape.
    """

    curve = get_preset(name)

    def interpolator(progress: float, ease_out: float, ease_in: float) -> float:  # noqa: ARG001
        return curve(progress)

    return interpolator
