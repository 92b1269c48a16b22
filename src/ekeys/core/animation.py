from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, Union

import numpy as np

from .easing import EasingFunction, segment_easing
from .errors import InvalidRangeError, MissingArgumentError, TypeMismatchError, check_type, is_finite, type_name
from .interpolation import interpolate, values_equal
from .keyframes import Keyframe, Number, normalize_keyframes
from .locator import locate
from .presets import Interpolator, preset_interpolator

RawKeyframes = Sequence[Union[Mapping[str, Any], Keyframe]]
AnimatedValue = Union[Number, list[Number]]


def resolve_interpolator(interpolator: Interpolator | str | None) -> Interpolator | None:
    if interpolator is None or callable(interpolator):
        return interpolator
    if isinstance(interpolator, str):
        return preset_interpolator(interpolator)
    raise TypeMismatchError(f"interpolator must be of type function or string. Received {type_name(interpolator)}")


def _check_time(time: Any) -> float:
    if time is None:
        raise MissingArgumentError("time", "animate()")
    check_type("animate() input time", time, "number")
    if not is_finite(time):
        raise InvalidRangeError(f"animate() input time must be finite. Received {time}")
    return time


class Animation:
    """Keyframes validated once, evaluated at as many times as needed.

    Example:
        anim = Animation([
            {"keyTime": 0, "keyValue": 0},
            {"keyTime": 1, "keyValue": 100, "easeIn": 80},
        ])
        anim.evaluate(0.5)

    `interpolator` replaces the Bezier easing for every segment. It is either a
    callable ``(progress, ease_out, ease_in) -> eased`` receiving the raw ease
    percentages of the two keys, or the name of an easing preset.
    """

    def __init__(self, keyframes: RawKeyframes, *, interpolator: Interpolator | str | None = None) -> None:
        self._keys = normalize_keyframes(keyframes)
        self._times = [k.key_time for k in self._keys]
        self._interpolator = resolve_interpolator(interpolator)
        # segment index -> easing; entries are pure so a concurrent double fill is harmless
        self._easings: dict[int, EasingFunction] = {}

    @property
    def keyframes(self) -> tuple[Keyframe, ...]:
        return self._keys

    @property
    def start_time(self) -> Number:
        return self._keys[0].key_time

    @property
    def end_time(self) -> Number:
        return self._keys[-1].key_time

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"Animation(keys={len(self._keys)}, start={self.start_time!r}, end={self.end_time!r})"

    def __call__(self, time: Number) -> AnimatedValue:
        return self.evaluate(time)

    def _segment_easing(self, index: int) -> EasingFunction:
        easing = self._easings.get(index)
        if easing is None:
            cur = self._keys[index]
            nxt = self._keys[index + 1]
            easing = segment_easing(cur.ease_out, cur.velocity_out, nxt.ease_in, nxt.velocity_in)
            self._easings[index] = easing
        return easing

    def _eased_progress(self, index: int, cur: Keyframe, nxt: Keyframe, progress: float) -> float:
        if self._interpolator is not None:
            return self._interpolator(progress, cur.ease_out, nxt.ease_in)
        return self._segment_easing(index)(progress)

    def evaluate(self, time: Number) -> AnimatedValue:
        time = _check_time(time)
        bracket = locate(self._keys, time, times=self._times)
        cur = bracket.current
        nxt = bracket.following
        if not bracket.needs_interpolation or nxt is None:
            return cur.value_out()
        if values_equal(cur.key_value, nxt.key_value):
            return cur.value_out()

        moved = max(time - cur.key_time, 0)
        length = nxt.key_time - cur.key_time
        progress = min(1, moved / length)
        eased = self._eased_progress(bracket.index, cur, nxt, progress)
        return interpolate(cur.key_value, nxt.key_value, eased, segment=bracket.index)

    def sample(self, times: Iterable[Number] | np.ndarray) -> list[AnimatedValue]:
        if isinstance(times, np.ndarray):
            times = times.reshape(-1).tolist()
        return [self.evaluate(t) for t in times]


def animate(
    keyframes: RawKeyframes,
    time: Number,
    *,
    interpolator: Interpolator | str | None = None,
) -> AnimatedValue:
    """Validate `keyframes` and evaluate them once at `time`."""
    return Animation(keyframes, interpolator=interpolator).evaluate(time)
