from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Literal, Sequence

from .keyframes import Keyframe

BracketKind = Literal["before", "after", "exact", "segment"]


@dataclass(frozen=True)
class Bracket:
    """Where a query time falls among sorted keyframes.

    For ``before``/``after``/``exact`` only `current` matters and its value is used
    as-is. For ``segment``, `current` and `following` are the keys at `index` and
    `index + 1` and the value has to be interpolated.
    """

    kind: BracketKind
    index: int
    current: Keyframe
    following: Keyframe | None = None

    @property
    def needs_interpolation(self) -> bool:
        return self.kind == "segment"


def locate(keys: Sequence[Keyframe], time: float, *, times: Sequence[float] | None = None) -> Bracket:
    if not keys:
        raise ValueError("keys cannot be empty")

    first = keys[0]
    last = keys[-1]
    if time <= first.key_time:
        return Bracket(kind="before", index=0, current=first)
    if time >= last.key_time:
        return Bracket(kind="after", index=len(keys) - 1, current=last)

    if times is None:
        times = [k.key_time for k in keys]
    # Greatest i with keys[i].key_time <= time; first < time < last so 0 <= i < len - 1.
    idx = bisect_right(times, time) - 1
    current = keys[idx]
    if current.key_time == time:
        return Bracket(kind="exact", index=idx, current=current)
    return Bracket(kind="segment", index=idx, current=current, following=keys[idx + 1])
