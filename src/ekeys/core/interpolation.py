from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError, TypeMismatchError, is_number, type_name
from .keyframes import KeyValue, Number


def interpolate_scalar(start: Number, end: Number, progress: float) -> float:
    return start + (end - start) * progress


def interpolate_vector(
    start: tuple[Number, ...] | list[Number],
    end: tuple[Number, ...] | list[Number],
    progress: float,
    *,
    segment: int = 0,
) -> list[float]:
    if len(start) != len(end):
        raise DimensionMismatchError(
            f"Keyframe {segment} and {segment + 1} values must be of the same dimension. "
            f"Received {len(start)} and {len(end)}"
        )
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    return (a + (b - a) * progress).tolist()


def interpolate(start: KeyValue, end: KeyValue, progress: float, *, segment: int = 0) -> Number | list[float]:
    """Blend two key values of the same shape by `progress`.

    Scalars give a number, vectors give a list. `segment` is the index of the
    starting key and only feeds the error messages.
    """

    start_is_vec = isinstance(start, (tuple, list))
    end_is_vec = isinstance(end, (tuple, list))
    if start_is_vec and end_is_vec:
        return interpolate_vector(start, end, progress, segment=segment)  # type: ignore[arg-type]
    if is_number(start) and is_number(end):
        return interpolate_scalar(start, end, progress)  # type: ignore[arg-type]
    raise TypeMismatchError(
        f"Keyframe {segment} and {segment + 1} values must be of the same type. "
        f"Received {type_name(start)} and {type_name(end)}"
    )


def values_equal(a: KeyValue, b: KeyValue) -> bool:
    """Value equality between two key values; vectors compare element-wise."""
    if isinstance(a, (tuple, list)) and isinstance(b, (tuple, list)):
        return len(a) == len(b) and all(x == y for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return a == b
    return False
