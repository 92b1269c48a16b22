from __future__ import annotations

from typing import Callable

import numpy as np

from .errors import InvalidRangeError

EasingFunction = Callable[[float], float]

NEWTON_ITERATIONS = 4
NEWTON_MIN_SLOPE = 0.001
SUBDIVISION_PRECISION = 1e-7
SUBDIVISION_MAX_ITERATIONS = 10
SPLINE_TABLE_SIZE = 11
SAMPLE_STEP_SIZE = 1.0 / (SPLINE_TABLE_SIZE - 1.0)


def _coefficients(a1: float, a2: float) -> tuple[float, float, float]:
    return 1.0 - 3.0 * a2 + 3.0 * a1, 3.0 * a2 - 6.0 * a1, 3.0 * a1


def _calc_bezier(t: float, a1: float, a2: float) -> float:
    """x(t) given (x1, x2), or y(t) given (y1, y2)."""
    a, b, c = _coefficients(a1, a2)
    return ((a * t + b) * t + c) * t


def _slope(t: float, a1: float, a2: float) -> float:
    """dx/dt given (x1, x2), or dy/dt given (y1, y2)."""
    a, b, c = _coefficients(a1, a2)
    return 3.0 * a * t * t + 2.0 * b * t + c


def _binary_subdivide(x: float, lo: float, hi: float, x1: float, x2: float) -> float:
    t = lo
    for _ in range(SUBDIVISION_MAX_ITERATIONS):
        t = lo + (hi - lo) / 2.0
        residual = _calc_bezier(t, x1, x2) - x
        if residual > 0.0:
            hi = t
        else:
            lo = t
        if abs(residual) <= SUBDIVISION_PRECISION:
            break
    return t


def _newton_raphson(x: float, guess: float, x1: float, x2: float) -> float:
    for _ in range(NEWTON_ITERATIONS):
        slope = _slope(guess, x1, x2)
        if slope == 0.0:
            return guess
        guess -= (_calc_bezier(guess, x1, x2) - x) / slope
    return guess


def linear(x: float) -> float:
    return x


def _sample_table(x1: float, x2: float) -> list[float]:
    a, b, c = _coefficients(x1, x2)
    t = np.linspace(0.0, 1.0, SPLINE_TABLE_SIZE, dtype=np.float64)
    return (((a * t + b) * t + c) * t).tolist()


def make_easing(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """Build a cubic Bezier easing curve through (0, 0), (x1, y1), (x2, y2), (1, 1).

    The returned function maps linear progress in [0, 1] to eased progress. The
    x handles must stay in [0, 1] so the curve remains a function of x; the y
    handles are free, which is what allows overshoot.

    The solver inverts x(t) with a sampled table for the first guess, then refines
    with Newton-Raphson where the curve is steep enough and falls back to
    bisection where it is nearly flat.
    """

    x1 = float(x1)
    y1 = float(y1)
    x2 = float(x2)
    y2 = float(y2)
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise InvalidRangeError(f"bezier x values must be in [0, 1] range. Received x1={x1}, x2={x2}")

    if x1 == y1 and x2 == y2:
        return linear

    samples = _sample_table(x1, x2)
    last_sample = SPLINE_TABLE_SIZE - 1

    def t_for_x(x: float) -> float:
        current = 1
        while current != last_sample and samples[current] <= x:
            current += 1
        current -= 1
        interval_start = current * SAMPLE_STEP_SIZE

        dist = (x - samples[current]) / (samples[current + 1] - samples[current])
        guess = interval_start + dist * SAMPLE_STEP_SIZE

        initial_slope = _slope(guess, x1, x2)
        if initial_slope >= NEWTON_MIN_SLOPE:
            return _newton_raphson(x, guess, x1, x2)
        if initial_slope == 0.0:
            return guess
        return _binary_subdivide(x, interval_start, interval_start + SAMPLE_STEP_SIZE, x1, x2)

    def bezier_easing(x: float) -> float:
        if x == 0:
            return 0
        if x == 1:
            return 1
        return _calc_bezier(t_for_x(x), y1, y2)

    return bezier_easing


def segment_easing(ease_out: float, velocity_out: float, ease_in: float, velocity_in: float) -> EasingFunction:
    """Easing for the segment leaving a key with (ease_out, velocity_out) and
    entering the next key with (ease_in, velocity_in). All four are percentages."""

    return make_easing(
        ease_out / 100.0,
        velocity_out / 100.0,
        1.0 - ease_in / 100.0,
        1.0 - velocity_in / 100.0,
    )
