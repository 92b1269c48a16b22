from __future__ import annotations

from .body import (
    parse_evaluate_body,
    parse_finite,
    parse_keyframes,
    parse_preset,
    parse_sample_body,
)

__all__ = [
    "parse_keyframes",
    "parse_preset",
    "parse_finite",
    "parse_evaluate_body",
    "parse_sample_body",
]
