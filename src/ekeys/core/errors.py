from __future__ import annotations

from numbers import Integral, Real
from typing import Any

import numpy as np


class EKeysError(Exception):
    """Base class for every error raised while building or evaluating keyframes."""


class MissingArgumentError(EKeysError, ValueError):
    def __init__(self, name: str, where: str) -> None:
        self.name = name
        self.where = where
        super().__init__(f"{name} is required in {where}")


class TypeMismatchError(EKeysError, TypeError):
    pass


class UnknownFieldError(EKeysError, ValueError):
    def __init__(self, index: int, fields: list[str], message: str) -> None:
        self.index = index
        self.fields = fields
        super().__init__(message)


class DimensionMismatchError(EKeysError, ValueError):
    pass


class InvalidRangeError(EKeysError, ValueError):
    pass


class UnknownPresetError(EKeysError, KeyError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown easing preset: {self.name}"


def type_name(value: Any) -> str:
    """Short type name used in error messages (``number``, ``array``, ``string``...)."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    # numpy arrays report their dimensionality so 2-D input is not called "array".
    ndim = getattr(value, "ndim", None)
    if isinstance(ndim, int):
        return "array" if ndim == 1 else f"{ndim}-d array"
    return type(value).__name__


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite(value: Any) -> bool:
    # ints are always finite, and may be too large to convert to float
    if isinstance(value, Integral):
        return True
    return bool(np.isfinite(float(value)))


def check_type(name: str, value: Any, expected: str | tuple[str, ...]) -> None:
    accepted = (expected,) if isinstance(expected, str) else expected
    received = type_name(value)
    if received not in accepted:
        expected_txt = accepted[0] if len(accepted) == 1 else " or ".join(accepted)
        raise TypeMismatchError(f"{name} must be of type {expected_txt}. Received {received}")
