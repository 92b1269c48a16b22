from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

import numpy as np

from .errors import (
    InvalidRangeError,
    MissingArgumentError,
    TypeMismatchError,
    UnknownFieldError,
    check_type,
    is_finite,
    is_number,
    type_name,
)

Number = Union[int, float]
KeyValue = Union[Number, tuple[Number, ...]]

DEFAULT_EASE_IN = 33
DEFAULT_EASE_OUT = 33
DEFAULT_VELOCITY_IN = 0
DEFAULT_VELOCITY_OUT = 0

# descriptor key -> Keyframe attribute
DESCRIPTOR_FIELDS: dict[str, str] = {
    "keyTime": "key_time",
    "keyValue": "key_value",
    "easeIn": "ease_in",
    "easeOut": "ease_out",
    "velocityIn": "velocity_in",
    "velocityOut": "velocity_out",
}

_FIELD_HINTS: dict[str, str] = {
    "time": "keyTime",
    "value": "keyValue",
    **{attr: key for key, attr in DESCRIPTOR_FIELDS.items()},
}


@dataclass(frozen=True)
class Keyframe:
    key_time: Number
    key_value: KeyValue
    ease_in: Number = DEFAULT_EASE_IN
    ease_out: Number = DEFAULT_EASE_OUT
    velocity_in: Number = DEFAULT_VELOCITY_IN
    velocity_out: Number = DEFAULT_VELOCITY_OUT

    @property
    def is_vector(self) -> bool:
        return isinstance(self.key_value, tuple)

    def value_out(self) -> Number | list[Number]:
        """The key value in output shape: vectors are handed out as fresh lists."""
        if isinstance(self.key_value, tuple):
            return list(self.key_value)
        return self.key_value


def _unknown_field_message(index: int, names: list[str]) -> str:
    msg = f"Unexpected property on keyframe {index}: {', '.join(names)}"
    for name in names:
        hint = _FIELD_HINTS.get(name)
        if hint is not None:
            msg += f'. Did you mean "{hint}"?'
    return msg


def _coerce_key_value(value: Any, index: int) -> KeyValue:
    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise TypeMismatchError(
                f"Keyframe {index} value must be of type number or array. Received {type_name(value)}"
            )
        value = value.tolist()
    elif isinstance(value, np.generic) and is_number(value):
        value = value.item()

    check_type(f"Keyframe {index} value", value, ("number", "array"))
    if not isinstance(value, (list, tuple)):
        return value

    for i, item in enumerate(value):
        if not is_number(item):
            raise TypeMismatchError(
                f"Keyframe {index} value[{i}] must be of type number. Received {type_name(item)}"
            )
    return tuple(value)


def validate_keyframe(raw: Mapping[str, Any] | Keyframe, index: int) -> Keyframe:
    """Check one keyframe descriptor and fill in its easing defaults.

    `raw` is a mapping with the camelCase descriptor keys (``keyTime``, ``keyValue``,
    ``easeIn``, ``easeOut``, ``velocityIn``, ``velocityOut``). A `Keyframe` instance
    is re-validated field by field, so hand-built instances get the same checks.
    """

    if isinstance(raw, Keyframe):
        raw = {key: getattr(raw, attr) for key, attr in DESCRIPTOR_FIELDS.items()}
    if not isinstance(raw, Mapping):
        raise TypeMismatchError(f"Keyframe {index} must be of type object. Received {type_name(raw)}")

    unknown = [str(k) for k in raw if k not in DESCRIPTOR_FIELDS]
    if unknown:
        raise UnknownFieldError(index, unknown, _unknown_field_message(index, unknown))

    key_time = raw.get("keyTime")
    key_value = raw.get("keyValue")
    if key_time is None:
        raise MissingArgumentError("keyTime", f"keyframe {index}")
    if key_value is None:
        raise MissingArgumentError("keyValue", f"keyframe {index}")

    ease_in = raw.get("easeIn", DEFAULT_EASE_IN)
    ease_out = raw.get("easeOut", DEFAULT_EASE_OUT)
    velocity_in = raw.get("velocityIn", DEFAULT_VELOCITY_IN)
    velocity_out = raw.get("velocityOut", DEFAULT_VELOCITY_OUT)

    check_type(f"Keyframe {index} time", key_time, "number")
    if not is_finite(key_time):
        raise InvalidRangeError(f"Keyframe {index} time must be finite. Received {key_time}")
    value = _coerce_key_value(key_value, index)
    check_type(f"Keyframe {index} easeIn", ease_in, "number")
    check_type(f"Keyframe {index} easeOut", ease_out, "number")
    check_type(f"Keyframe {index} velocityIn", velocity_in, "number")
    check_type(f"Keyframe {index} velocityOut", velocity_out, "number")

    return Keyframe(
        key_time=key_time,
        key_value=value,
        ease_in=ease_in,
        ease_out=ease_out,
        velocity_in=velocity_in,
        velocity_out=velocity_out,
    )


def normalize_keyframes(raw_keys: Sequence[Mapping[str, Any] | Keyframe]) -> tuple[Keyframe, ...]:
    """Validate every descriptor, then sort by time.

    Nothing is sorted until every keyframe has passed validation. The sort is
    stable, so keyframes sharing a time stay in the order they were given.
    """

    if raw_keys is None:
        raise MissingArgumentError("keyframes", "animate()")
    if not isinstance(raw_keys, (list, tuple)):
        raise TypeMismatchError(f"animate() input keyframes must be of type array. Received {type_name(raw_keys)}")
    if len(raw_keys) == 0:
        raise MissingArgumentError("At least one keyframe", "animate()")

    validated = [validate_keyframe(raw, index) for index, raw in enumerate(raw_keys)]
    return tuple(sorted(validated, key=lambda k: k.key_time))
