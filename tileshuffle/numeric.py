"""Strict numeric parsing and integer range helpers."""

from __future__ import annotations

import math
import re
from typing import Any, List, Optional, Union

from .errors import ConfigurationError

Number = Union[int, float]

_BINARY_RE = re.compile(r"^0b[01]+$", re.IGNORECASE)
_OCTAL_RE = re.compile(r"^0o[0-7]+$", re.IGNORECASE)
_HEX_RE = re.compile(r"^0x[0-9a-f]+$", re.IGNORECASE)
_SIGNED_HEX_RE = re.compile(r"^[-+]0x[0-9a-f]+$", re.IGNORECASE)


def to_number(value: Any) -> Number:
    """Interpret `value` as a finite int or float.

    Numbers pass through unchanged. Strings are stripped and may use the
    ``0b``/``0o``/``0x`` prefixes; signed hex literals are rejected. Anything
    that does not describe a finite number raises ConfigurationError.
    """
    if isinstance(value, bool):
        raise ConfigurationError("booleans are not numbers")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConfigurationError(f"number must be finite, got {value!r}")
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"cannot interpret {type(value).__name__} as a number")

    text = value.strip()
    if not text:
        raise ConfigurationError("empty string is not a number")
    if _BINARY_RE.match(text):
        return int(text[2:], 2)
    if _OCTAL_RE.match(text):
        return int(text[2:], 8)
    if _HEX_RE.match(text):
        return int(text[2:], 16)
    if _SIGNED_HEX_RE.match(text):
        raise ConfigurationError(f"signed hex literals are not supported: {value!r}")

    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError as exc:
        raise ConfigurationError(f"not a number: {value!r}") from exc
    if not math.isfinite(number):
        raise ConfigurationError(f"number must be finite, got {value!r}")
    return number


def to_int(value: Any, name: str = "value") -> int:
    """Interpret `value` as an integer, naming `name` in the error."""
    try:
        number = to_number(value)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{name}: {exc}") from exc
    if isinstance(number, float):
        if not number.is_integer():
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        return int(number)
    return number


def create_range(start: Any, end: Optional[Any] = None, step: Optional[Any] = None) -> List[Number]:
    """Return the arithmetic progression from `start` up to, not including, `end`.

    With a single argument the range is ``[0, start)``. The step defaults to
    1 when counting up and -1 when counting down; a zero step repeats
    `start` for as many items as a unit step would produce.
    """
    start = to_number(start) if start else 0
    if end is None:
        end = start
        start = 0
    else:
        end = to_number(end)
    step = (1 if start < end else -1) if step is None else to_number(step)

    length = max(math.ceil((end - start) / (step or 1)), 0)
    result: List[Number] = []
    value = start
    for _ in range(length):
        result.append(value)
        value += step
    return result
