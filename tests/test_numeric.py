"""Tests for numeric parsing and range helpers."""

from __future__ import annotations

import pytest

from tileshuffle.errors import ConfigurationError
from tileshuffle.numeric import create_range, to_int, to_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (7, 7),
        (2.5, 2.5),
        ("  42 ", 42),
        ("0b101", 5),
        ("0O17", 15),
        ("0x1F", 31),
        ("3.5", 3.5),
        ("-12", -12),
    ],
)
def test_to_number_accepts(value, expected) -> None:
    """Numbers and numeric strings are parsed."""
    assert to_number(value) == expected


@pytest.mark.parametrize("value", ["-0x1f", "+0x10", "abc", "", "   ", "inf", "nan", None, True, [1], float("nan")])
def test_to_number_rejects(value) -> None:
    """Malformed or non-finite input raises instead of turning into NaN."""
    with pytest.raises(ConfigurationError):
        to_number(value)


def test_to_int() -> None:
    """Integral values convert; fractional ones are rejected with the name."""
    assert to_int("200") == 200
    assert to_int(200.0) == 200
    with pytest.raises(ConfigurationError, match="tile_size"):
        to_int("2.5", "tile_size")
    with pytest.raises(ConfigurationError, match="tile_size"):
        to_int("wide", "tile_size")


def test_create_range_forms() -> None:
    """Single-argument, explicit, descending and stepped ranges."""
    assert create_range(4) == [0, 1, 2, 3]
    assert create_range(0) == []
    assert create_range(0, 4) == [0, 1, 2, 3]
    assert create_range(4, 1) == [4, 3, 2]
    assert create_range(0, -3) == [0, -1, -2]
    assert create_range(0, 10, 3) == [0, 3, 6, 9]
    assert create_range(1, 4, 0) == [1, 1, 1]
    assert create_range("3") == [0, 1, 2]


def test_create_range_never_negative_length() -> None:
    """A step pointing away from the end yields an empty range."""
    assert create_range(0, 5, -1) == []
