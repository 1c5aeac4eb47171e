"""Exception types raised by the tile shuffling package."""

from __future__ import annotations


class TileShuffleError(Exception):
    """Base class for all package errors."""


class ConfigurationError(TileShuffleError, ValueError):
    """Tile size, seed or image dimensions are unusable."""


class InvalidInputError(TileShuffleError, ValueError):
    """A permutation was requested over something that is not an index sequence."""


class DecodeError(TileShuffleError, ValueError):
    """An image locator could not be fetched or its bytes are not an image."""


class GeometryInvariantViolation(TileShuffleError, RuntimeError):
    """A tile group does not form a regular cols x rows block."""
