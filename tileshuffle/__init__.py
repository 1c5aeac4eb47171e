"""Seeded tile-grid image scrambling and reconstruction package."""

from .canvas import Canvas, decode_image, encode_image, load_image
from .errors import (
    ConfigurationError,
    DecodeError,
    GeometryInvariantViolation,
    InvalidInputError,
    TileShuffleError,
)
from .geometry import GroupGeometry, count_columns
from .numeric import create_range, to_int, to_number
from .prng import SeedRandom, make_stream
from .reassembler import ImageReassembler, ReassemblerConfig, unscramble_image
from .shuffle import permute, scramble_order, shuffle, unshuffle
from .splitter import GridPartitioner, Tile

__all__ = [
    "Tile",
    "GridPartitioner",
    "GroupGeometry",
    "count_columns",
    "SeedRandom",
    "make_stream",
    "shuffle",
    "unshuffle",
    "permute",
    "scramble_order",
    "to_number",
    "to_int",
    "create_range",
    "Canvas",
    "decode_image",
    "encode_image",
    "load_image",
    "ReassemblerConfig",
    "ImageReassembler",
    "unscramble_image",
    "TileShuffleError",
    "ConfigurationError",
    "InvalidInputError",
    "DecodeError",
    "GeometryInvariantViolation",
]
