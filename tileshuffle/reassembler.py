"""Reassemble seeded tile-scrambled images."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List

import numpy as np

from .canvas import Canvas, decode_image
from .errors import ConfigurationError
from .geometry import GroupGeometry
from .numeric import to_int
from .shuffle import permute, scramble_order
from .splitter import DEFAULT_TILE_SIZE, GridPartitioner, Tile

DEFAULT_SEED = "stay"

PermutationFn = Callable[[int, str], List[int]]


@dataclass
class ReassemblerConfig:
    """Parameters shared by the scrambler and the unscrambler."""

    tile_size: int = DEFAULT_TILE_SIZE
    seed: str = DEFAULT_SEED
    workers: int = 1

    def __post_init__(self) -> None:
        self.tile_size = to_int(self.tile_size, "tile_size")
        if self.tile_size <= 0:
            raise ConfigurationError(f"tile_size must be positive, got {self.tile_size}")
        if not isinstance(self.seed, str):
            raise ConfigurationError(f"seed must be a string, got {type(self.seed).__name__}")
        self.workers = to_int(self.workers, "workers")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")

    @classmethod
    def from_env(cls, prefix: str = "TILESHUFFLE_") -> "ReassemblerConfig":
        """Build a config from ``<prefix>TILE_SIZE``, ``SEED`` and ``WORKERS``."""
        return cls(
            tile_size=os.environ.get(f"{prefix}TILE_SIZE", DEFAULT_TILE_SIZE),
            seed=os.environ.get(f"{prefix}SEED", DEFAULT_SEED),
            workers=os.environ.get(f"{prefix}WORKERS", 1),
        )


class ImageReassembler:
    """Move tiles between their scrambled and original slots, group by group."""

    def __init__(self, config: ReassemblerConfig | None = None) -> None:
        self.config = config if config is not None else ReassemblerConfig()
        self.partitioner = GridPartitioner(self.config.tile_size)

    def unscramble(self, image: np.ndarray) -> np.ndarray:
        """Return the original arrangement of a scrambled HxW(xC) image."""
        return self._rearrange(image, permute)

    def scramble(self, image: np.ndarray) -> np.ndarray:
        """Apply the forward scramble that `unscramble` inverts."""
        return self._rearrange(image, scramble_order)

    def unscramble_bytes(self, data: bytes, fmt: str = "png") -> bytes:
        """Decode, unscramble and re-encode an image."""
        return self.encode_unscrambled(decode_image(data), fmt)

    def encode_unscrambled(self, image: np.ndarray, fmt: str = "png") -> bytes:
        """Unscramble a decoded image straight into encoded bytes."""
        return self._rearrange_onto(image, permute).encode(fmt)

    def _rearrange(self, image: np.ndarray, order: PermutationFn) -> np.ndarray:
        return self._rearrange_onto(image, order).to_array()

    def _rearrange_onto(self, image: np.ndarray, order: PermutationFn) -> Canvas:
        if image.ndim not in (2, 3):
            raise ValueError("image must be an HxW or HxWxC numpy array")
        height, width = image.shape[:2]
        groups = self.partitioner.group(width, height)
        # Geometry is checked for every group before any pixel is written.
        layouts = [(tiles, GroupGeometry.from_tiles(tiles)) for tiles in groups.values()]

        canvas = Canvas.like(image)
        if self.config.workers > 1 and len(layouts) > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
                futures = [
                    pool.submit(self._copy_group, image, canvas, tiles, geometry, order)
                    for tiles, geometry in layouts
                ]
                for future in futures:
                    future.result()
        else:
            for tiles, geometry in layouts:
                self._copy_group(image, canvas, tiles, geometry, order)
        return canvas

    def _copy_group(
        self,
        image: np.ndarray,
        canvas: Canvas,
        tiles: List[Tile],
        geometry: GroupGeometry,
        order: PermutationFn,
    ) -> None:
        slots = order(len(tiles), self.config.seed)
        for tile, slot in zip(tiles, slots):
            sx, sy = geometry.slot_origin(slot, tile.width, tile.height)
            canvas.copy_block(
                image, sx, sy, tile.width, tile.height, tile.x, tile.y, tile.width, tile.height
            )


def unscramble_image(image: np.ndarray, tile_size: int = DEFAULT_TILE_SIZE, seed: str = DEFAULT_SEED) -> np.ndarray:
    """Unscramble `image` with a one-off reassembler."""
    return ImageReassembler(ReassemblerConfig(tile_size=tile_size, seed=seed)).unscramble(image)
