"""Image grid partitioning into clipped square tiles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from .errors import ConfigurationError

DEFAULT_TILE_SIZE = 200


@dataclass(frozen=True)
class Tile:
    """A rectangle of the grid, clipped to the image at the right and bottom edges."""

    x: int
    y: int
    width: int
    height: int

    @property
    def key(self) -> str:
        """Group key shared by all tiles with the same clipped size."""
        return f"{self.width}-{self.height}"

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Return ``(x0, y0, x1, y1)`` with exclusive right/bottom bounds."""
        return self.x, self.y, self.x + self.width, self.y + self.height


class GridPartitioner:
    """Cut an image plane into `tile_size` squares and bucket them by size."""

    def __init__(self, tile_size: int = DEFAULT_TILE_SIZE) -> None:
        if isinstance(tile_size, bool) or not isinstance(tile_size, int) or tile_size <= 0:
            raise ConfigurationError(f"tile size must be a positive integer, got {tile_size!r}")
        self.tile_size = tile_size

    def split(self, width: int, height: int) -> List[Tile]:
        """Return all tiles of a `width` x `height` image in row-major order."""
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"image dimensions must be positive, got {width}x{height}")

        size = self.tile_size
        cols = math.ceil(width / size)
        rows = math.ceil(height / size)
        tiles: List[Tile] = []
        for r in range(rows):
            for c in range(cols):
                x = c * size
                y = r * size
                tiles.append(Tile(x=x, y=y, width=min(size, width - x), height=min(size, height - y)))
        return tiles

    def group(self, width: int, height: int) -> Dict[str, List[Tile]]:
        """Bucket tiles by clipped size, keeping raster order inside each bucket."""
        groups: Dict[str, List[Tile]] = {}
        for tile in self.split(width, height):
            groups.setdefault(tile.key, []).append(tile)
        return groups
