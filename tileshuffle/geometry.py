"""Layout of a tile group inside the scrambled image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import GeometryInvariantViolation
from .splitter import Tile


def count_columns(tiles: Sequence[Tile]) -> int:
    """Number of tiles in the group's first row."""
    if len(tiles) == 1:
        return 1
    first_y = tiles[0].y
    for i, tile in enumerate(tiles):
        if tile.y != first_y:
            return i
    return len(tiles)


@dataclass(frozen=True)
class GroupGeometry:
    """Block shape and top-left anchor of a tile group."""

    slices: int
    cols: int
    rows: int
    x: int
    y: int

    @classmethod
    def from_tiles(cls, tiles: List[Tile]) -> "GroupGeometry":
        """Derive geometry from a non-empty group in raster order."""
        if not tiles:
            raise ValueError("tile group must contain at least one tile")
        slices = len(tiles)
        cols = count_columns(tiles)
        rows, remainder = divmod(slices, cols)
        if remainder:
            raise GeometryInvariantViolation(
                f"group of {slices} tiles at ({tiles[0].x}, {tiles[0].y}) "
                f"does not divide into rows of {cols}"
            )
        return cls(slices=slices, cols=cols, rows=rows, x=tiles[0].x, y=tiles[0].y)

    def slot_origin(self, slot: int, width: int, height: int) -> Tuple[int, int]:
        """Top-left corner of group slot `slot` for tiles of the given size."""
        row, col = divmod(slot, self.cols)
        return self.x + col * width, self.y + row * height
