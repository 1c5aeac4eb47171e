"""Tests for tile group geometry."""

from __future__ import annotations

import pytest

from tileshuffle.errors import GeometryInvariantViolation
from tileshuffle.geometry import GroupGeometry, count_columns
from tileshuffle.splitter import GridPartitioner, Tile


def test_geometry_of_clipped_groups() -> None:
    """Interior, right edge, bottom edge and corner groups of a 1050x850 image."""
    groups = GridPartitioner(200).group(1050, 850)
    geometries = {key: GroupGeometry.from_tiles(tiles) for key, tiles in groups.items()}
    assert geometries["200-200"] == GroupGeometry(slices=20, cols=5, rows=4, x=0, y=0)
    assert geometries["50-200"] == GroupGeometry(slices=4, cols=1, rows=4, x=1000, y=0)
    assert geometries["200-50"] == GroupGeometry(slices=5, cols=5, rows=1, x=0, y=800)
    assert geometries["50-50"] == GroupGeometry(slices=1, cols=1, rows=1, x=1000, y=800)


@pytest.mark.parametrize("width, height, size", [(400, 300, 200), (37, 53, 10), (999, 1, 100), (1, 999, 100)])
def test_rows_times_cols_is_slices(width: int, height: int, size: int) -> None:
    """Every group forms a complete block."""
    for tiles in GridPartitioner(size).group(width, height).values():
        geometry = GroupGeometry.from_tiles(tiles)
        assert geometry.rows * geometry.cols == geometry.slices


def test_count_columns() -> None:
    """Columns end where the first row ends."""
    single = [Tile(0, 0, 5, 5)]
    one_row = [Tile(0, 0, 5, 5), Tile(5, 0, 5, 5), Tile(10, 0, 5, 5)]
    two_rows = one_row[:2] + [Tile(0, 5, 5, 5), Tile(5, 5, 5, 5)]
    assert count_columns(single) == 1
    assert count_columns(one_row) == 3
    assert count_columns(two_rows) == 2


def test_slot_origin() -> None:
    """Slots map to row-major offsets from the group anchor."""
    geometry = GroupGeometry(slices=6, cols=3, rows=2, x=100, y=40)
    assert geometry.slot_origin(0, 50, 20) == (100, 40)
    assert geometry.slot_origin(2, 50, 20) == (200, 40)
    assert geometry.slot_origin(4, 50, 20) == (150, 60)


def test_irregular_group_raises() -> None:
    """A group that cannot form whole rows is reported, not patched."""
    tiles = [Tile(0, 0, 10, 10), Tile(10, 0, 10, 10), Tile(0, 10, 10, 10)]
    with pytest.raises(GeometryInvariantViolation):
        GroupGeometry.from_tiles(tiles)


def test_empty_group_raises() -> None:
    """Geometry needs at least one tile."""
    with pytest.raises(ValueError):
        GroupGeometry.from_tiles([])
