"""Tests for grid partitioning and grouping."""

from __future__ import annotations

import numpy as np
import pytest

from tileshuffle.errors import ConfigurationError
from tileshuffle.splitter import GridPartitioner, Tile


def test_400x300_scenario() -> None:
    """Two full tiles on top, two clipped tiles below, in two groups of two."""
    partitioner = GridPartitioner(200)
    assert partitioner.split(400, 300) == [
        Tile(0, 0, 200, 200),
        Tile(200, 0, 200, 200),
        Tile(0, 200, 200, 100),
        Tile(200, 200, 200, 100),
    ]
    groups = partitioner.group(400, 300)
    assert list(groups) == ["200-200", "200-100"]
    assert [len(tiles) for tiles in groups.values()] == [2, 2]


def test_group_keys_follow_discovery_order() -> None:
    """Edge and corner tiles get their own groups, ordered by first appearance."""
    groups = GridPartitioner(200).group(450, 320)
    assert list(groups) == ["200-200", "50-200", "200-120", "50-120"]
    assert [len(tiles) for tiles in groups.values()] == [2, 1, 2, 1]
    assert groups["50-120"] == [Tile(400, 200, 50, 120)]


def test_default_tile_size() -> None:
    """The default tile side is 200 pixels."""
    assert GridPartitioner().tile_size == 200


@pytest.mark.parametrize(
    "width, height, size",
    [(400, 300, 200), (1, 1, 200), (37, 53, 10), (1050, 850, 200), (199, 401, 200)],
)
def test_tiles_cover_plane_exactly(width: int, height: int, size: int) -> None:
    """Every pixel belongs to exactly one tile."""
    coverage = np.zeros((height, width), dtype=np.int32)
    for tile in GridPartitioner(size).split(width, height):
        x0, y0, x1, y1 = tile.box
        assert tile.width > 0 and tile.height > 0
        coverage[y0:y1, x0:x1] += 1
    assert np.all(coverage == 1)


def test_members_stay_in_raster_order() -> None:
    """Tiles within a group keep row-major order."""
    for tiles in GridPartitioner(100).group(530, 470).values():
        positions = [(t.y, t.x) for t in tiles]
        assert positions == sorted(positions)


@pytest.mark.parametrize("size", [0, -5, 2.5, True])
def test_invalid_tile_size(size) -> None:
    """Tile size must be a positive integer."""
    with pytest.raises(ConfigurationError):
        GridPartitioner(size)


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_dimensions(width: int, height: int) -> None:
    """Empty images are rejected before partitioning."""
    with pytest.raises(ConfigurationError):
        GridPartitioner(10).split(width, height)
