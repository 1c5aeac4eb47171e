"""Seeded shuffle and its exact inverse.

Both directions draw one float per element and remove the picked index from a
shrinking pool, so ``unshuffle(shuffle(xs, seed), seed) == xs`` as long as the
seed and the length agree.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, List, Optional

from .errors import InvalidInputError
from .numeric import create_range
from .prng import SeedRandom


def _is_index_sequence(values: Any) -> bool:
    return isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray))


def shuffle(values: Sequence, seed: str) -> Optional[List[Any]]:
    """Return `values` reordered by the seeded draw, or None for non-sequences."""
    if not _is_index_sequence(values):
        return None
    rng = SeedRandom(seed)
    pool = list(range(len(values)))
    result: List[Any] = []
    for _ in range(len(values)):
        pick = math.floor(rng() * len(pool))
        result.append(values[pool.pop(pick)])
    return result


def unshuffle(values: Sequence, seed: str) -> Optional[List[Any]]:
    """Undo `shuffle` for the same seed, or return None for non-sequences."""
    if not _is_index_sequence(values):
        return None
    rng = SeedRandom(seed)
    pool = list(range(len(values)))
    result: List[Any] = [None] * len(values)
    for source in range(len(values)):
        pick = math.floor(rng() * len(pool))
        result[pool.pop(pick)] = values[source]
    return result


def _checked(result: Optional[List[Any]], n: int) -> List[int]:
    if result is None:
        raise InvalidInputError(f"cannot build a permutation of length {n!r}")
    return result


def permute(n: int, seed: str) -> List[int]:
    """Map each destination slot in ``[0, n)`` to the slot its content came from."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidInputError(f"permutation length must be a non-negative integer, got {n!r}")
    return _checked(unshuffle(create_range(0, n), seed), n)


def scramble_order(n: int, seed: str) -> List[int]:
    """Forward counterpart of `permute`: the slot each destination is filled from when scrambling."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidInputError(f"permutation length must be a non-negative integer, got {n!r}")
    return _checked(shuffle(create_range(0, n), seed), n)
