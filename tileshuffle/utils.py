"""Deterministic test images for scramble experiments."""

from __future__ import annotations

import numpy as np


def set_random_seed(seed: int = 42) -> np.random.Generator:
    """Create a deterministic numpy random generator."""
    return np.random.default_rng(seed)


def generate_random_image(width: int = 400, height: int = 300, seed: int = 42) -> np.ndarray:
    """Generate a purely random RGB image."""
    rng = set_random_seed(seed)
    return rng.integers(0, 256, size=(height, width, 3), dtype=np.uint8)


def generate_gradient_image(width: int = 400, height: int = 300) -> np.ndarray:
    """Generate a smooth RGB gradient image."""
    x = np.linspace(0, 255, width, dtype=np.float32)
    y = np.linspace(0, 255, height, dtype=np.float32)
    xv, yv = np.meshgrid(x, y)
    img = np.stack([xv, yv, 0.5 * (xv + yv)], axis=2)
    return np.clip(img, 0, 255).astype(np.uint8)


def generate_labelled_image(width: int, height: int, tile_size: int) -> np.ndarray:
    """Fill every grid cell with a distinct colour so misplaced tiles are visible."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    cols = (width + tile_size - 1) // tile_size
    for y0 in range(0, height, tile_size):
        for x0 in range(0, width, tile_size):
            index = (y0 // tile_size) * cols + x0 // tile_size
            image[y0 : y0 + tile_size, x0 : x0 + tile_size] = (
                (index * 37) % 256,
                (index * 91) % 256,
                (index * 53) % 256,
            )
    return image
