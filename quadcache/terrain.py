"""Procedural terrain, generated cell by cell.

Meant as a `cache_search` generator: every cell is a pure function of its
coordinates and the seed, so it can be generated lazily and stored.
"""
from enum import Enum

import numpy as np


class Terrain(Enum):
    water = 0
    sand = 1
    grass = 2
    forest = 3
    mountain = 4

    @property
    def color(self) -> tuple[int, int, int]:
        return TERRAIN_COLORS[self]

    @staticmethod
    def from_height(height: float) -> "Terrain":
        for terrain, level in TERRAIN_LEVELS:
            if height < level:
                return terrain
        return Terrain.mountain


TERRAIN_COLORS = {
    Terrain.water: (26, 102, 255),
    Terrain.sand: (240, 230, 140),
    Terrain.grass: (34, 139, 34),
    Terrain.forest: (0, 90, 30),
    Terrain.mountain: (112, 128, 144),
}

# Upper (exclusive) height bound of each terrain, ascending.
TERRAIN_LEVELS = [
    (Terrain.water, 0.35),
    (Terrain.sand, 0.40),
    (Terrain.grass, 0.62),
    (Terrain.forest, 0.80),
]


def hash_lattice(x: np.ndarray, y: np.ndarray, seed: int) -> np.ndarray:
    """Map integer lattice points to floats in `[0, 1)`."""
    with np.errstate(over="ignore"):
        h = x.astype(np.uint32) * np.uint32(0x27D4EB2D)
        h ^= y.astype(np.uint32) * np.uint32(0x165667B1)
        h ^= np.uint32(seed & 0xFFFFFFFF)
        h ^= h >> np.uint32(15)
        h *= np.uint32(0x85EBCA6B)
        h ^= h >> np.uint32(13)
    return h.astype(np.float64) / float(2 ** 32)


def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a, b, t):
    return a + t * (b - a)


def value_noise(x: int, y: int, seed: int = 0, scale: int = 16) -> float:
    """Smooth noise in `[0, 1)` at the integer cell `(x, y)`.

    Random values sit on a lattice `scale` cells apart and are interpolated
    in between.
    """
    if scale < 1:
        raise ValueError(f"Noise scale must be positive, got {scale}")

    # Floor division keeps negative cells on the correct lattice square.
    x0, y0 = x // scale, y // scale
    u = fade((x - x0 * scale) / scale)
    v = fade((y - y0 * scale) / scale)

    xs = np.array([x0, x0 + 1, x0, x0 + 1], dtype=np.int64)
    ys = np.array([y0, y0, y0 + 1, y0 + 1], dtype=np.int64)
    # Wrap negatives into uint32 range before hashing.
    g00, g10, g01, g11 = hash_lattice(xs & 0xFFFFFFFF, ys & 0xFFFFFFFF, seed)

    return float(lerp(lerp(g00, g10, u), lerp(g01, g11, u), v))


class TerrainGenerator:
    """Callable `(x, y) -> Terrain`, counting how often it was asked."""

    seed: int
    scale: int
    calls: int

    def __init__(self, seed: int = 0, scale: int = 16):
        self.seed = seed
        self.scale = scale
        self.calls = 0

    def height(self, x: int, y: int) -> float:
        # Two octaves, the second one adds detail.
        coarse = value_noise(x, y, self.seed, self.scale)
        fine = value_noise(x, y, self.seed + 1, max(1, self.scale // 4))
        return (2 * coarse + fine) / 3

    def __call__(self, x: int, y: int) -> Terrain:
        self.calls += 1
        return Terrain.from_height(self.height(x, y))
