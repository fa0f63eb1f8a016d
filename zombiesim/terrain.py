"""Perlin-noise terrain generation and ASCII previews of terrain layers."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

_ASCII_GRADIENT = " .`,:;-~=+*#%@"

_DIAGONAL = 1.0 / math.sqrt(2.0)
_GRADIENTS = (
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
    (_DIAGONAL, _DIAGONAL),
    (-_DIAGONAL, _DIAGONAL),
    (_DIAGONAL, -_DIAGONAL),
    (-_DIAGONAL, -_DIAGONAL),
)
_SCALE = math.sqrt(2.0)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


class Perlin:
    """Seeded two-dimensional gradient noise with output in [-1, 1]."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        permutation = list(range(256))
        random.Random(seed).shuffle(permutation)
        self._perm = tuple(permutation)

    def _hash(self, i: int, j: int) -> int:
        return self._perm[(self._perm[i & 255] + j) & 255]

    def get(self, point: Sequence[float]) -> float:
        """Return the noise value at a 2D point; zero on every integer lattice point."""
        x, y = point
        x0 = math.floor(x)
        y0 = math.floor(y)
        dx = x - x0
        dy = y - y0

        def corner(ox: int, oy: int) -> float:
            gx, gy = _GRADIENTS[self._hash(x0 + ox, y0 + oy) % len(_GRADIENTS)]
            return gx * (dx - ox) + gy * (dy - oy)

        u = _fade(dx)
        v = _fade(dy)
        bottom = _lerp(corner(0, 0), corner(1, 0), u)
        top = _lerp(corner(0, 1), corner(1, 1), u)
        value = _lerp(bottom, top, v) * _SCALE
        return max(-1.0, min(1.0, value))


class TerrainGenerator:
    """Builds altitude and temperature layers from two independent noise fields."""

    def __init__(self, seed: int) -> None:
        self.altitude_perlin = Perlin(seed & 0xFFFF_FFFF)
        self.temperature_perlin = Perlin((seed >> 32) & 0xFFFF_FFFF)

    def generate(
        self, width: int, height: int, num_levels: int, base_level: float
    ) -> list[list[list[float]]]:
        """Return a height x width grid of ``[altitude, temperature]`` pairs."""
        terrain = []
        for y in range(height):
            row = []
            for x in range(width):
                altitude = 0.0
                for level in range(num_levels):
                    step = base_level / (1 << level)
                    altitude += self.altitude_perlin.get((x / step, y / step)) / num_levels
                temperature = self.temperature_perlin.get((x / 20.0, y / 20.0))
                row.append([altitude, temperature])
            terrain.append(row)
        return terrain


def render_map(terrain: Sequence[Sequence[Sequence[float]]], index: int) -> str:
    """Render one layer of a terrain grid as ASCII shading, one line per row."""
    top = len(_ASCII_GRADIENT) - 1
    lines = []
    for row in terrain:
        chars = []
        for cell in row:
            if 0 <= index < len(cell):
                normalized = min(1.0, max(0.0, (cell[index] + 1.0) / 2.0))
                chars.append(_ASCII_GRADIENT[math.floor(normalized * top + 0.5)])
            else:
                chars.append("?")
        lines.append("".join(chars) + "\n")
    return "".join(lines)


def print_map(terrain: Sequence[Sequence[Sequence[float]]], index: int) -> None:
    """Print one layer of a terrain grid as ASCII shading."""
    print(render_map(terrain, index), end="")