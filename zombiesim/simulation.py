"""A grid world of zombie cells, its random initial map and a command line runner."""

from __future__ import annotations

import argparse
import random
from collections import Counter
from dataclasses import dataclass

from zombiesim.terrain import TerrainGenerator
from zombiesim.zombie_state import DIRECTION_DELTAS, NO_DIRECTION, Status, ZombieState

SCALE = 100
_GLYPHS = {Status.EMPTY: ".", Status.ZOMBIE: "Z", Status.HUMAN: "H"}
_NEIGHBOR_OFFSETS = tuple(d for i, d in enumerate(DIRECTION_DELTAS) if i != NO_DIRECTION)


@dataclass
class World:
    """A bounded grid of cells indexed as ``cells[y][x]``."""

    cells: list[list[ZombieState]]

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def neighbors(self, x: int, y: int) -> list[ZombieState]:
        """Return the Moore neighbours of a cell that lie inside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} grid")
        return [
            self.cells[y + dy][x + dx]
            for dx, dy in _NEIGHBOR_OFFSETS
            if 0 <= x + dx < self.width and 0 <= y + dy < self.height
        ]

    def step(self) -> None:
        """Advance every cell one generation at once."""
        self.cells = [
            [cell.next_state(self.neighbors(x, y)) for x, cell in enumerate(row)]
            for y, row in enumerate(self.cells)
        ]

    def render(self) -> str:
        """Draw the grid with '.' for empty, 'Z' for zombie and 'H' for human cells."""
        return "".join(
            "".join(_GLYPHS[cell.status] for cell in row) + "\n" for row in self.cells
        )


def spawn_map(
    size_x: int, size_y: int, seed: int = 42, rng: random.Random | None = None
) -> World:
    """Build a world on generated terrain with randomly placed humans and zombies."""
    rng = rng if rng is not None else random.Random()
    terrain = TerrainGenerator(seed).generate(size_x, size_y, 5, 100.0)
    cells = []
    for y in range(size_y):
        row = []
        for x in range(size_x):
            altitude, temperature = terrain[y][x]
            roll = rng.randrange(256) % 4
            status = {1: Status.ZOMBIE, 2: Status.HUMAN}.get(roll, Status.EMPTY)
            if status is Status.HUMAN:
                population = rng.randrange(256) % 100 + 50
            elif status is Status.ZOMBIE:
                population = rng.randrange(256) % 10 + 1
            else:
                population = 0
            row.append(
                ZombieState(
                    x=x,
                    y=y,
                    altitude=int(altitude),
                    temperature=int(temperature),
                    status=status,
                    population=population,
                    direction=0,
                )
            )
        cells.append(row)
    return World(cells)


def _tally(world: World) -> Counter:
    return Counter(cell.status for row in world.cells for cell in row)


def main(argv: list[str] | None = None) -> int:
    """Spawn a map, run the requested number of generations and report."""
    parser = argparse.ArgumentParser(prog="zombiesim", description="Zombie outbreak cellular automaton.")
    parser.add_argument("--width", type=int, default=3 * SCALE)
    parser.add_argument("--height", type=int, default=2 * SCALE)
    parser.add_argument("--seed", type=int, default=42, help="terrain seed")
    parser.add_argument("--rng-seed", type=int, default=None, help="seed for placing populations")
    parser.add_argument("--steps", type=int, default=0)
    parser.add_argument("--render", action="store_true", help="print the final grid")
    args = parser.parse_args(argv)

    world = spawn_map(args.width, args.height, args.seed, random.Random(args.rng_seed))
    print(f"Map spawned with size: {args.width}x{args.height}")
    for generation in range(1, args.steps + 1):
        world.step()
        counts = _tally(world)
        print(
            f"step {generation}: {counts[Status.HUMAN]} humans, {counts[Status.ZOMBIE]} zombies"
        )
    if args.render:
        print(world.render(), end="")
    return 0