"""Cell state and transition rules for the zombie outbreak automaton."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class Status(IntEnum):
    """Who holds a cell."""

    EMPTY = 0
    ZOMBIE = 1
    HUMAN = 2


# Direction deltas indexed clockwise starting from North; index 8 means "stay".
DIRECTION_DELTAS = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, 0),
)
NO_DIRECTION = 8

_DIRECTION_BY_DELTA = {delta: index for index, delta in enumerate(DIRECTION_DELTAS)}

_COLORS = {
    Status.EMPTY: (0.0, 0.0, 0.0, 1.0),
    Status.ZOMBIE: (0.0, 1.0, 0.0, 1.0),
    Status.HUMAN: (0.0, 0.0, 1.0, 1.0),
}


def delta_to_direction(delta: tuple[int, int]) -> int | None:
    """Return the direction index for a neighbour offset, or None if not adjacent."""
    return _DIRECTION_BY_DELTA.get(tuple(delta))


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class ZombieState:
    """One terrain cell: its fixed terrain data plus who holds it and their plans.

    Smells spread by averaging over neighbours and grow with the population
    present, so each side can sense the other several cells away.
    """

    x: int
    y: int
    altitude: int = 0
    temperature: int = 0
    status: Status = Status.EMPTY
    population: int = 0
    direction: int = NO_DIRECTION
    human_smell: int = 0
    zombie_smell: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", Status(self.status))

    def next_state(self, neighbors: Iterable[ZombieState]) -> ZombieState:
        """Resolve incoming moves, combat and smells, and plan the next move."""
        neighbors = list(neighbors)
        if not neighbors:
            raise ValueError("a cell needs at least one neighbour")

        incoming = {Status.HUMAN: 0, Status.ZOMBIE: 0}
        for neighbor in neighbors:
            direction = delta_to_direction((neighbor.x - self.x, neighbor.y - self.y))
            if direction is None:
                raise ValueError(
                    f"cell ({neighbor.x}, {neighbor.y}) is not adjacent to ({self.x}, {self.y})"
                )
            if neighbor.direction == direction and neighbor.status in incoming:
                incoming[neighbor.status] += neighbor.population

        moving = self.direction != NO_DIRECTION
        total_humans = incoming[Status.HUMAN] + (
            self.population if self.status is Status.HUMAN and moving else 0
        )
        total_zombies = incoming[Status.ZOMBIE] + (
            self.population if self.status is Status.ZOMBIE and moving else 0
        )

        status = self.status
        population = self.population
        if self.status is Status.EMPTY:
            if total_humans > total_zombies:
                status, population = Status.HUMAN, total_humans - total_zombies
            elif total_zombies > total_humans:
                status, population = Status.ZOMBIE, total_zombies - total_humans
            else:
                status, population = Status.EMPTY, 0
        elif self.status is Status.ZOMBIE:
            if total_zombies < total_humans:
                status, population = Status.HUMAN, total_humans - total_zombies
            else:
                population = total_zombies - total_humans
            # Part of the humans met are infected.
            population += _tdiv(total_humans, 3)
        else:
            # Zombies need three times the defenders to take a human cell.
            attack = _tdiv(total_zombies, 3)
            if total_humans < attack:
                status, population = Status.ZOMBIE, attack - total_humans
            else:
                population = total_humans - attack
            population += _tdiv(total_humans, 10)

        count = len(neighbors)
        human_smell = _tdiv(sum(n.human_smell for n in neighbors), count) + (
            self.population if self.status is Status.HUMAN else 0
        )
        zombie_smell = _tdiv(sum(n.zombie_smell for n in neighbors), count) + (
            self.population if self.status is Status.ZOMBIE else 0
        )

        direction = NO_DIRECTION
        if status is Status.ZOMBIE:
            strongest = 0
            for neighbor in neighbors:
                if neighbor.human_smell > strongest:
                    strongest = neighbor.human_smell
                    direction = neighbor.direction
        elif status is Status.HUMAN:
            weakest = 0
            for neighbor in neighbors:
                if neighbor.zombie_smell < weakest:
                    weakest = neighbor.zombie_smell
                    direction = neighbor.direction

        if population <= 0:
            status = Status.EMPTY
            direction = NO_DIRECTION

        return dataclasses.replace(
            self,
            status=status,
            population=population,
            direction=direction,
            human_smell=human_smell,
            zombie_smell=zombie_smell,
        )

    def color(self) -> tuple[float, float, float, float]:
        """RGBA colour for the cell: black when empty, green for zombies, blue for humans."""
        return _COLORS[self.status]