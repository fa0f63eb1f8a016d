# zombiesim

A small zombie outbreak simulation built as a cellular automaton. Each cell of
a grid carries terrain (altitude and temperature from layered Perlin noise), an
occupant (empty, zombies or humans), a population, a planned direction of
movement, and the "smell" of nearby humans and zombies. Every step, each cell
looks at its neighbours: it takes in whatever they send its way, settles
fights (zombies need three times the defenders to take a human cell, and
zombies recruit a third of the humans they face), spreads smell, and chooses
where to move next.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
zombiesim --steps 10 --render
```

The command builds a map on generated terrain, places humans and zombies at
random, prints `Map spawned with size: WIDTHxHEIGHT`, then runs the requested
number of steps, printing the number of human and zombie cells after each one.
With `--render` it finally draws the grid, one character per cell: `.` for
empty, `Z` for zombies, `H` for humans.

Options:

- `--width` (default 300) and `--height` (default 200): grid size.
- `--seed` (default 42): terrain seed.
- `--rng-seed`: seed for placing populations; random when left out.
- `--steps` (default 0): number of generations to run.
- `--render`: print the final grid.

## Library use

```python
import random

from zombiesim.simulation import spawn_map
from zombiesim.terrain import TerrainGenerator, render_map
from zombiesim.zombie_state import Status, delta_to_direction

# Terrain: a height x width grid of [altitude, temperature] pairs in [-1, 1].
terrain = TerrainGenerator(42).generate(60, 20, 5, 100.0)
print(render_map(terrain, 0))  # ASCII shading of altitude

# A populated world, stepped forward.
world = spawn_map(60, 20, 42, random.Random(1))
world.step()
print(world.render())

# Neighbour lookup and direction codes.
cells = world.neighbors(10, 10)
assert delta_to_direction((0, -1)) == 0   # north
assert delta_to_direction((0, 0)) == 8    # no direction
```

Modules:

- `zombiesim.terrain`: `Perlin` (seeded 2D noise, `get((x, y))`),
  `TerrainGenerator(seed).generate(width, height, num_levels, base_level)`,
  `render_map(terrain, index)` returning ASCII shading of one layer (`?` where
  a cell has no value at that index) and `print_map(terrain, index)` printing it.
- `zombiesim.zombie_state`: `Status` (`EMPTY`, `ZOMBIE`, `HUMAN`), the frozen
  dataclass `ZombieState` holding one cell's values, and `delta_to_direction`.
  `ZombieState.next_state(neighbors)` computes the cell's next state and raises
  `ValueError` when given no neighbours or a cell that is not adjacent;
  `ZombieState.color()` gives an RGBA tuple: black for empty, green for
  zombies, blue for humans.
- `zombiesim.simulation`: `World` (a bounded grid indexed `cells[y][x]`, with
  `neighbors`, `step` and `render`), `spawn_map` and the command's `main`.

## What it does not do

There is no graphical window: the simulation is shown only as text, through
the per-step counts and the character grid of `--render`.