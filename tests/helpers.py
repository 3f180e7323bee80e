from __future__ import annotations

import random
from typing import Mapping

from grid2048.components.direction import Direction
from grid2048.components.outcome import GameOverReason
from grid2048.components.position import Coordinates, Position
from grid2048.grid import Grid


def build_grid(tiles: Mapping[tuple[int, int], int], size: int = 4, seed: int = 0, tile_size: int = 10) -> Grid:
    """Create a grid holding exactly ``tiles`` (keyed by (x, y)) with a seeded spawn rng."""

    grid = Grid(tile_size, Coordinates(0, 0), size, rng=random.Random(seed))
    for (x, y), value in tiles.items():
        grid.insert_tile(Position(x, y), value)
    return grid


def drive_ticks(grid: Grid, count: int, move: Direction | None = None) -> list[GameOverReason]:
    """Tick ``count`` times, passing ``move`` on the first tick only; returns any outcomes seen."""

    outcomes: list[GameOverReason] = []
    for index in range(count):
        outcome = grid.on_tick(move if index == 0 else None)
        if outcome is not None:
            outcomes.append(outcome)
    return outcomes


def settle(grid: Grid, move: Direction, limit: int = 200) -> int:
    """Play ``move`` and tick until the grid is idle again; returns ticks used."""

    grid.on_tick(move)
    ticks = 1
    while grid.is_animating and ticks < limit:
        grid.on_tick()
        ticks += 1
    return ticks
