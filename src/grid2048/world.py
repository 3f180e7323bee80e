from __future__ import annotations

import random

from esper import World

from grid2048.components.board import Board
from grid2048.components.game_state import GameMode, GameState
from grid2048.components.position import Coordinates
from grid2048.components.settings import Settings
from grid2048.constants import GRID_SIZE, MIN_GRID_SIZE, TILE_SIZE
from grid2048.menu.components import MenuBackground


def create_world(
    *,
    grid_size: int = GRID_SIZE,
    tile_size: int = TILE_SIZE,
    origin: Coordinates | None = None,
    rng: random.Random | None = None,
) -> World:
    """Build the tile store for one grid: a fresh World holding a single Board entity."""
    if grid_size < MIN_GRID_SIZE:
        raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}, got {grid_size}")
    if tile_size < 2:
        raise ValueError(f"Tile size must be at least 2, got {tile_size}")
    world = World()
    setattr(world, "random", rng or random.Random())
    world.create_entity(
        Board(
            size=grid_size,
            tile_width=tile_size,
            tile_height=tile_size // 2,
            origin=Coordinates(origin.x, origin.y) if origin else Coordinates(0, 0),
        )
    )
    return world


def create_app_world(
    settings: Settings | None = None,
    initial_mode: GameMode = GameMode.MENU,
) -> World:
    """World for the application shell: screen state, settings and menu styling."""
    world = World()
    state_entity = world.create_entity()
    world.add_component(state_entity, GameState(mode=initial_mode))
    world.add_component(state_entity, settings or Settings())
    world.create_entity(MenuBackground())
    return world
