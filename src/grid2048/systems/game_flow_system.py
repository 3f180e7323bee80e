"""High-level coordinator between the shell screens and the current grid."""
from __future__ import annotations

import logging
import random

from esper import World

from grid2048.components.direction import Direction
from grid2048.components.game_state import GameMode
from grid2048.components.position import Coordinates
from grid2048.components.settings import Settings
from grid2048.constants import TILE_SIZE, WIN_TILE
from grid2048.events.bus import (
    EVENT_NEW_GAME_REQUEST,
    EVENT_PLAYER_MOVE,
    EVENT_SETTINGS_CHANGED,
    EVENT_TICK,
    EventBus,
)
from grid2048.grid import Grid
from grid2048.systems.game_over import has_reached
from grid2048.menu.components import InfoItem, SettingsItem
from grid2048.utils.game_state import get_game_state, get_settings, set_game_mode

logger = logging.getLogger(__name__)

INITIAL_TILES = 2


class GameFlowSystem:
    """Owns the active Grid and feeds it ticks and moves while the game screen is up.

    The grid never sees the shell's settings object: size and tick interval are
    read here and the grid is replaced wholesale whenever the size changes.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        tile_size: int = TILE_SIZE,
        win_tile: int = WIN_TILE,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or random.Random()
        self._tile_size = tile_size
        self._win_tile = win_tile
        self._elapsed = 0.0
        self.grid = self._create_grid()
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_PLAYER_MOVE, self.on_player_move)
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game_request)
        self.event_bus.subscribe(EVENT_SETTINGS_CHANGED, self.on_settings_changed)

    @property
    def settings(self) -> Settings:
        return get_settings(self.world)

    def on_tick(self, sender, **kwargs):
        dt = kwargs.get('dt', 0.0)
        if not self._game_active():
            return
        self._elapsed += float(dt)
        interval = self.settings.tick_interval
        if self._elapsed < interval:
            return
        self._elapsed %= interval
        self._advance(None)

    def on_player_move(self, sender, **kwargs):
        direction: Direction | None = kwargs.get('direction')
        if direction is None or not self._game_active():
            return
        self._advance(direction)

    def on_new_game_request(self, sender, **kwargs):
        logger.info("Starting new %dx%d game (%s)", self.settings.game_size, self.settings.game_size,
                    kwargs.get('reason', 'unspecified'))
        self.grid = self._create_grid()

    def on_settings_changed(self, sender, **kwargs):
        if kwargs.get('item') == SettingsItem.GAME_SIZE:
            self.grid = self._create_grid()

    def _advance(self, move: Direction | None) -> None:
        outcome = self.grid.on_tick(move)
        if outcome is not None:
            logger.info("Grid finished: %s", outcome.value)
            set_game_mode(self.world, self.event_bus, GameMode.INFO, info=InfoItem.GAME_LOST)
            return
        if self._win_reported or self.grid.is_animating:
            return
        if has_reached(self.grid.world, self._win_tile):
            self._win_reported = True
            set_game_mode(self.world, self.event_bus, GameMode.INFO, info=InfoItem.GAME_WON)

    def _create_grid(self) -> Grid:
        self._elapsed = 0.0
        self._win_reported = False
        grid = Grid(self._tile_size, Coordinates(0, 0), self.settings.game_size, rng=self._rng)
        for _ in range(INITIAL_TILES):
            grid.spawn_random()
        return grid

    def _game_active(self) -> bool:
        state = get_game_state(self.world)
        return state is not None and state.mode == GameMode.GAME
