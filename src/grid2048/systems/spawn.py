from __future__ import annotations

import logging
import random

from esper import World

from grid2048.components.position import Position
from grid2048.constants import SPAWN_VALUE
from grid2048.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_BOARD_FULL,
    EVENT_SPAWN_REQUEST,
    EVENT_TILE_SPAWNED,
    EventBus,
)
from grid2048.systems.board_ops import empty_positions, insert_tile, is_animating

logger = logging.getLogger(__name__)


class SpawnSystem:
    """Places one minimum-value tile on a random empty cell after each settled move."""

    def __init__(self, world: World, event_bus: EventBus, *, rng: random.Random | None = None):
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, self.on_animation_complete)
        self.event_bus.subscribe(EVENT_SPAWN_REQUEST, self.on_spawn_request)

    def on_animation_complete(self, sender, **kwargs):
        if kwargs.get('kind') != 'move':
            return
        self.spawn_random()

    def on_spawn_request(self, sender, **kwargs):
        self.spawn_random()

    def spawn_random(self) -> Position | None:
        """Insert a tile on a uniformly chosen empty cell; None means the board is full."""
        if is_animating(self.world):
            raise RuntimeError("Cannot spawn while tiles are in flight")
        available = empty_positions(self.world)
        if not available:
            logger.debug("Spawn failed: no space left")
            self.event_bus.emit(EVENT_BOARD_FULL)
            return None
        position = self._rng.choice(available)
        insert_tile(self.world, position, SPAWN_VALUE)
        logger.debug("Spawned %d at (%d, %d)", SPAWN_VALUE, position.x, position.y)
        self.event_bus.emit(EVENT_TILE_SPAWNED, position=position, value=SPAWN_VALUE)
        return position
