from __future__ import annotations

import logging
from typing import List

from esper import World

from grid2048.components.direction import Direction
from grid2048.components.outcome import GameOverReason
from grid2048.events.bus import (
    EVENT_BOARD_FULL,
    EVENT_GAME_OVER,
    EVENT_SPAWN_REQUEST,
    EVENT_TICK,
    EventBus,
)
from grid2048.systems.board_ops import empty_positions, is_animating, tile_values
from grid2048.systems.move_resolution import resolve_world_move

logger = logging.getLogger(__name__)


def is_board_full(world: World) -> bool:
    return not empty_positions(world)


def legal_moves(world: World) -> List[Direction]:
    """Directions that would change the board if played now."""
    return [direction for direction in Direction if resolve_world_move(world, direction).changed]


def has_legal_move(world: World) -> bool:
    return any(resolve_world_move(world, direction).changed for direction in Direction)


def max_tile_value(world: World) -> int:
    return max(tile_values(world).values(), default=0)


def has_reached(world: World, threshold: int) -> bool:
    return max_tile_value(world) >= threshold


class GameOverSystem:
    """Reports the terminal state of a grid, at most once.

    The grid is lost when a spawn attempt finds no empty cell and no direction
    changes the board. A quiescent tick on such a board triggers that spawn
    attempt so a stuck grid is reported even without further input.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.reason: GameOverReason | None = None
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_BOARD_FULL, self.on_board_full)

    @property
    def finished(self) -> bool:
        return self.reason is not None

    def on_tick(self, sender, **kwargs):
        if self.finished or is_animating(self.world):
            return
        if is_board_full(self.world) and not has_legal_move(self.world):
            self.event_bus.emit(EVENT_SPAWN_REQUEST, reason='stuck_board')

    def on_board_full(self, sender, **kwargs):
        if self.finished:
            return
        if has_legal_move(self.world):
            self.reason = GameOverReason.BOARD_FULL
        else:
            self.reason = GameOverReason.NO_MOVES_LEFT
        logger.info("Game over: %s", self.reason.value)
        self.event_bus.emit(EVENT_GAME_OVER, reason=self.reason)
