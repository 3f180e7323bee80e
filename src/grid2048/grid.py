"""Public engine API: one Grid owns its World, its EventBus and the engine systems."""
from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from grid2048.components.direction import Direction
from grid2048.components.outcome import GameOverReason
from grid2048.components.position import Coordinates, Position
from grid2048.constants import GRID_SIZE, TILE_SIZE
from grid2048.events.bus import EVENT_GAME_OVER, EVENT_TICK, EventBus
from grid2048.systems import board_ops
from grid2048.systems.animation import AnimationSystem
from grid2048.systems.board_ops import TileView
from grid2048.systems.game_over import GameOverSystem, has_legal_move, is_board_full, max_tile_value
from grid2048.systems.move_resolution import MoveResolutionSystem, Transition
from grid2048.systems.spawn import SpawnSystem
from grid2048.world import create_world


class Grid:
    """A square 2048 board driven one tick at a time.

    ``on_tick`` is the only mutating entry point. It returns a GameOverReason
    exactly once, on the tick the grid becomes terminal, and does nothing on
    later calls; callers start over by building a new Grid.
    """

    def __init__(
        self,
        tile_size: int = TILE_SIZE,
        origin: Coordinates | None = None,
        grid_size: int = GRID_SIZE,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.event_bus = EventBus()
        self.world = create_world(grid_size=grid_size, tile_size=tile_size, origin=origin, rng=rng)
        # Receivers are notified in no fixed order; each system re-checks world state per tick.
        self.move_resolution_system = MoveResolutionSystem(self.world, self.event_bus)
        self.animation_system = AnimationSystem(self.world, self.event_bus)
        self.spawn_system = SpawnSystem(self.world, self.event_bus)
        self.game_over_system = GameOverSystem(self.world, self.event_bus)
        self._pending_outcome: GameOverReason | None = None
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

    @property
    def board(self):
        return board_ops.get_board(self.world)

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def finished(self) -> bool:
        return self.game_over_system.finished

    @property
    def is_animating(self) -> bool:
        return board_ops.is_animating(self.world)

    def on_tick(self, move: Direction | None = None) -> GameOverReason | None:
        if self.finished and self._pending_outcome is None:
            return None
        if self._pending_outcome is None:
            self.event_bus.emit(EVENT_TICK, move=move)
        outcome, self._pending_outcome = self._pending_outcome, None
        return outcome

    def spawn_random(self) -> Position | None:
        return self.spawn_system.spawn_random()

    def insert_tile(self, position: Position, value: int) -> None:
        board_ops.insert_tile(self.world, position, value)

    def get_tile(self, position: Position) -> TileView | None:
        return board_ops.get_tile(self.world, position)

    def tiles(self) -> Iterator[Tuple[Position, TileView]]:
        return board_ops.iter_tiles(self.world)

    def tile_values(self) -> dict[Position, int]:
        return board_ops.tile_values(self.world)

    def in_flight(self) -> List[Transition]:
        return self.animation_system.in_flight()

    def coordinates_at(self, position: Position) -> Coordinates:
        return board_ops.coordinates_at(self.board, position)

    def width(self) -> int:
        return board_ops.board_width(self.board)

    def height(self) -> int:
        return board_ops.board_height(self.board)

    def is_board_full(self) -> bool:
        return is_board_full(self.world)

    def has_legal_move(self) -> bool:
        return has_legal_move(self.world)

    def max_tile_value(self) -> int:
        return max_tile_value(self.world)

    def _on_game_over(self, sender, **kwargs):
        self._pending_outcome = kwargs.get('reason')
