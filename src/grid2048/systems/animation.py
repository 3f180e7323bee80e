import logging
from enum import Enum, auto
from typing import List

from esper import World

from grid2048.components.move_animation import MoveAnimation
from grid2048.components.position import Coordinates
from grid2048.components.tile import TileValue
from grid2048.constants import STEP_X, STEP_Y
from grid2048.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_ANIMATION_START,
    EVENT_MOVE_DROPPED,
    EVENT_MOVE_REQUEST,
    EVENT_MOVE_RESOLVED,
    EVENT_TICK,
    EVENT_TILE_MERGED,
    EVENT_TILE_MOVED,
    EventBus,
)
from grid2048.systems.board_ops import coordinates_at, get_board, get_entity_at, is_animating, move_tile
from grid2048.systems.move_resolution import MoveOutcome, Transition

logger = logging.getLogger(__name__)


class SchedulerPhase(Enum):
    IDLE = auto()
    ANIMATING = auto()


def _step(current: int, desired: int, step: int) -> int:
    if desired > current:
        return current + min(step, desired - current)
    return current - min(step, current - desired)


def step_towards(coords: Coordinates, destination: Coordinates) -> bool:
    """Advance ``coords`` one tick toward ``destination``; horizontal travel goes first.

    Returns True once the tile sits exactly on its destination.
    """
    if coords.x != destination.x:
        coords.x = _step(coords.x, destination.x, STEP_X)
    elif coords.y != destination.y:
        coords.y = _step(coords.y, destination.y, STEP_Y)
    return coords.x == destination.x and coords.y == destination.y


class AnimationSystem:
    """Drives tiles between cells one fixed step per tick and commits moves on arrival.

    While any tile carries a MoveAnimation the grid is animating: further move
    commands are dropped and the resolver is not consulted. The merge or
    relocation of a tile is applied only when that tile lands, so the store
    always matches what is on screen.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self._in_flight: List[Transition] = []
        event_bus.subscribe(EVENT_TICK, self.on_tick)
        event_bus.subscribe(EVENT_MOVE_RESOLVED, self.on_move_resolved)

    @property
    def phase(self) -> SchedulerPhase:
        return SchedulerPhase.ANIMATING if is_animating(self.world) else SchedulerPhase.IDLE

    def on_tick(self, sender, **kwargs):
        move = kwargs.get('move')
        if self.phase == SchedulerPhase.ANIMATING:
            if move is not None:
                logger.debug("Move %s dropped while animating", move.name)
                self.event_bus.emit(EVENT_MOVE_DROPPED, direction=move)
            self._advance()
            return
        if move is not None:
            self.event_bus.emit(EVENT_MOVE_REQUEST, direction=move)

    def on_move_resolved(self, sender, **kwargs):
        outcome: MoveOutcome | None = kwargs.get('outcome')
        if outcome is None or not outcome.transitions:
            return
        if self.phase == SchedulerPhase.ANIMATING:
            logger.warning("Ignoring resolved move %s: tiles already in flight", outcome.direction.name)
            return
        board = get_board(self.world)
        for order, transition in enumerate(outcome.transitions):
            entity = get_entity_at(self.world, transition.source)
            if entity is None:
                raise RuntimeError(f"No tile at {transition.source} to animate")
            self.world.add_component(
                entity,
                MoveAnimation(
                    source=transition.source,
                    target=transition.target,
                    destination=coordinates_at(board, transition.target),
                    order=order,
                    merge=transition.merged,
                ),
            )
        self._in_flight = list(outcome.transitions)
        self.event_bus.emit(EVENT_ANIMATION_START, kind='move', items=list(self._in_flight))

    def _advance(self):
        flights = sorted(
            self.world.get_components(Coordinates, MoveAnimation),
            key=lambda item: item[1][1].order,
        )
        for entity, (coords, anim) in flights:
            if step_towards(coords, anim.destination):
                self._land(entity, anim)
        if not is_animating(self.world):
            items, self._in_flight = self._in_flight, []
            self.event_bus.emit(EVENT_ANIMATION_COMPLETE, kind='move', items=items)

    def _land(self, entity: int, anim: MoveAnimation):
        self.world.remove_component(entity, MoveAnimation)
        arriving = self.world.component_for_entity(entity, TileValue)
        occupant = get_entity_at(self.world, anim.target)
        if occupant is not None and occupant != entity:
            resting = self.world.component_for_entity(occupant, TileValue)
            if resting.value != arriving.value:
                raise RuntimeError(
                    f"Tile {arriving.value} from {anim.source} landed on unequal tile {resting.value} at {anim.target}"
                )
            resting.value *= 2
            self.world.delete_entity(entity, immediate=True)
            self.event_bus.emit(EVENT_TILE_MERGED, source=anim.source, target=anim.target, value=resting.value)
            return
        move_tile(self.world, anim.source, anim.target)
        self.event_bus.emit(EVENT_TILE_MOVED, source=anim.source, target=anim.target, value=arriving.value)

    def in_flight(self) -> List[Transition]:
        return list(self._in_flight)
