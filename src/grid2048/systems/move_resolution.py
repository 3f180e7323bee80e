"""Slide/merge resolution for all four directions.

The resolver is written once for sliding toward column 0 (LEFT). Every other
direction rotates the grid indices into that orientation first and rotates the
result back afterwards, so the four directions cannot drift apart.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Mapping, Set, Tuple

from esper import World

from grid2048.components.direction import Direction
from grid2048.components.position import Position
from grid2048.events.bus import (
    EVENT_MOVE_REJECTED,
    EVENT_MOVE_REQUEST,
    EVENT_MOVE_RESOLVED,
    EventBus,
)
from grid2048.systems.board_ops import get_board, tile_values

logger = logging.getLogger(__name__)


class Rotation(Enum):
    IDENTITY = auto()
    HORIZONTAL = auto()
    CLOCK = auto()
    COUNTER_CLOCK = auto()


ROTATION_FOR_DIRECTION: Dict[Direction, Rotation] = {
    Direction.LEFT: Rotation.IDENTITY,
    Direction.RIGHT: Rotation.HORIZONTAL,
    Direction.UP: Rotation.CLOCK,
    Direction.DOWN: Rotation.COUNTER_CLOCK,
}

_INVERSE: Dict[Rotation, Rotation] = {
    Rotation.IDENTITY: Rotation.IDENTITY,
    Rotation.HORIZONTAL: Rotation.HORIZONTAL,
    Rotation.CLOCK: Rotation.COUNTER_CLOCK,
    Rotation.COUNTER_CLOCK: Rotation.CLOCK,
}


@dataclass(frozen=True, slots=True)
class Transition:
    source: Position
    target: Position
    value: int  # value held at target once this tile lands
    merged: bool = False


@dataclass(slots=True)
class MoveOutcome:
    direction: Direction
    transitions: List[Transition] = field(default_factory=list)
    tiles: Dict[Position, int] = field(default_factory=dict)
    merges: List[Position] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.transitions)


def inverse_rotation(rotation: Rotation) -> Rotation:
    return _INVERSE[rotation]


def rotate(position: Position, rotation: Rotation, size: int) -> Position:
    """Permute grid indices; pixel coordinates are never rotated."""
    s = size - 1
    x, y = position.x, position.y
    if rotation == Rotation.HORIZONTAL:
        return Position(s - x, y)
    if rotation == Rotation.CLOCK:
        return Position(y, s - x)
    if rotation == Rotation.COUNTER_CLOCK:
        return Position(s - y, x)
    return position


def _slide_target(
    placed: Mapping[Position, int],
    position: Position,
    value: int,
    unavailable: Set[Position],
) -> Tuple[Position, int]:
    x, y = position.x, position.y
    if x == 0:
        return position, value
    new_x = x
    for checking_x in range(x - 1, -1, -1):
        candidate = Position(checking_x, y)
        if candidate in unavailable:
            break
        occupant = placed.get(candidate)
        if occupant is None:
            new_x = checking_x
            continue
        if occupant == value:
            return candidate, value * 2
        break
    return Position(new_x, y), value


def _resolve_left(tiles: Mapping[Position, int]) -> Tuple[Dict[Position, int], List[Transition], List[Position]]:
    placed: Dict[Position, int] = {}
    transitions: List[Transition] = []
    merges: List[Position] = []
    unavailable: Set[Position] = set()
    for position in sorted(tiles, key=lambda p: (p.x, p.y)):
        value = tiles[position]
        target, new_value = _slide_target(placed, position, value, unavailable)
        merged = new_value > value
        if merged:
            unavailable.add(target)
            merges.append(target)
        placed[target] = new_value
        if target != position:
            transitions.append(Transition(source=position, target=target, value=new_value, merged=merged))
    return placed, transitions, merges


def resolve_move(tiles: Mapping[Position, int], size: int, direction: Direction) -> MoveOutcome:
    """Compute where every tile lands for ``direction`` without touching the live grid.

    Transitions come back in resolution order: tiles nearest the target edge
    first, which is also the order their animations must be committed in.
    """
    rotation = ROTATION_FOR_DIRECTION[direction]
    back = inverse_rotation(rotation)
    rotated = {rotate(pos, rotation, size): value for pos, value in tiles.items()}
    placed, transitions, merges = _resolve_left(rotated)
    return MoveOutcome(
        direction=direction,
        transitions=[
            Transition(
                source=rotate(t.source, back, size),
                target=rotate(t.target, back, size),
                value=t.value,
                merged=t.merged,
            )
            for t in transitions
        ],
        tiles={rotate(pos, back, size): value for pos, value in placed.items()},
        merges=[rotate(pos, back, size) for pos in merges],
    )


def resolve_world_move(world: World, direction: Direction) -> MoveOutcome:
    board = get_board(world)
    return resolve_move(tile_values(world), board.size, direction)


class MoveResolutionSystem:
    """Answers move requests with the resolved transition set."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)

    def on_move_request(self, sender, **kwargs):
        direction = kwargs.get('direction')
        if direction is None:
            return
        outcome = resolve_world_move(self.world, direction)
        if not outcome.changed:
            logger.debug("Move %s rejected: board unchanged", direction.name)
            self.event_bus.emit(EVENT_MOVE_REJECTED, direction=direction)
            return
        logger.debug(
            "Move %s resolved: %d transitions, %d merges",
            direction.name, len(outcome.transitions), len(outcome.merges),
        )
        self.event_bus.emit(EVENT_MOVE_RESOLVED, direction=direction, outcome=outcome)
