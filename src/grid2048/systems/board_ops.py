from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

from esper import World

from grid2048.components.board import Board
from grid2048.components.move_animation import MoveAnimation
from grid2048.components.position import Coordinates, Position
from grid2048.components.tile import TileValue
from grid2048.constants import MARGIN_X, MARGIN_Y


class TileOccupiedError(RuntimeError):
    """Raised when a tile is placed on a cell that already holds one."""

    def __init__(self, position: Position):
        super().__init__(f"Tile at {position} already exists")
        self.position = position


@dataclass(frozen=True, slots=True)
class TileView:
    """Read-only snapshot of a placed tile for renderers and tests."""
    entity: int
    position: Position
    value: int
    coordinates: Coordinates


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board definition not found")


def coordinates_at(board: Board, position: Position) -> Coordinates:
    """Character-cell location of the top-left corner of ``position``."""
    return Coordinates(
        x=board.origin.x + MARGIN_X + position.x * (MARGIN_X + board.tile_width),
        y=board.origin.y + MARGIN_Y + position.y * (MARGIN_Y + board.tile_height),
    )


def board_width(board: Board) -> int:
    return 2 + board.size * (board.tile_width + MARGIN_X)


def board_height(board: Board) -> int:
    return 2 + board.size * (board.tile_height + MARGIN_Y)


def all_positions(board: Board) -> List[Position]:
    return [Position(x, y) for x in range(board.size) for y in range(board.size)]


def is_valid_value(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


def get_entity_at(world: World, position: Position) -> int | None:
    for entity, pos in world.get_component(Position):
        if pos == position:
            return entity
    return None


def get_tile(world: World, position: Position) -> TileView | None:
    entity = get_entity_at(world, position)
    if entity is None:
        return None
    return _view(world, entity, position)


def insert_tile(world: World, position: Position, value: int) -> int:
    """Place a new tile at its resting coordinates and return its entity id."""
    if not is_valid_value(value):
        raise ValueError(f"Tile value must be a power of two >= 2, got {value}")
    board = get_board(world)
    if not (0 <= position.x < board.size and 0 <= position.y < board.size):
        raise ValueError(f"{position} is outside a {board.size}x{board.size} grid")
    if get_entity_at(world, position) is not None:
        raise TileOccupiedError(position)
    return world.create_entity(position, TileValue(value), coordinates_at(board, position))


def remove_tile(world: World, position: Position) -> None:
    entity = get_entity_at(world, position)
    if entity is None:
        return
    world.delete_entity(entity, immediate=True)


def move_tile(world: World, source: Position, target: Position) -> int:
    """Re-key the tile at ``source`` to ``target`` keeping its value and coordinates."""
    entity = get_entity_at(world, source)
    if entity is None:
        raise KeyError(f"No tile at {source}")
    if get_entity_at(world, target) is not None:
        raise TileOccupiedError(target)
    world.add_component(entity, target)
    return entity


def iter_tiles(world: World) -> Iterator[Tuple[Position, TileView]]:
    for entity, (position, tile) in world.get_components(Position, TileValue):
        yield position, TileView(
            entity=entity,
            position=position,
            value=tile.value,
            coordinates=_copy_coordinates(world, entity),
        )


def tile_values(world: World) -> Dict[Position, int]:
    return {position: tile.value for _, (position, tile) in world.get_components(Position, TileValue)}


def empty_positions(world: World) -> List[Position]:
    occupied = set(tile_values(world))
    return [pos for pos in all_positions(get_board(world)) if pos not in occupied]


def is_animating(world: World) -> bool:
    for _ in world.get_component(MoveAnimation):
        return True
    return False


def _copy_coordinates(world: World, entity: int) -> Coordinates:
    coords = world.component_for_entity(entity, Coordinates)
    return Coordinates(coords.x, coords.y)


def _view(world: World, entity: int, position: Position) -> TileView:
    tile = world.component_for_entity(entity, TileValue)
    return TileView(entity=entity, position=position, value=tile.value, coordinates=_copy_coordinates(world, entity))
