from grid2048.components.direction import Direction
from grid2048.components.position import Coordinates, Position
from grid2048.events.bus import (
    EVENT_ANIMATION_COMPLETE,
    EVENT_MOVE_DROPPED,
    EVENT_TILE_MERGED,
    EVENT_TILE_SPAWNED,
)
from grid2048.systems.animation import SchedulerPhase, step_towards
from tests.helpers import build_grid, drive_ticks, settle


def test_step_is_clamped_to_destination():
    coords = Coordinates(0, 0)
    assert not step_towards(coords, Coordinates(5, 0))
    assert coords == Coordinates(4, 0)
    assert step_towards(coords, Coordinates(5, 0))
    assert coords == Coordinates(5, 0)


def test_horizontal_travel_precedes_vertical():
    coords = Coordinates(2, 1)
    path = []
    while not step_towards(coords, Coordinates(14, 7)):
        path.append((coords.x, coords.y))
    assert path == [(6, 1), (10, 1), (14, 1), (14, 3), (14, 5)]
    assert coords == Coordinates(14, 7)


def test_step_moves_backwards():
    coords = Coordinates(26, 13)
    step_towards(coords, Coordinates(2, 1))
    assert coords == Coordinates(22, 13)


def test_merge_is_committed_only_on_arrival():
    grid = build_grid({(0, 0): 2, (2, 0): 2})
    merged = []
    grid.event_bus.subscribe(EVENT_TILE_MERGED, lambda sender, **kw: merged.append(kw))

    grid.on_tick(Direction.LEFT)
    assert grid.animation_system.phase == SchedulerPhase.ANIMATING
    # two columns at 12 cells each, 4 cells per tick
    drive_ticks(grid, 5)
    assert grid.tile_values() == {Position(0, 0): 2, Position(2, 0): 2}
    assert not merged

    grid.on_tick()
    assert not grid.is_animating
    assert merged == [{"source": Position(2, 0), "target": Position(0, 0), "value": 4}]
    values = grid.tile_values()
    assert values[Position(0, 0)] == 4
    assert len(values) == 2  # merged tile plus one spawn


def test_tile_coordinates_track_animation():
    grid = build_grid({(3, 0): 4})
    grid.on_tick(Direction.LEFT)
    grid.on_tick()
    tile = grid.get_tile(Position(3, 0))
    assert tile.coordinates == Coordinates(38 - 4, 1)
    settle(grid, Direction.LEFT)
    assert grid.get_tile(Position(0, 0)).coordinates == grid.coordinates_at(Position(0, 0))


def test_move_during_animation_is_dropped():
    grid = build_grid({(0, 0): 2, (3, 0): 2})
    dropped = []
    grid.event_bus.subscribe(EVENT_MOVE_DROPPED, lambda sender, **kw: dropped.append(kw["direction"]))

    grid.on_tick(Direction.LEFT)
    in_flight = grid.in_flight()
    grid.on_tick(Direction.RIGHT)
    assert dropped == [Direction.RIGHT]
    assert grid.in_flight() == in_flight

    while grid.is_animating:
        grid.on_tick()
    assert grid.tile_values()[Position(0, 0)] == 4


def test_exactly_one_spawn_per_completed_move():
    grid = build_grid({(0, 0): 2, (1, 1): 4, (3, 2): 8})
    spawned = []
    completed = []
    grid.event_bus.subscribe(EVENT_TILE_SPAWNED, lambda sender, **kw: spawned.append(kw["position"]))
    grid.event_bus.subscribe(EVENT_ANIMATION_COMPLETE, lambda sender, **kw: completed.append(kw["items"]))
    before = sum(grid.tile_values().values())

    settle(grid, Direction.RIGHT)

    assert len(spawned) == 1
    assert len(completed) == 1
    assert sum(grid.tile_values().values()) == before + 2


def test_rejected_move_neither_animates_nor_spawns():
    grid = build_grid({(0, 0): 2, (1, 0): 4})
    spawned = []
    grid.event_bus.subscribe(EVENT_TILE_SPAWNED, lambda sender, **kw: spawned.append(kw))
    grid.on_tick(Direction.LEFT)
    assert not grid.is_animating
    assert spawned == []
    assert grid.tile_values() == {Position(0, 0): 2, Position(1, 0): 4}


def test_chain_of_slides_lands_without_collisions():
    grid = build_grid({(1, 0): 2, (2, 0): 4, (3, 0): 8}, seed=3)
    settle(grid, Direction.LEFT)
    values = grid.tile_values()
    assert values[Position(0, 0)] == 2
    assert values[Position(1, 0)] == 4
    assert values[Position(2, 0)] == 8


def test_vertical_merges_land_in_place():
    grid = build_grid({(2, 0): 4, (2, 1): 4, (2, 2): 2, (2, 3): 2}, seed=1)
    settle(grid, Direction.DOWN)
    values = grid.tile_values()
    assert values[Position(2, 3)] == 4
    assert values[Position(2, 2)] == 8
    assert sum(values.values()) == 12 + 2
