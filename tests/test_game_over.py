from grid2048.components.direction import Direction
from grid2048.components.outcome import GameOverReason
from grid2048.components.position import Position
from grid2048.events.bus import EVENT_GAME_OVER
from grid2048.systems.game_over import has_reached, legal_moves
from tests.helpers import build_grid, drive_ticks

STUCK_2X2 = {(0, 0): 2, (1, 0): 4, (0, 1): 8, (1, 1): 16}


def test_stuck_board_reports_no_moves_left_on_next_tick():
    grid = build_grid(STUCK_2X2, size=2)
    assert grid.is_board_full()
    assert not grid.has_legal_move()
    assert grid.on_tick() == GameOverReason.NO_MOVES_LEFT
    assert grid.finished


def test_outcome_is_reported_exactly_once():
    grid = build_grid(STUCK_2X2, size=2)
    reported = []
    grid.event_bus.subscribe(EVENT_GAME_OVER, lambda sender, **kw: reported.append(kw["reason"]))
    outcomes = drive_ticks(grid, 5, move=Direction.LEFT)
    assert outcomes == [GameOverReason.NO_MOVES_LEFT]
    assert reported == [GameOverReason.NO_MOVES_LEFT]


def test_finished_grid_ignores_further_ticks():
    grid = build_grid(STUCK_2X2, size=2)
    grid.on_tick()
    before = grid.tile_values()
    assert grid.on_tick(Direction.UP) is None
    assert grid.tile_values() == before


def test_direct_spawn_on_full_board_with_moves_reports_board_full():
    grid = build_grid({(0, 0): 2, (1, 0): 2, (0, 1): 8, (1, 1): 16}, size=2)
    assert grid.has_legal_move()
    assert grid.spawn_random() is None
    assert grid.finished
    assert grid.on_tick() == GameOverReason.BOARD_FULL
    assert grid.on_tick() is None


def test_full_board_with_merge_keeps_playing():
    grid = build_grid({(0, 0): 2, (1, 0): 2, (0, 1): 8, (1, 1): 2}, size=2)
    assert drive_ticks(grid, 10, move=Direction.LEFT) == []
    assert not grid.finished
    assert grid.tile_values()[Position(0, 0)] == 4


def test_legal_moves_and_threshold_queries():
    grid = build_grid({(0, 0): 2, (1, 0): 2, (0, 1): 8, (1, 1): 16}, size=2)
    assert set(legal_moves(grid.world)) == {Direction.LEFT, Direction.RIGHT}
    assert grid.max_tile_value() == 16
    assert has_reached(grid.world, 16)
    assert not has_reached(grid.world, 32)
