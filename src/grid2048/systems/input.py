from esper import World

from grid2048.components.direction import Direction
from grid2048.components.game_state import GameMode
from grid2048.constants import (
    KEY_A, KEY_D, KEY_DOWN, KEY_ESCAPE, KEY_LEFT, KEY_Q, KEY_RIGHT, KEY_S, KEY_UP, KEY_W,
)
from grid2048.events.bus import EVENT_PLAYER_MOVE, EventBus
from grid2048.utils.game_state import get_game_state, request_quit, set_game_mode

KEY_TO_DIRECTION = {
    KEY_UP: Direction.UP,
    KEY_W: Direction.UP,
    KEY_DOWN: Direction.DOWN,
    KEY_S: Direction.DOWN,
    KEY_LEFT: Direction.LEFT,
    KEY_A: Direction.LEFT,
    KEY_RIGHT: Direction.RIGHT,
    KEY_D: Direction.RIGHT,
}


class InputSystem:
    """Turns key presses on the game screen into player moves."""

    def __init__(self, event_bus: EventBus, world: World):
        self.event_bus = event_bus
        self.world = world

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.GAME:
            return
        if symbol == KEY_Q:
            request_quit(self.world, self.event_bus)
            return
        if symbol == KEY_ESCAPE:
            set_game_mode(self.world, self.event_bus, GameMode.MENU)
            return
        direction = KEY_TO_DIRECTION.get(symbol)
        if direction is not None:
            self.event_bus.emit(EVENT_PLAYER_MOVE, direction=direction)
