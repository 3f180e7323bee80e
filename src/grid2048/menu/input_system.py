"""Keyboard handling for the menu, settings and info screens."""
from esper import World

from grid2048.components.game_state import GameMode, GameState
from grid2048.constants import KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_Q, KEY_S, KEY_UP, KEY_W
from grid2048.events.bus import EVENT_NEW_GAME_REQUEST, EVENT_SETTINGS_CHANGED, EventBus
from grid2048.menu.components import MenuItem, step_item
from grid2048.utils.game_state import get_game_state, get_settings, request_quit, set_game_mode

UP_KEYS = (KEY_UP, KEY_W)
DOWN_KEYS = (KEY_DOWN, KEY_S)
# arcade reports Enter as 65293; raw terminals send 13.
ENTER_KEYS = (KEY_ENTER, 13)


class MenuInputSystem:
    """Processes key presses while a non-game screen is active."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus

    def handle_key_press(self, symbol: int, modifiers: int = 0) -> None:
        state = get_game_state(self.world)
        if not state or state.mode == GameMode.GAME:
            return
        if symbol == KEY_Q:
            request_quit(self.world, self.event_bus)
        elif state.mode == GameMode.MENU:
            self._handle_menu_key(state, symbol)
        elif state.mode == GameMode.SETTINGS:
            self._handle_settings_key(symbol)
        elif state.mode == GameMode.INFO:
            self._handle_info_key(symbol)

    def _handle_menu_key(self, state: GameState, symbol: int) -> None:
        if symbol in UP_KEYS:
            state.menu_item = step_item(state.menu_item, -1)
        elif symbol in DOWN_KEYS:
            state.menu_item = step_item(state.menu_item, 1)
        elif symbol == KEY_ESCAPE:
            request_quit(self.world, self.event_bus)
        elif symbol in ENTER_KEYS:
            self._activate(state.menu_item)

    def _activate(self, item: MenuItem) -> None:
        if item == MenuItem.PLAY:
            set_game_mode(self.world, self.event_bus, GameMode.GAME)
        elif item == MenuItem.RESET:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST, reason='reset')
            set_game_mode(self.world, self.event_bus, GameMode.GAME)
        elif item == MenuItem.SETTINGS:
            set_game_mode(self.world, self.event_bus, GameMode.SETTINGS)
        elif item == MenuItem.EXIT:
            request_quit(self.world, self.event_bus)

    def _handle_settings_key(self, symbol: int) -> None:
        settings = get_settings(self.world)
        if symbol in UP_KEYS:
            settings.active_item = step_item(settings.active_item, -1)
        elif symbol in DOWN_KEYS:
            settings.active_item = step_item(settings.active_item, 1)
        elif symbol in ENTER_KEYS:
            settings.cycle(settings.active_item)
            self.event_bus.emit(EVENT_SETTINGS_CHANGED, item=settings.active_item, settings=settings)
        elif symbol == KEY_ESCAPE:
            set_game_mode(self.world, self.event_bus, GameMode.MENU)

    def _handle_info_key(self, symbol: int) -> None:
        if symbol in ENTER_KEYS:
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST, reason='play_again')
            set_game_mode(self.world, self.event_bus, GameMode.GAME)
        elif symbol == KEY_ESCAPE:
            set_game_mode(self.world, self.event_bus, GameMode.MENU)

