"""Entry point for the terminal-style 2048 game.

Sets up the shell world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, color, exit as arcade_exit, run, set_background_color
from grid2048.world import create_app_world
from grid2048.constants import UPDATE_RATE, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from grid2048.events.bus import EVENT_QUIT_REQUEST, EVENT_TICK, EventBus
from grid2048.components.game_state import GameMode, GameState
from grid2048.menu.input_system import MenuInputSystem
from grid2048.menu.render_system import MenuRenderSystem
from grid2048.systems.game_flow_system import GameFlowSystem
from grid2048.systems.input import InputSystem
from grid2048.systems.render import RenderSystem
from grid2048.utils.game_state import get_game_state

logger = logging.getLogger(__name__)


class Grid2048Window(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.set_update_rate(UPDATE_RATE)
        self.event_bus = EventBus()
        self.world = create_app_world(initial_mode=GameMode.MENU)

        # Flow owns the active grid and feeds it ticks.
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)

        # Menu systems
        self.menu_input_system = MenuInputSystem(self.world, self.event_bus)
        self.menu_render_system = MenuRenderSystem(self.world, self)

        # Game screen systems
        self.input_system = InputSystem(self.event_bus, self.world)
        self.render_system = RenderSystem(self.world, self.event_bus, self, self.game_flow_system)

        self.event_bus.subscribe(EVENT_QUIT_REQUEST, self.on_quit_request)
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        self.render_system.notify_resize(width, height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        state = self._get_game_state()
        if state and state.mode == GameMode.GAME:
            self.render_system.process()
            return
        self.menu_render_system.process()

    def on_update(self, delta_time: float):
        state = self._get_game_state()
        if state and state.mode == GameMode.GAME:
            self.event_bus.emit(EVENT_TICK, dt=delta_time)

    def on_key_press(self, symbol: int, modifiers: int):
        state = self._get_game_state()
        if not state:
            return
        # One handler per press; a mode switch takes effect on the next key.
        if state.mode == GameMode.GAME:
            self.input_system.handle_key_press(symbol, modifiers)
        else:
            self.menu_input_system.handle_key_press(symbol, modifiers)

    def on_quit_request(self, sender, **kwargs):
        logger.info("Quit requested, closing window")
        self.close()
        arcade_exit()

    def _get_game_state(self) -> GameState | None:
        return get_game_state(self.world)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = Grid2048Window()
    run()


if __name__ == "__main__":
    main()
