from __future__ import annotations

from typing import TYPE_CHECKING

from esper import World

from grid2048.components.game_state import GameMode
from grid2048.components.position import Position
from grid2048.constants import SIDE_GAP, SIDE_PANEL_WIDTH
from grid2048.events.bus import EVENT_SETTINGS_CHANGED, EVENT_NEW_GAME_REQUEST, EventBus
from grid2048.menu.components import CONTROLS_TEXT
from grid2048.rendering.board_renderer import BoardRenderer
from grid2048.rendering.palette import LIGHT_TEXT
from grid2048.ui.layout import BoardGeometry, compute_board_geometry
from grid2048.utils.game_state import get_game_state

if TYPE_CHECKING:
    from grid2048.systems.game_flow_system import GameFlowSystem

PANEL_LINE_HEIGHT = 26


class RenderSystem:
    """Draws the active grid and the controls panel while the game screen is up."""

    def __init__(self, world: World, event_bus: EventBus, window, game_flow: GameFlowSystem):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.game_flow = game_flow
        self._geometry: BoardGeometry | None = None
        self._last_window_size = (self.window.width, self.window.height)
        self._last_tile_rects: dict[Position, tuple[float, float, float, float]] = {}
        self._board_renderer = BoardRenderer(self)
        # A new grid may have a different size, so the cached geometry goes stale.
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self._invalidate)
        self.event_bus.subscribe(EVENT_SETTINGS_CHANGED, self._invalidate)

    def notify_resize(self, width: int, height: int):
        self._last_window_size = (width, height)
        self._geometry = None

    def _invalidate(self, sender, **kwargs):
        self._geometry = None

    @property
    def geometry(self) -> BoardGeometry:
        if (self.window.width, self.window.height) != self._last_window_size:
            self.notify_resize(self.window.width, self.window.height)
        if self._geometry is None:
            grid = self.game_flow.grid
            self._geometry = compute_board_geometry(
                self.window.width, self.window.height, grid.width(), grid.height()
            )
        return self._geometry

    def process(self):
        state = get_game_state(self.world)
        if not state or state.mode != GameMode.GAME:
            return
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        self._board_renderer.render(arcade, self.game_flow.grid, self.geometry, headless)
        if not headless:
            self._draw_controls(arcade)

    def _draw_controls(self, arcade) -> None:
        left = self.window.width - SIDE_PANEL_WIDTH - SIDE_GAP / 2
        top = self.window.height * 0.8
        for index, line in enumerate(CONTROLS_TEXT):
            arcade.draw_text(
                line,
                left,
                top - index * PANEL_LINE_HEIGHT,
                LIGHT_TEXT,
                16 if index == 0 else 12,
                bold=index == 0,
            )
