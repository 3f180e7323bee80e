"""Rendering system responsible for the menu, settings and info screens."""
from esper import World

from grid2048.components.game_state import GameMode, GameState
from grid2048.menu.components import INFO_TEXT, MenuBackground, MenuItem, SettingsItem
from grid2048.utils.game_state import get_game_state, get_settings

TITLE_SIZE = 32
ENTRY_SIZE = 22
ENTRY_SPACING = 48
TEXT_COLOR = (255, 255, 255)


class MenuRenderSystem:
    """Renders whichever non-game screen is active."""

    def __init__(self, world: World, window) -> None:
        self.world = world
        self.window = window

    def process(self) -> None:
        state = get_game_state(self.world)
        if not state or state.mode == GameMode.GAME:
            return
        import arcade
        background = self._background()
        arcade.draw_lrbt_rectangle_filled(0, self.window.width, 0, self.window.height, background.color)
        if state.mode == GameMode.MENU:
            self._draw_menu(arcade, state, background)
        elif state.mode == GameMode.SETTINGS:
            self._draw_settings(arcade, background)
        elif state.mode == GameMode.INFO:
            self._draw_info(arcade, state)

    def _draw_menu(self, arcade, state: GameState, background: MenuBackground) -> None:
        self._draw_title(arcade, "2048")
        for index, item in enumerate(MenuItem):
            color = background.highlight if item == state.menu_item else TEXT_COLOR
            self._draw_entry(arcade, item.label, index, color)

    def _draw_settings(self, arcade, background: MenuBackground) -> None:
        settings = get_settings(self.world)
        self._draw_title(arcade, "Settings")
        for index, item in enumerate(SettingsItem):
            color = background.highlight if item == settings.active_item else TEXT_COLOR
            self._draw_entry(arcade, f"{item.label}: {settings.value_for(item)}", index, color)

    def _draw_info(self, arcade, state: GameState) -> None:
        if state.info is None:
            return
        title, message = INFO_TEXT[state.info]
        self._draw_title(arcade, title)
        self._draw_entry(arcade, message, 0, TEXT_COLOR)
        self._draw_entry(arcade, "Press enter to reset and play again.", 1, TEXT_COLOR)

    def _draw_title(self, arcade, text: str) -> None:
        arcade.draw_text(
            text,
            self.window.width / 2,
            self.window.height * 0.75,
            TEXT_COLOR,
            TITLE_SIZE,
            anchor_x="center",
            anchor_y="center",
            bold=True,
        )

    def _draw_entry(self, arcade, text: str, index: int, color) -> None:
        arcade.draw_text(
            text,
            self.window.width / 2,
            self.window.height * 0.55 - index * ENTRY_SPACING,
            color,
            ENTRY_SIZE,
            anchor_x="center",
            anchor_y="center",
        )

    def _background(self) -> MenuBackground:
        for _, background in self.world.get_component(MenuBackground):
            return background
        return MenuBackground()
