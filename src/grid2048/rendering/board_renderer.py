from __future__ import annotations

from typing import TYPE_CHECKING

from grid2048.components.position import Position
from grid2048.rendering.palette import BOARD_FRAME_COLOR, EMPTY_SLOT_COLOR, text_color, tile_color

if TYPE_CHECKING:
    from grid2048.grid import Grid
    from grid2048.systems.render import RenderSystem
    from grid2048.ui.layout import BoardGeometry


class BoardRenderer:
    """Draws the board frame, the empty slots and every tile at its current coordinates."""

    def __init__(self, render_system: RenderSystem, font_scale: float = 0.45):
        self._rs = render_system
        self._font_scale = font_scale

    def render(self, arcade, grid: Grid, geometry: BoardGeometry, headless: bool) -> None:
        rs = self._rs
        board = grid.board
        rs._last_tile_rects = {}

        frame = geometry.cell_rect(board.origin.x, board.origin.y, grid.width(), grid.height())
        if not headless:
            arcade.draw_lbwh_rectangle_filled(*frame, BOARD_FRAME_COLOR)
            for x in range(board.size):
                for y in range(board.size):
                    slot = grid.coordinates_at(Position(x, y))
                    rect = geometry.cell_rect(slot.x, slot.y, board.tile_width, board.tile_height)
                    arcade.draw_lbwh_rectangle_filled(*rect, EMPTY_SLOT_COLOR)

        # Tiles are drawn from their live coordinates so in-flight tiles appear between slots.
        for position, tile in grid.tiles():
            rect = geometry.cell_rect(tile.coordinates.x, tile.coordinates.y, board.tile_width, board.tile_height)
            rs._last_tile_rects[position] = rect
            if headless:
                continue
            left, bottom, width, height = rect
            arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, tile_color(tile.value))
            font_size = max(int(min(width / max(len(str(tile.value)), 2), height) * self._font_scale), 8)
            arcade.draw_text(
                str(tile.value),
                left + width / 2,
                bottom + height / 2,
                text_color(tile.value),
                font_size,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
