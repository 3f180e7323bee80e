from dataclasses import dataclass

from grid2048.constants import (
    BOARD_MAX_HEIGHT_PCT, BOARD_MAX_WIDTH_PCT, CELL_HEIGHT, CELL_WIDTH, SIDE_GAP, SIDE_PANEL_WIDTH,
)

MIN_SCALE = 0.25


@dataclass(frozen=True, slots=True)
class BoardGeometry:
    """Pixel mapping for the character-cell grid; ``top`` is the y of cell row 0."""
    cell_width: float
    cell_height: float
    left: float
    top: float

    def cell_rect(self, x: int, y: int, width: int, height: int) -> tuple[float, float, float, float]:
        """Return (left, bottom, width, height) in window pixels for a cell-space rectangle."""
        px_left = self.left + x * self.cell_width
        px_top = self.top - y * self.cell_height
        px_height = height * self.cell_height
        return px_left, px_top - px_height, width * self.cell_width, px_height


def compute_board_geometry(window_width: int, window_height: int, cells_wide: int, cells_high: int) -> BoardGeometry:
    """Scale the grid's character cells so the board fits the window beside the controls panel.

    Arcade's y axis points up while cell rows grow downward, so rows are laid out from ``top``.
    """
    max_board_w = min(window_width * BOARD_MAX_WIDTH_PCT, max(window_width - SIDE_PANEL_WIDTH - SIDE_GAP, 1))
    max_board_h = window_height * BOARD_MAX_HEIGHT_PCT
    scale = min(
        max_board_w / (cells_wide * CELL_WIDTH),
        max_board_h / (cells_high * CELL_HEIGHT),
    )
    scale = max(scale, MIN_SCALE)
    cell_w = CELL_WIDTH * scale
    cell_h = CELL_HEIGHT * scale
    board_w = cells_wide * cell_w
    board_h = cells_high * cell_h
    left = max((window_width - SIDE_PANEL_WIDTH - SIDE_GAP - board_w) / 2, 0.0)
    top = window_height - max((window_height - board_h) / 2, 0.0)
    return BoardGeometry(cell_width=cell_w, cell_height=cell_h, left=left, top=top)
