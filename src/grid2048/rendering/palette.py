"""Tile colours keyed by value; anything past the table reuses the last entry."""

BOARD_FRAME_COLOR = (187, 173, 160)
EMPTY_SLOT_COLOR = (169, 169, 169)
DARK_TEXT = (119, 110, 101)
LIGHT_TEXT = (249, 246, 242)

TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
OVERFLOW_COLOR = (60, 58, 50)


def tile_color(value: int) -> tuple[int, int, int]:
    return TILE_COLORS.get(value, OVERFLOW_COLOR)


def text_color(value: int) -> tuple[int, int, int]:
    # Light digits read better on everything from 8 upward.
    return DARK_TEXT if value <= 4 else LIGHT_TEXT
