"""Terminal outcomes reported by the grid engine."""
from enum import Enum


class GameOverReason(Enum):
    """Why a grid stopped accepting rounds."""
    BOARD_FULL = "board_full"
    NO_MOVES_LEFT = "no_moves_left"
