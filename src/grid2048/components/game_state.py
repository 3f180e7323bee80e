"""Game state resource describing the active screen of the shell."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from grid2048.menu.components import InfoItem, MenuItem


class GameMode(Enum):
    """Screens of the application shell."""
    MENU = auto()
    GAME = auto()
    SETTINGS = auto()
    INFO = auto()


@dataclass
class GameState:
    """Singleton component storing the active screen and its cursor."""
    mode: GameMode = GameMode.MENU
    menu_item: MenuItem = MenuItem.PLAY
    info: Optional[InfoItem] = None
    running: bool = True
