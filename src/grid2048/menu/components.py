"""Components used by the menu, settings and info screens."""
from dataclasses import dataclass
from enum import Enum


class MenuItem(Enum):
    """Main menu entries, in display order."""
    PLAY = 1
    RESET = 2
    SETTINGS = 3
    EXIT = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class SettingsItem(Enum):
    """Settings screen entries, in display order."""
    GAME_SIZE = 1
    ANIMATION_SPEED = 2

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


class InfoItem(Enum):
    """Messages shown on the info screen once a grid has finished."""
    GAME_WON = "won"
    GAME_LOST = "lost"


INFO_TEXT = {
    InfoItem.GAME_WON: ("Game Won", "You have won the game!"),
    InfoItem.GAME_LOST: ("Game Lost", "You have lost the game :("),
}

CONTROLS_TEXT = (
    "Controls",
    "Up - Arrow Up | W",
    "Down - Arrow Down | S",
    "Left - Arrow Left | A",
    "Right - Arrow Right | D",
    "Quit - Q",
    "Select - ENTER",
    "Back - ESC",
)


def step_item(item: Enum, delta: int) -> Enum:
    """Move a menu cursor by ``delta`` entries, wrapping at both ends."""
    members = list(type(item))
    index = members.index(item)
    return members[(index + delta) % len(members)]


@dataclass
class MenuBackground:
    """Background styling data for the menu screens."""
    color: tuple[int, int, int] = (0, 0, 0)
    highlight: tuple[int, int, int] = (102, 178, 255)
