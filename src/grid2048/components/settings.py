from dataclasses import dataclass

from grid2048.constants import (
    ANIMATION_SPEED_MAX,
    ANIMATION_SPEED_MIN,
    BASE_TICK_RATE,
    GAME_SIZE_MAX,
    GAME_SIZE_MIN,
    GRID_SIZE,
)
from grid2048.menu.components import SettingsItem


@dataclass
class Settings:
    """User-adjustable options, copied into each new grid by value.

    Each settings entry cycles upward on selection and wraps back to its minimum.
    """
    game_size: int = GRID_SIZE
    animation_speed: int = ANIMATION_SPEED_MAX
    active_item: SettingsItem = SettingsItem.GAME_SIZE

    def cycle(self, item: SettingsItem) -> int:
        if item == SettingsItem.GAME_SIZE:
            nxt = self.game_size + 1
            self.game_size = nxt if nxt <= GAME_SIZE_MAX else GAME_SIZE_MIN
            return self.game_size
        nxt = self.animation_speed + 1
        self.animation_speed = nxt if nxt <= ANIMATION_SPEED_MAX else ANIMATION_SPEED_MIN
        return self.animation_speed

    def value_for(self, item: SettingsItem) -> int:
        if item == SettingsItem.GAME_SIZE:
            return self.game_size
        return self.animation_speed

    @property
    def tick_interval(self) -> float:
        """Seconds between animation ticks; faster speeds tick more often."""
        return (ANIMATION_SPEED_MAX + 1 - self.animation_speed) * BASE_TICK_RATE
