from dataclasses import dataclass, field

from grid2048.components.position import Coordinates

@dataclass(slots=True)
class Board:
    size: int
    tile_width: int
    tile_height: int
    origin: Coordinates = field(default_factory=lambda: Coordinates(0, 0))
