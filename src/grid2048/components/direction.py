from enum import Enum, auto


class Direction(Enum):
    """Player move directions. UP slides toward row 0, LEFT toward column 0."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
