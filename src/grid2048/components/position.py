from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Grid cell index; the unique key of a tile on the board."""
    x: int
    y: int


@dataclass(slots=True)
class Coordinates:
    """Character-cell location of a tile, mutated while the tile animates."""
    x: int
    y: int
