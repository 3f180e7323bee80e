from dataclasses import dataclass

@dataclass(slots=True)
class TileValue:
    """Face value of a placed tile (a power of two, at least 2)."""
    value: int
