from dataclasses import dataclass

from grid2048.components.position import Coordinates, Position

@dataclass(slots=True)
class MoveAnimation:
    """Attached to a tile entity while it travels from ``source`` to ``target``.

    ``destination`` is the character-cell location of ``target``; ``order`` is the
    tile's rank in the resolver pass and fixes the arrival processing order.
    """
    source: Position
    target: Position
    destination: Coordinates
    order: int
    merge: bool = False
