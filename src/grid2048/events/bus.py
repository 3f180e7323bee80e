from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: move=Direction|None (grid bus); dt=float (shell bus)


# ============================================================================
# MOVES
# ============================================================================
EVENT_MOVE_REQUEST = "move_request"                # payload: direction=Direction
EVENT_MOVE_RESOLVED = "move_resolved"              # payload: direction=Direction, outcome=MoveOutcome
EVENT_MOVE_REJECTED = "move_rejected"              # payload: direction=Direction
EVENT_MOVE_DROPPED = "move_dropped"                # payload: direction=Direction (arrived while animating)


# ============================================================================
# TILES & BOARD
# ============================================================================
EVENT_TILE_MOVED = "tile_moved"                    # payload: source=Position, target=Position, value=int
EVENT_TILE_MERGED = "tile_merged"                  # payload: source=Position, target=Position, value=int (merged value)
EVENT_SPAWN_REQUEST = "spawn_request"              # payload: reason=str
EVENT_TILE_SPAWNED = "tile_spawned"                # payload: position=Position, value=int
EVENT_BOARD_FULL = "board_full"                    # payload: None
EVENT_GAME_OVER = "game_over"                      # payload: reason=GameOverReason


# ============================================================================
# ANIMATION
# ============================================================================
EVENT_ANIMATION_START = "animation_start"          # payload: kind=str, items=list[Transition]
EVENT_ANIMATION_COMPLETE = "animation_complete"    # payload: kind=str, items=list[Transition]


# ============================================================================
# INPUT
# ============================================================================
EVENT_PLAYER_MOVE = "player_move"                  # payload: direction=Direction


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: reason=str
EVENT_SETTINGS_CHANGED = "settings_changed"        # payload: item=SettingsItem, settings=Settings
EVENT_QUIT_REQUEST = "quit_request"                # payload: None
