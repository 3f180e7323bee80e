from __future__ import annotations

from esper import World

from grid2048.components.game_state import GameMode, GameState
from grid2048.components.settings import Settings
from grid2048.events.bus import EVENT_GAME_MODE_CHANGED, EVENT_QUIT_REQUEST, EventBus
from grid2048.menu.components import InfoItem


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None


def set_game_mode(
    world: World,
    event_bus: EventBus,
    mode: GameMode,
    *,
    info: InfoItem | None = None,
) -> None:
    """Update the active screen and emit a change event when it differs."""

    state = get_game_state(world)
    if state is None:
        state = GameState(mode=mode, info=info)
        world.create_entity(state)
        event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=None, new_mode=mode)
        return
    previous_mode = state.mode
    state.info = info if mode == GameMode.INFO else None
    if previous_mode != mode:
        state.mode = mode
        event_bus.emit(EVENT_GAME_MODE_CHANGED, previous_mode=previous_mode, new_mode=mode)


def request_quit(world: World, event_bus: EventBus) -> None:
    state = get_game_state(world)
    if state is not None:
        state.running = False
    event_bus.emit(EVENT_QUIT_REQUEST)


def get_settings(world: World) -> Settings:
    """Return the shell settings resource, creating the default one if missing."""
    for _, settings in world.get_component(Settings):
        return settings
    settings = Settings()
    world.create_entity(settings)
    return settings
