from grid2048.components.game_state import GameMode
from grid2048.constants import KEY_DOWN, KEY_ENTER, KEY_ESCAPE, KEY_Q, KEY_UP, KEY_W
from grid2048.events.bus import (
    EVENT_GAME_MODE_CHANGED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_QUIT_REQUEST,
    EVENT_SETTINGS_CHANGED,
    EventBus,
)
from grid2048.menu.components import InfoItem, MenuItem, SettingsItem
from grid2048.menu.input_system import MenuInputSystem
from grid2048.utils.game_state import get_game_state, get_settings, set_game_mode
from grid2048.world import create_app_world


def _setup(mode=GameMode.MENU):
    bus = EventBus()
    world = create_app_world(initial_mode=mode)
    events = []
    for name in (EVENT_NEW_GAME_REQUEST, EVENT_QUIT_REQUEST, EVENT_SETTINGS_CHANGED):
        bus.subscribe(name, lambda sender, _name=name, **kw: events.append((_name, kw)))
    return bus, world, MenuInputSystem(world, bus), events


def test_cursor_wraps_at_both_ends():
    bus, world, system, events = _setup()
    state = get_game_state(world)
    system.handle_key_press(KEY_UP)
    assert state.menu_item == MenuItem.EXIT
    system.handle_key_press(KEY_DOWN)
    assert state.menu_item == MenuItem.PLAY
    system.handle_key_press(KEY_DOWN)
    system.handle_key_press(KEY_W)
    assert state.menu_item == MenuItem.PLAY


def test_play_enters_game_without_new_grid():
    bus, world, system, events = _setup()
    changes = []
    bus.subscribe(EVENT_GAME_MODE_CHANGED, lambda sender, **kw: changes.append(kw["new_mode"]))
    system.handle_key_press(KEY_ENTER)
    assert get_game_state(world).mode == GameMode.GAME
    assert changes == [GameMode.GAME]
    assert events == []


def test_reset_requests_new_game_then_plays():
    bus, world, system, events = _setup()
    get_game_state(world).menu_item = MenuItem.RESET
    system.handle_key_press(KEY_ENTER)
    assert events == [(EVENT_NEW_GAME_REQUEST, {"reason": "reset"})]
    assert get_game_state(world).mode == GameMode.GAME


def test_exit_and_escape_quit_from_menu():
    for key in (KEY_ESCAPE, KEY_Q):
        bus, world, system, events = _setup()
        system.handle_key_press(key)
        assert [name for name, _ in events] == [EVENT_QUIT_REQUEST]
    bus, world, system, events = _setup()
    get_game_state(world).menu_item = MenuItem.EXIT
    system.handle_key_press(KEY_ENTER)
    assert not get_game_state(world).running


def test_settings_screen_cycles_active_entry():
    bus, world, system, events = _setup()
    get_game_state(world).menu_item = MenuItem.SETTINGS
    system.handle_key_press(KEY_ENTER)
    assert get_game_state(world).mode == GameMode.SETTINGS

    system.handle_key_press(KEY_ENTER)
    settings = get_settings(world)
    assert settings.game_size == 5
    name, payload = events[-1]
    assert name == EVENT_SETTINGS_CHANGED
    assert payload["item"] == SettingsItem.GAME_SIZE

    system.handle_key_press(KEY_DOWN)
    system.handle_key_press(KEY_ENTER)
    assert settings.animation_speed == 1
    assert events[-1][1]["item"] == SettingsItem.ANIMATION_SPEED

    system.handle_key_press(KEY_ESCAPE)
    assert get_game_state(world).mode == GameMode.MENU


def test_info_screen_enter_starts_new_game():
    bus, world, system, events = _setup()
    set_game_mode(world, bus, GameMode.INFO, info=InfoItem.GAME_WON)
    assert get_game_state(world).info == InfoItem.GAME_WON
    system.handle_key_press(KEY_ENTER)
    assert events == [(EVENT_NEW_GAME_REQUEST, {"reason": "play_again"})]
    state = get_game_state(world)
    assert state.mode == GameMode.GAME
    assert state.info is None


def test_info_screen_escape_returns_to_menu():
    bus, world, system, events = _setup()
    set_game_mode(world, bus, GameMode.INFO, info=InfoItem.GAME_LOST)
    system.handle_key_press(KEY_ESCAPE)
    assert get_game_state(world).mode == GameMode.MENU
    assert events == []


def test_ignored_during_game():
    bus, world, system, events = _setup(GameMode.GAME)
    system.handle_key_press(KEY_Q)
    assert events == []
    assert get_game_state(world).running
