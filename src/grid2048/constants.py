GRID_SIZE = 4
MIN_GRID_SIZE = 2
TILE_SIZE = 10
SPAWN_VALUE = 2
WIN_TILE = 2048

# Character-cell gaps between tiles (a terminal cell is roughly twice as tall as wide).
MARGIN_X = 2
MARGIN_Y = 1

# Per-tick animation steps, in character cells.
STEP_X = 4
STEP_Y = 2

# Tick interval is (ANIMATION_SPEED_MAX + 1 - speed) * BASE_TICK_RATE seconds.
BASE_TICK_RATE = 0.040
ANIMATION_SPEED_MIN = 1
ANIMATION_SPEED_MAX = 3
GAME_SIZE_MIN = 4
GAME_SIZE_MAX = 8

# Window geometry for the arcade shell.
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "2048"
UPDATE_RATE = 1 / 60

# Pixel size of one character cell before scaling to the window.
CELL_WIDTH = 8
CELL_HEIGHT = 16

# Board maximum footprint relative to window (percentage of window width/height).
# The render/layout code will size the board so it does not exceed either percentage.
BOARD_MAX_WIDTH_PCT = 0.70
BOARD_MAX_HEIGHT_PCT = 0.90
# Width reserved right of the board for the controls panel.
SIDE_PANEL_WIDTH = 220
SIDE_GAP = 30

# Key codes as reported by arcade.key; kept numeric so input systems stay headless.
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ENTER = 65293
KEY_ESCAPE = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_Q = 113
