GRID_WIDTH = 6
GRID_HEIGHT = 12

# Connected same-colored units needed before a group pops.
POP_THRESHOLD = 4

# Spawn anchor: 3rd column, top row. The secondary starts above the playfield.
SPAWN_COLUMN = 2
SPAWN_ROW = 0

DEFAULT_QUEUE_LENGTH = 2
DEFAULT_PALETTE_SIZE = 5

# Tick cadence in seconds.
DEFAULT_TICK_TIME = 0.25
FAST_TICK_TIME = 0.05      # gravity moving or soft drop held
DEAD_TICK_TIME = 1.0

# 0 scores chain_length * size (first pass contributes nothing); 1 scores (chain_length + 1) * size.
DEFAULT_CHAIN_SCORE_OFFSET = 0
DEFAULT_SOFT_DROP_POINTS = 0

# Window / render geometry
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 640
MIN_TILE_SIZE = 12
BOTTOM_MARGIN = 20
BOARD_MAX_WIDTH_PCT = 0.60
BOARD_MAX_HEIGHT_PCT = 0.90
PREVIEW_GAP = 24
