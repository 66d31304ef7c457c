# ============================================================================
# GRID & RULES
# ============================================================================
HEX_SIZE = 35
GRID_RADIUS = 2
MAX_STACK_HEIGHT = 10
HAND_SIZE = 3
HAND_STACK_MIN = 1
HAND_STACK_MAX = 2

# Scoring
MERGE_POINTS_PER_TILE = 20
OVERFLOW_BONUS = 100

# Upper bound on passes of a single merge cascade.
CASCADE_ITERATION_LIMIT = 20


# ============================================================================
# PRESENTATION TIMING (seconds)
# ============================================================================
PLACEMENT_SETTLE_DELAY = 0.1
SCORE_PULSE_DURATION = 0.4
OVERFLOW_BURST_DURATION = 0.8
GAME_OVER_MODAL_DELAY = 0.3


# ============================================================================
# WINDOW & LAYOUT
# ============================================================================
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 720
WINDOW_TITLE = "Hexstack"

# Board center as a fraction of the window size (arcade origin is bottom-left).
BOARD_CENTER_X_PCT = 0.5
BOARD_CENTER_Y_PCT = 0.58

# Hand tray geometry
HAND_TRAY_Y = 110
HAND_SLOT_SPACING = 120
HAND_SLOT_RADIUS = 42

# Visual offset between stacked layers and the cap on drawn layers per stack.
STACK_LAYER_OFFSET = 4
RENDER_LAYER_CAP = 5

# Play-again button on the game-over overlay (center offsets from window center).
PLAY_AGAIN_WIDTH = 180
PLAY_AGAIN_HEIGHT = 48
PLAY_AGAIN_OFFSET_Y = -60
