"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Board ─────────────────────────────────────────────────────────
BOARD_W, BOARD_H = 10, 10
BOARD_MIN        = 1
BOARD_MAX        = 512

START_BODY  = ((0, 0), (1, 0))     # oldest first, head last; moving east
START_APPLE = (5, 5)

# ── Timing (milliseconds) ─────────────────────────────────────────
DELAY_MS     = 250
DELAY_STEP   = 20
DELAY_MIN_MS = DELAY_STEP
DELAY_MAX_MS = 2000

# ── Colors ────────────────────────────────────────────────────────
SNAKE_COLOR = "green"
APPLE_COLOR = "red"
TEXT_COLOR  = "yellow"

# ── Window back-end ───────────────────────────────────────────────
WINDOW_CELL  = 20
WINDOW_FONT  = "dejavusansmono"
WINDOW_BG    = (10, 10, 15)
WINDOW_FG    = (200, 200, 220)
WINDOW_RGB   = {
    "green":  (0,   255, 136),
    "red":    (255, 51,  102),
    "yellow": (255, 228, 77),
}
WINDOW_MARGIN = 4                  # spare rows/cols for border and message
WINDOW_PAD    = 1                  # blank cells right of and below each frame

# ── Messages ──────────────────────────────────────────────────────
GAME_OVER_TEXT = "Game Over"

# ── Step outcomes ─────────────────────────────────────────────────
STEP_MOVED = "moved"
STEP_ATE   = "ate"
STEP_DIED  = "died"

# ── Key bindings ──────────────────────────────────────────────────
ACTION_QUIT         = "quit"
ACTION_NORTH        = "north"
ACTION_SOUTH        = "south"
ACTION_WEST         = "west"
ACTION_EAST         = "east"
ACTION_WIDTH_DEC    = "width-"
ACTION_WIDTH_INC    = "width+"
ACTION_HEIGHT_DEC   = "height-"
ACTION_HEIGHT_INC   = "height+"
ACTION_SLOWER       = "slower"
ACTION_FASTER       = "faster"
ACTION_SNAKE_STYLE  = "snake-style"
ACTION_APPLE_STYLE  = "apple-style"
ACTION_WRAP         = "wrap"
ACTION_COLOR        = "color"

KEY_BINDINGS = {
    "q":     ACTION_QUIT,
    "k":     ACTION_NORTH,  "up":    ACTION_NORTH,
    "j":     ACTION_SOUTH,  "down":  ACTION_SOUTH,
    "h":     ACTION_WEST,   "left":  ACTION_WEST,
    "l":     ACTION_EAST,   "right": ACTION_EAST,
    "1":     ACTION_WIDTH_DEC,
    "2":     ACTION_WIDTH_INC,
    "3":     ACTION_HEIGHT_DEC,
    "4":     ACTION_HEIGHT_INC,
    "5":     ACTION_SLOWER,
    "6":     ACTION_FASTER,
    "7":     ACTION_SNAKE_STYLE,
    "8":     ACTION_APPLE_STYLE,
    "9":     ACTION_WRAP,
    "0":     ACTION_COLOR,
}
