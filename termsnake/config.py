"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

import os

# ── Grid ──────────────────────────────────────────────────────────
# x is the row axis (bounded by HEIGHT), y is the column axis (bounded by WIDTH).
WIDTH, HEIGHT   = 40, 20
LENGTH_SNAKE    = 100        # body buffer capacity

# ── Glyphs ────────────────────────────────────────────────────────
WALL_GLYPH   = "#"
SNAKE_GLYPH  = "0"
FRUIT_GLYPH  = "*"
EMPTY_GLYPH  = " "

# ── Gameplay ──────────────────────────────────────────────────────
SCORE_STEP  = 5
WIN_SCORE   = 100

# (score threshold, seconds per tick), highest threshold first
SPEED_CURVE = (
    (75, 0.100),
    (50, 0.150),
    (25, 0.200),
    (0,  0.250),
)
POST_GAME_POLL = 1.0         # seconds between quit polls once the game is over

# ── Keys ──────────────────────────────────────────────────────────
ESC          = 0x1B
CSI          = 0x5B          # "["
ARROW_UP     = 0x41          # "A"
ARROW_DOWN   = 0x42          # "B"
ARROW_RIGHT  = 0x43          # "C"
ARROW_LEFT   = 0x44          # "D"
QUIT_KEYS    = (ord("x"), ord("X"))
READ_CHUNK   = 64
MAX_PENDING  = 48            # bytes of unread keys kept between ticks, oldest dropped first

# ── Text ──────────────────────────────────────────────────────────
# screen row = grid height + offset
SCORE_OFFSET  = 2
HINT_OFFSET   = 3
FOOTER_OFFSET = 5
QUIT_HINT    = "Press 'X' to quit the game"
FOOTER_LINES = (
    "Welcome to the Snake Game!",
    "Use the arrow keys to move the snake.",
    "Eat the fruit (*) to grow and score points.",
    "Avoid running into the walls or the snake itself.",
)

# ── Logging ───────────────────────────────────────────────────────
# stdout is the game screen, so log records only go to a file when asked.
LOG_FILE   = os.environ.get("TERMSNAKE_LOG")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
