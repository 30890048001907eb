# src/checkers/config.py

from __future__ import annotations

ROWS = 8
COLS = 8
MARKER_ROWS = 2  # rows of markers per side at start

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True
SHOW_STATUS = True

# Rules
# The turn handler only checks "playable and empty" before moving a selected
# marker. Flip this to also require Board.can_move (one diagonal step).
ENFORCE_DIAGONAL_MOVES = False

# Logging (a file keeps log lines out of the painted frame)
LOG_FILE: str | None = None
LOG_LEVEL = "WARNING"

# Seconds to wait for the rest of an escape sequence after ESC
ESCAPE_TIMEOUT_SEC = 0.05
