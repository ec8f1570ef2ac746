"""
Game configuration and constants.
"""

import os

# Marks
MARK_X = "X"
MARK_O = "O"

# Board geometry
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# All the ways to win, checked in this order
WINNING_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
]

# History list labels
START_LABEL = "Go to game start"
MOVE_LABEL = "Go to move #{step}"

# Notice shown when a click is ignored
REJECTED_MOVE_MESSAGE = "Ignoring that click: the square is taken or the game is over."

# UI Settings
PAGE_TITLE = "Tic-Tac-Toe"
EMPTY_SQUARE_LABEL = " "

# Logging
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
