"""
Core game logic and state initialization.
"""

import logging
from typing import Dict, Optional

from config import CELL_COUNT, WINNING_LINES
from models import GameHistory, Snapshot

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a click lands on a taken square or a decided board."""

    def __init__(self, cell: int, reason: str):
        super().__init__(f"Illegal move at cell {cell}: {reason}")
        self.cell = cell
        self.reason = reason


def calculate_winner(squares: Snapshot) -> Optional[str]:
    """Return the mark owning the first complete line, or None (also for a draw)."""
    for a, b, c in WINNING_LINES:
        if squares[a] is not None and squares[a] == squares[b] == squares[c]:
            return squares[a]
    return None


def is_board_full(squares: Snapshot) -> bool:
    return all(cell is not None for cell in squares)


def current_winner(game: GameHistory) -> Optional[str]:
    return calculate_winner(game.current_snapshot())


def is_draw(game: GameHistory) -> bool:
    squares = game.current_snapshot()
    return calculate_winner(squares) is None and is_board_full(squares)


def make_initial_history() -> GameHistory:
    """Fresh game: one empty board, cursor at game start."""
    return GameHistory()


def _check_index(value, upper: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an int, got {type(value).__name__}")
    if not 0 <= value < upper:
        raise ValueError(f"{what} {value} out of range [0, {upper - 1}]")


def apply_move_core(game: GameHistory, cell: int) -> Dict:
    """
    Core move logic:
      - Rejects the move (IllegalMoveError, no mutation) if the shown board
        already has a winner or `cell` is taken.
      - Drops every snapshot after the cursor, appends the new board and moves
        the cursor onto it.
      - Returns info about the transition.
    """
    _check_index(cell, CELL_COUNT, "Cell")

    current = game.current_snapshot()
    if calculate_winner(current) is not None:
        raise IllegalMoveError(cell, "game_over")
    if current[cell] is not None:
        raise IllegalMoveError(cell, "occupied")

    kept = game.history[: game.step_number + 1]
    discarded = len(game.history) - len(kept)
    mark = game.next_mark()

    squares = list(current)
    squares[cell] = mark
    kept.append(tuple(squares))

    game.history = kept
    game.step_number = len(kept) - 1

    info = {
        "cell": cell,
        "mark": mark,
        "step": game.step_number,
        "discarded": discarded,
    }
    if discarded:
        logger.info("Move %d: %s at %d (dropped %d later moves)", game.step_number, mark, cell, discarded)
    else:
        logger.info("Move %d: %s at %d", game.step_number, mark, cell)
    return info


def apply_move(game: GameHistory, cell: int) -> None:
    """Convenience wrapper when you don't need the extra info."""
    apply_move_core(game, cell)


def jump_to(game: GameHistory, step: int) -> None:
    """Show an earlier (or later) board without touching the history."""
    _check_index(step, len(game.history), "Step")
    game.step_number = step
    logger.debug("Jumped to step %d of %d", step, game.last_step())
