"""
Game analytics: status, history labels and the per-move log.
"""

from typing import Dict, List, Optional

from config import BOARD_SIZE, MOVE_LABEL, START_LABEL
from game_logic import calculate_winner, current_winner, is_draw
from models import GameHistory, Snapshot


def status_text(game: GameHistory) -> str:
    """One line describing the shown board: winner, draw or whose turn it is."""
    winner = current_winner(game)
    if winner is not None:
        return f"Winner: {winner}"
    if is_draw(game):
        return "Draw: no moves left"
    return f"Next player: {game.next_mark()}"


def describe_step(step: int) -> str:
    return MOVE_LABEL.format(step=step) if step else START_LABEL


def move_labels(game: GameHistory) -> List[str]:
    return [describe_step(step) for step in range(len(game.history))]


def find_changed_cell(before: Snapshot, after: Snapshot) -> Optional[int]:
    """Index of the first cell that differs between two boards, or None."""
    for i, (old, new) in enumerate(zip(before, after)):
        if old != new:
            return i
    return None


def move_log_rows(game: GameHistory) -> List[Dict]:
    """
    One row per move along the active branch:
      - Move: step number (1-based, matches "Go to move #N")
      - Player / Cell: the mark placed and where
      - Row / Col: 1-based grid coordinates of that cell
      - Current: whether this is the board being shown
    """
    rows = []
    for step in range(1, len(game.history)):
        cell = find_changed_cell(game.history[step - 1], game.history[step])
        if cell is None:
            raise ValueError(f"Move {step} does not change the board")
        rows.append(
            {
                "Move": step,
                "Player": game.history[step][cell],
                "Cell": cell,
                "Row": cell // BOARD_SIZE + 1,
                "Col": cell % BOARD_SIZE + 1,
                "Current": step == game.step_number,
            }
        )
    return rows


def game_outcome(game: GameHistory) -> str:
    if calculate_winner(game.current_snapshot()) is not None:
        return "win"
    if is_draw(game):
        return "draw"
    return "in_progress"
