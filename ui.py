"""
UI components and visualization helpers.
"""

from typing import Callable, Optional

import pandas as pd
import streamlit as st

from analytics import game_outcome, move_labels, move_log_rows, status_text
from config import BOARD_SIZE, EMPTY_SQUARE_LABEL, WINNING_LINES
from models import GameHistory, Snapshot


def print_rules() -> None:
    """Display how the game and the history list work."""
    st.markdown("### How to play")
    st.write("- X moves first, then players alternate.")
    st.write("- Three marks in a row, column or diagonal win the game.")
    st.write("- A full board without three in a row is a draw.")
    st.write(f"- There are {len(WINNING_LINES)} winning lines in total.")
    st.info(
        "The move list lets you travel back in time:\n"
        "- Clicking an entry shows the board as it was after that move.\n"
        "- Playing a move from an earlier board throws away every move after it."
    )


def render_square(value: Optional[str], on_click: Callable[[int], None], key: str, cell: int) -> bool:
    """A single cell: shows its mark (or nothing) and reports clicks to `on_click`."""
    return st.button(
        value or EMPTY_SQUARE_LABEL,
        key=key,
        on_click=on_click,
        args=(cell,),
        width="stretch",
    )


def render_board(squares: Snapshot, on_click: Callable[[int], None]) -> None:
    """Draw the board as BOARD_SIZE rows of BOARD_SIZE squares."""
    for r in range(BOARD_SIZE):
        cols = st.columns(BOARD_SIZE, gap="small")
        for c in range(BOARD_SIZE):
            i = BOARD_SIZE * r + c
            with cols[c]:
                render_square(squares[i], on_click, key=f"cell_{i}", cell=i)


def render_status(game: GameHistory) -> None:
    text = status_text(game)
    outcome = game_outcome(game)
    if outcome == "win":
        st.success(f"🎉 {text}")
    elif outcome == "draw":
        st.info(text)
    else:
        st.markdown(f"**{text}**")


def render_move_list(game: GameHistory, on_jump: Callable[[int], None]) -> None:
    """Render one "jump to" button per history entry; the shown step is highlighted."""
    st.markdown("#### Moves")
    for step, label in enumerate(move_labels(game)):
        st.button(
            label,
            key=f"jump_{step}",
            on_click=on_jump,
            args=(step,),
            type="primary" if step == game.step_number else "secondary",
        )


def render_move_log(game: GameHistory) -> None:
    """Render the played moves as a table."""
    st.markdown("#### Move log")
    rows = move_log_rows(game)
    if not rows:
        st.write("*No moves yet*")
        return

    df_log = pd.DataFrame(rows)
    st.dataframe(df_log, width="stretch", hide_index=True)


def render_notice(message: str) -> None:
    st.warning(message)
