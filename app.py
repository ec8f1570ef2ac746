"""
Main Streamlit application.
"""

import logging
from typing import MutableMapping

import streamlit as st

from config import LOG_FORMAT, LOG_LEVEL, PAGE_TITLE, REJECTED_MOVE_MESSAGE
from game_logic import IllegalMoveError, apply_move, jump_to, make_initial_history
from models import GameHistory

from ui import (
    print_rules,
    render_board,
    render_move_list,
    render_move_log,
    render_notice,
    render_status,
)

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Install the stream handler once; Streamlit reruns this script on every click."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def init_session(state: MutableMapping) -> None:
    if "game" not in state:
        state["game"] = make_initial_history()
        state["notice"] = None


def handle_cell_click(state: MutableMapping, cell: int) -> None:
    game: GameHistory = state["game"]
    try:
        apply_move(game, cell)
    except IllegalMoveError as exc:
        logger.warning("Rejected click on cell %d (%s)", exc.cell, exc.reason)
        state["notice"] = REJECTED_MOVE_MESSAGE
    else:
        state["notice"] = None


def handle_jump(state: MutableMapping, step: int) -> None:
    jump_to(state["game"], step)
    state["notice"] = None


def handle_reset(state: MutableMapping) -> None:
    state["game"] = make_initial_history()
    state["notice"] = None
    logger.info("New game started")


def run_app() -> None:
    """Run the main Streamlit application."""
    configure_logging()
    st.set_page_config(page_title=PAGE_TITLE, layout="centered")
    st.title(PAGE_TITLE)

    # Initialize session state
    state = st.session_state
    init_session(state)
    game: GameHistory = state["game"]

    with st.expander("Rules", expanded=False):
        print_rules()

    # Shown once, then cleared
    notice = state["notice"]
    if notice is not None:
        render_notice(notice)
        state["notice"] = None

    # Layout: board + history
    board_col, info_col = st.columns([1, 1])

    with board_col:
        st.subheader("Board")
        render_board(game.current_snapshot(), lambda i: handle_cell_click(state, i))
        st.button("🔁 New game", key="reset", on_click=handle_reset, args=(state,))

    with info_col:
        render_status(game)
        render_move_list(game, lambda step: handle_jump(state, step))
        render_move_log(game)


if __name__ == "__main__":
    run_app()
