from __future__ import annotations

import itertools

import pytest

from config import WINNING_LINES
from game_logic import (
    IllegalMoveError,
    apply_move,
    apply_move_core,
    calculate_winner,
    current_winner,
    is_board_full,
    is_draw,
    jump_to,
    make_initial_history,
)
from models import EMPTY_SNAPSHOT


def _board(cells: str):
    return tuple(None if c == "." else c for c in cells)


def _play(cells: list[int]):
    game = make_initial_history()
    for cell in cells:
        apply_move(game, cell)
    return game


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("mark", ["X", "O"])
def test_every_line_wins(line, mark):
    squares = [None] * 9
    for i in line:
        squares[i] = mark
    assert calculate_winner(tuple(squares)) == mark


def test_no_winner_without_three_in_a_row():
    assert calculate_winner(EMPTY_SNAPSHOT) is None
    assert calculate_winner(_board("XX.OO....")) is None
    # full board, no line
    assert calculate_winner(_board("XOXXOOOXX")) is None


def test_mixed_line_is_not_a_win():
    assert calculate_winner(_board("XXO......")) is None


def test_every_board_matches_line_search():
    for cells in itertools.product((None, "X", "O"), repeat=9):
        owners = [
            cells[a]
            for a, b, c in WINNING_LINES
            if cells[a] is not None and cells[a] == cells[b] == cells[c]
        ]
        assert calculate_winner(cells) == (owners[0] if owners else None)


def test_first_line_in_order_is_reported_on_malformed_board():
    assert calculate_winner(_board("XXXOOO...")) == "X"


def test_initial_history():
    game = make_initial_history()
    assert game.history == [EMPTY_SNAPSHOT]
    assert game.step_number == 0
    assert game.is_x_next()


def test_n_moves_grow_history():
    game = _play([0, 4, 8, 2])
    assert len(game.history) == 5
    assert game.step_number == 4
    assert game.current_snapshot() == _board("X.O.O...X")


def test_turn_parity_alternates():
    game = make_initial_history()
    for step, cell in enumerate([4, 0, 1, 7, 2, 6]):
        assert game.is_x_next() == (step % 2 == 0)
        apply_move(game, cell)
    assert game.next_mark() == "X"


def test_adjacent_snapshots_differ_in_one_cell():
    game = _play([4, 0, 8, 2, 6])
    for before, after in zip(game.history, game.history[1:]):
        assert sum(a != b for a, b in zip(before, after)) == 1


def test_occupied_cell_is_rejected_without_change():
    game = _play([0])
    before = game.clone()
    with pytest.raises(IllegalMoveError) as err:
        apply_move(game, 0)
    assert err.value.reason == "occupied"
    assert err.value.cell == 0
    assert game == before
    # same answer again
    with pytest.raises(IllegalMoveError):
        apply_move(game, 0)
    assert game == before


def test_top_row_win_then_move_rejected():
    game = _play([0, 4, 1, 3, 2])
    assert current_winner(game) == "X"
    assert game.current_snapshot()[:3] == ("X", "X", "X")
    before = game.clone()
    with pytest.raises(IllegalMoveError) as err:
        apply_move(game, 8)
    assert err.value.reason == "game_over"
    assert game == before


def test_jump_keeps_history():
    game = _play([0, 4, 8])
    jump_to(game, 0)
    assert game.step_number == 0
    assert len(game.history) == 4
    assert game.current_snapshot() == EMPTY_SNAPSHOT


def test_move_after_jump_discards_future():
    game = _play([0, 4, 8])
    jump_to(game, 0)
    info = apply_move_core(game, 5)
    assert info == {"cell": 5, "mark": "X", "step": 1, "discarded": 3}
    assert len(game.history) == 2
    assert game.step_number == 1
    assert game.current_snapshot() == _board(".....X...")


def test_move_from_middle_truncates_to_cursor():
    game = _play([0, 4, 8, 2])
    jump_to(game, 2)
    apply_move(game, 6)
    assert len(game.history) == 4
    assert game.history[3] == _board("X...O.X..")
    assert game.history[3][2] is None


def test_jump_away_from_decided_board_allows_new_branch():
    game = _play([0, 4, 1, 3, 2])
    jump_to(game, 4)
    assert current_winner(game) is None
    apply_move(game, 8)
    apply_move(game, 5)
    assert current_winner(game) == "O"
    assert len(game.history) == 7
    assert game.history[-1][2] is None


def test_draw_and_tenth_move_rejected():
    # X O X / X O O / O X X
    game = _play([0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert current_winner(game) is None
    assert is_board_full(game.current_snapshot())
    assert is_draw(game)
    for cell in range(9):
        with pytest.raises(IllegalMoveError):
            apply_move(game, cell)
    assert len(game.history) == 10


@pytest.mark.parametrize("cell", [-1, 9, "3", 1.0, True])
def test_bad_cell_index_is_a_programmer_error(cell):
    game = make_initial_history()
    with pytest.raises(ValueError) as err:
        apply_move(game, cell)
    assert not isinstance(err.value, IllegalMoveError)
    assert game.history == [EMPTY_SNAPSHOT]


@pytest.mark.parametrize("step", [-1, 3, "1"])
def test_out_of_range_jump_raises(step):
    game = _play([0, 1])
    with pytest.raises(ValueError):
        jump_to(game, step)
    assert game.step_number == 2
