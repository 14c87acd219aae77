"""
Tests for filling the analysis-mode border so every row and column sums to zero.
"""
import numpy as np
import pytest

import lightsout_gf4.border as border_mod
from lightsout_gf4.board import BoardState
from lightsout_gf4.border import border_solution_space, fill_border_to_zero
from lightsout_gf4.gf4 import GF4
from lightsout_gf4.weights import col_sum, col_sums, is_zero_sum, row_sum, row_sums


def _interior_pressed_board(rows, cols, seed):
    """Analysis board reached from all-off by random interior 3x3 presses."""
    rng = np.random.default_rng(seed)
    board = BoardState(rows, cols, analysis=True)
    for _ in range(rows * cols):
        board.toggle(int(rng.integers(1, rows - 1)), int(rng.integers(1, cols - 1)))
    return board


def test_empty_3x3_gives_empty_border():
    board = BoardState(3, 3, analysis=True)
    assert fill_border_to_zero(board)
    assert board.is_solved()
    assert is_zero_sum(board)


def test_single_interior_cell_5x5():
    """(2, 2) has weight omega; the unique valid border lights the even cells."""
    board = BoardState(5, 5, analysis=True)
    board.state[2, 2] = True
    assert fill_border_to_zero(board)
    for r in range(5):
        assert row_sum(board, r) == GF4.ZERO
    for c in range(5):
        assert col_sum(board, c) == GF4.ZERO
    lit = {(int(r), int(c)) for r, c in zip(*np.nonzero(board.state))}
    assert lit == {
        (0, 0), (0, 2), (0, 4),
        (2, 0), (2, 2), (2, 4),
        (4, 0), (4, 2), (4, 4),
    }


def test_interior_is_never_modified():
    board = _interior_pressed_board(8, 9, seed=1)
    board.state[0, :] = True
    inner = board.state[1:-1, 1:-1].copy()
    fill_border_to_zero(board)
    assert np.array_equal(board.state[1:-1, 1:-1], inner)


@pytest.mark.parametrize(
    "rows,cols", [(3, 3), (3, 8), (4, 4), (5, 7), (9, 6), (12, 12), (22, 22)]
)
def test_zero_sum_after_fill(rows, cols):
    board = _interior_pressed_board(rows, cols, seed=rows * 31 + cols)
    # scribble on the border so the fill has something to undo
    board.state[0, :] = ~board.state[0, :]
    assert fill_border_to_zero(board)
    assert row_sums(board) == [GF4.ZERO] * rows
    assert col_sums(board) == [GF4.ZERO] * cols


def test_arbitrary_interior_fills_or_reverts():
    rng = np.random.default_rng(11)
    for _ in range(50):
        board = BoardState(7, 6, rng.random((7, 6)) < 0.5, analysis=True)
        before = board.copy()
        if fill_border_to_zero(board):
            assert is_zero_sum(board)
        else:
            assert board == before


def test_fill_is_idempotent():
    board = _interior_pressed_board(7, 10, seed=5)
    fill_border_to_zero(board)
    first = board.state.copy()
    assert fill_border_to_zero(board)
    assert np.array_equal(board.state, first)


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 5), (5, 2), (2, 2)])
def test_small_board_is_noop(rows, cols):
    rng = np.random.default_rng(rows + cols)
    board = BoardState(rows, cols, rng.random((rows, cols)) < 0.5, analysis=True)
    before = board.copy()
    assert not fill_border_to_zero(board)
    assert board == before


def test_normal_mode_board_is_noop():
    board = BoardState(5, 5)
    board.state[2, 2] = True
    before = board.copy()
    assert not fill_border_to_zero(board)
    assert board == before


def test_revert_on_unsatisfiable_system(monkeypatch):
    monkeypatch.setattr(border_mod, "gf2_solve", lambda A, b: (None, False))
    board = BoardState(5, 6, analysis=True)
    board.state[0, 1] = True
    board.state[4, 5] = True
    board.state[2, 3] = True
    before = board.copy()
    assert not fill_border_to_zero(board)
    assert board == before


def test_revert_on_contradictory_residuals(monkeypatch):
    """A residual on one row only breaks the row/column total parity."""
    board = _interior_pressed_board(6, 6, seed=2)
    board.state[0, 0] = ~board.state[0, 0]
    before = board.copy()
    monkeypatch.setattr(
        border_mod, "row_sums", lambda b: [GF4.ONE] + [GF4.ZERO] * (b.rows - 1)
    )
    monkeypatch.setattr(border_mod, "col_sums", lambda b: [GF4.ZERO] * b.cols)
    assert not fill_border_to_zero(board)
    assert board == before


def test_random_free_variables_still_zero_sum():
    rng = np.random.default_rng(0)
    for seed in range(10):
        board = _interior_pressed_board(6, 9, seed=seed)
        assert fill_border_to_zero(board, rng)
        assert is_zero_sum(board)


def test_solution_space():
    board = _interior_pressed_board(5, 5, seed=4)
    assert border_solution_space(board) == 0
    before = board.copy()
    k = border_solution_space(BoardState(6, 8, analysis=True))
    assert k is not None and k >= 0
    assert board == before
    assert border_solution_space(BoardState(2, 8, analysis=True)) is None
