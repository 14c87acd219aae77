from __future__ import annotations

from typing import Optional

import numpy as np

from .board import BoardState
from .border import fill_border_to_zero

MAX_SIDE = 20


class Game:
    """Game session: presses, undo history, scrambles and mode switches.

    A normal game is played on a rows x cols board. Analysis mode plays on
    the (rows+2) x (cols+2) board whose border is filled so that every
    GF(4) row and column sum is zero.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        analysis: bool = False,
        rng: Optional[np.random.Generator] = None,
    ):
        if not (1 <= rows <= MAX_SIDE and 1 <= cols <= MAX_SIDE):
            raise ValueError(f"Board sides must be in 1..{MAX_SIDE}")
        self.rng = rng or np.random.default_rng()
        self.single_toggle_mode = False
        self.show_analysis = False
        self.from_game = False
        self.history: list[np.ndarray] = []
        self.moves = 0
        if analysis:
            self.board = BoardState(rows + 2, cols + 2, analysis=True)
        else:
            self.board = BoardState(rows, cols)
        self.scramble()

    @property
    def analysis(self) -> bool:
        return self.board.analysis

    def _reset_history(self) -> None:
        self.history = []
        self.moves = 0

    def press(self, r: int, c: int) -> bool:
        """Apply a move at (r, c). A solved normal board ignores presses."""
        if self.board.is_solved() and not self.analysis:
            return False
        before = self.board.state.copy()
        if self.analysis and self.single_toggle_mode:
            self.board.single_toggle(r, c)
        else:
            self.board.toggle(r, c)
        self.history.append(before)
        self.moves += 1
        return True

    def undo(self) -> bool:
        if not self.history:
            return False
        self.board.state = self.history.pop()
        if self.moves > 0:
            self.moves -= 1
        return True

    def _random_presses(self, r_min: int, r_max: int, c_min: int, c_max: int):
        n_r = r_max - r_min + 1
        n_c = c_max - c_min + 1
        if n_r <= 0 or n_c <= 0:
            return
        for _ in range(n_r * n_c * 3):
            r = r_min + int(self.rng.integers(0, n_r))
            c = c_min + int(self.rng.integers(0, n_c))
            self.board.toggle(r, c)

    def scramble(self) -> None:
        """Generate a layout reachable by presses (interior presses in analysis)."""
        board = self.board
        board.clear()
        if self.analysis:
            r_min, r_max, c_min, c_max = board.inner_bounds()
        else:
            r_min, r_max, c_min, c_max = 0, board.rows - 1, 0, board.cols - 1
        self._random_presses(r_min, r_max, c_min, c_max)
        if board.is_solved():
            board.state[(r_min + r_max) // 2, (c_min + c_max) // 2] = True
        if self.analysis:
            fill_border_to_zero(board)
        self._reset_history()

    def scramble_arbitrary(self) -> bool:
        """Analysis only: random layout, border refilled to zero sums.

        Returns whether the border could be filled; if not, the random
        border is kept.
        """
        if not self.analysis:
            return False
        board = self.board
        board.state = self.rng.random((board.rows, board.cols)) < 0.5
        if board.is_solved():
            board.state[0, 0] = True
        filled = fill_border_to_zero(board)
        self._reset_history()
        return filled

    def clear(self) -> None:
        if not self.analysis:
            return
        self.board.clear()
        self._reset_history()

    def toggle_flip_mode(self) -> None:
        if self.analysis:
            self.single_toggle_mode = not self.single_toggle_mode

    def toggle_overlay(self) -> None:
        """Normal mode only: show or hide the GF(4) row/column sums."""
        if not self.analysis:
            self.show_analysis = not self.show_analysis

    def enter_analysis(self) -> bool:
        """Embed the current board in a border filled to zero sums."""
        if self.analysis:
            return False
        self.board = BoardState.embed(self.board)
        fill_border_to_zero(self.board)
        self.from_game = True
        self.single_toggle_mode = False
        self.show_analysis = False
        self._reset_history()
        return True

    def exit_analysis(self) -> bool:
        """Return to the game the analysis board was entered from."""
        if not (self.analysis and self.from_game):
            return False
        self.board = self.board.interior()
        self.from_game = False
        self.single_toggle_mode = False
        self.show_analysis = False
        self._reset_history()
        return True
