from __future__ import annotations

import numpy as np


class BoardState:
    """Rectangular Lights Out grid.

    In analysis mode the outermost ring (row 0, last row, column 0, last
    column) is the border; everything else is interior. The partition is
    derived from coordinates only.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        state: np.ndarray | None = None,
        analysis: bool = False,
    ):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board needs rows, cols >= 1, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.analysis = analysis
        if state is None:
            self.state = np.zeros((rows, cols), dtype=bool)
        else:
            if state.shape != (rows, cols):
                raise ValueError(
                    f"State shape {state.shape} does not match {rows}x{cols}"
                )
            self.state = state.astype(bool, copy=True)

    def copy(self) -> "BoardState":
        return BoardState(self.rows, self.cols, self.state, self.analysis)

    def to_flat(self) -> np.ndarray:
        return self.state.reshape(-1)

    @staticmethod
    def from_flat(
        rows: int, cols: int, flat: np.ndarray, analysis: bool = False
    ) -> "BoardState":
        return BoardState(rows, cols, flat.reshape(rows, cols), analysis)

    @staticmethod
    def embed(inner: "BoardState") -> "BoardState":
        """Wrap `inner` in a one-cell border, giving an analysis board.

        The border starts switched off.
        """
        board = BoardState(inner.rows + 2, inner.cols + 2, analysis=True)
        board.state[1:-1, 1:-1] = inner.state
        return board

    def interior(self) -> "BoardState":
        """Strip the border, giving the (rows-2)x(cols-2) normal board."""
        if self.rows < 3 or self.cols < 3:
            raise ValueError("Board too small to have an interior")
        return BoardState(self.rows - 2, self.cols - 2, self.state[1:-1, 1:-1])

    def is_border_cell(self, r: int, c: int) -> bool:
        if not self.analysis:
            return False
        return r == 0 or r == self.rows - 1 or c == 0 or c == self.cols - 1

    def inner_bounds(self) -> tuple[int, int, int, int]:
        # (r_min, r_max, c_min, c_max), inclusive
        return 1, self.rows - 2, 1, self.cols - 2

    def _check(self, r: int, c: int) -> None:
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"Cell ({r}, {c}) outside {self.rows}x{self.cols}")

    def toggle(self, r: int, c: int) -> None:
        """Flip the cell and its 8 neighbours (clipped at the edges)."""
        self._check(r, c)
        r0, r1 = max(r - 1, 0), min(r + 2, self.rows)
        c0, c1 = max(c - 1, 0), min(c + 2, self.cols)
        self.state[r0:r1, c0:c1] ^= True

    def single_toggle(self, r: int, c: int) -> None:
        self._check(r, c)
        self.state[r, c] ^= True

    def clear(self) -> None:
        self.state[:] = False

    def count_on(self) -> int:
        return int(self.state.sum())

    def is_solved(self) -> bool:
        return not self.state.any()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            self.analysis == other.analysis
            and self.state.shape == other.state.shape
            and bool(np.array_equal(self.state, other.state))
        )

    def __repr__(self):
        mode = ", analysis" if self.analysis else ""
        return f"BoardState({self.rows}x{self.cols}{mode}, on={self.count_on()})"

    def __str__(self) -> str:
        return "\n".join(
            "".join("1" if cell else "0" for cell in row) for row in self.state
        )
