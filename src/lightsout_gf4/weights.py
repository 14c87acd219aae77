from __future__ import annotations

import numpy as np

from .board import BoardState
from .gf4 import GF4, gf4_pow


def weight(r: int, c: int) -> GF4:
    """Positional weight omega**((r + c) mod 3); independent of cell content."""
    return gf4_pow(r + c)


def weight_grid(rows: int, cols: int) -> np.ndarray:
    """Return the (rows, cols) uint8 array of positional weights."""
    rr, cc = np.indices((rows, cols))
    # omega**k for k = 0, 1, 2 encodes as 1, 2, 3
    return ((rr + cc) % 3 + 1).astype(np.uint8)


def _xor_sum(weights: np.ndarray) -> GF4:
    return GF4(int(np.bitwise_xor.reduce(weights, initial=np.uint8(0))))


def row_sum(board: BoardState, r: int) -> GF4:
    """GF(4) sum of the weights of the lit cells in row r."""
    w = ((r + np.arange(board.cols)) % 3 + 1).astype(np.uint8)
    return _xor_sum(w[board.state[r]])


def col_sum(board: BoardState, c: int) -> GF4:
    """GF(4) sum of the weights of the lit cells in column c."""
    w = ((np.arange(board.rows) + c) % 3 + 1).astype(np.uint8)
    return _xor_sum(w[board.state[:, c]])


def row_sums(board: BoardState) -> list[GF4]:
    return [row_sum(board, r) for r in range(board.rows)]


def col_sums(board: BoardState) -> list[GF4]:
    return [col_sum(board, c) for c in range(board.cols)]


def is_zero_sum(board: BoardState) -> bool:
    return all(s == GF4.ZERO for s in row_sums(board) + col_sums(board))
