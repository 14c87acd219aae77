from __future__ import annotations

from ..board import BoardState
from ..gf4 import GF4
from ..weights import col_sums, row_sums


def border_on(board: BoardState) -> int:
    # lit cells on the outer ring
    mask = board.state.copy()
    mask[1:-1, 1:-1] = False
    return int(mask.sum())


def residual_nonzero(board: BoardState) -> int:
    """Number of rows and columns whose GF(4) sum is not zero."""
    sums = row_sums(board) + col_sums(board)
    return sum(1 for s in sums if s != GF4.ZERO)


def zero_sum_ok(board: BoardState) -> int:
    return int(residual_nonzero(board) == 0)
