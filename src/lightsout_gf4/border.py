from __future__ import annotations

from typing import Optional

import numpy as np

from .algebra import gf2_solve, gf2_solve_with_nullspace
from .board import BoardState
from .constraints import border_variables, build_gf4_zero_system
from .weights import col_sums, row_sums


def _has_border(board: BoardState) -> bool:
    return board.analysis and board.rows >= 3 and board.cols >= 3


def _border_system(board: BoardState, variables) -> tuple[np.ndarray, np.ndarray]:
    """Build the system for `board`, whose border must already be cleared."""
    return build_gf4_zero_system(
        board.rows,
        board.cols,
        variables,
        row_sums(board),
        col_sums(board),
    )


def fill_border_to_zero(
    board: BoardState, rng: Optional[np.random.Generator] = None
) -> bool:
    """Set the border so that every GF(4) row and column sum is zero.

    The interior is left as is. Free variables are switched off, unless `rng`
    is given, in which case a uniformly random valid border is written.

    Returns True if the border was written. Returns False without touching
    the board when it has no border, or when no valid border exists.
    """
    if not _has_border(board):
        return False

    variables, _ = border_variables(board.rows, board.cols)
    rr = np.array([r for r, _ in variables])
    cc = np.array([c for _, c in variables])

    snapshot = board.state[rr, cc].copy()
    board.state[rr, cc] = False

    A, b = _border_system(board, variables)
    if rng is None:
        x, ok = gf2_solve(A, b)
    else:
        x, basis, ok = gf2_solve_with_nullspace(A, b)
        if ok:
            for v in basis:
                if rng.random() < 0.5:
                    x ^= v

    if not ok or x is None:
        board.state[rr, cc] = snapshot
        return False

    board.state[rr, cc] = x.astype(bool)
    return True


def border_solution_space(board: BoardState) -> Optional[int]:
    """Return the number of free border variables, or None if unsatisfiable.

    There are 2**k valid borders for a result k. The board is not modified.
    """
    if not _has_border(board):
        return None

    variables, _ = border_variables(board.rows, board.cols)
    work = board.copy()
    for r, c in variables:
        work.state[r, c] = False

    _, basis, ok = gf2_solve_with_nullspace(*_border_system(work, variables))
    if not ok:
        return None
    return len(basis)
