from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np

from .weights import weight_grid

Cell = Tuple[int, int]


def border_variables(rows: int, cols: int) -> Tuple[List[Cell], Dict[Cell, int]]:
    """Enumerate border cells row-major and index them 0..n_vars-1."""
    variables: List[Cell] = []
    index: Dict[Cell, int] = {}
    for r in range(rows):
        for c in range(cols):
            if r == 0 or r == rows - 1 or c == 0 or c == cols - 1:
                index[(r, c)] = len(variables)
                variables.append((r, c))
    return variables, index


def build_gf4_zero_system(
    rows: int,
    cols: int,
    variables: Sequence[Cell],
    row_residuals: Sequence[int],
    col_residuals: Sequence[int],
) -> Tuple[np.ndarray, np.ndarray]:
    """Return (A, b) over GF(2) whose solutions zero every row and column sum.

    Each GF(4) condition "residual + sum of weighted border cells = 0" splits
    into one GF(2) equation per bit of the 2-bit encoding. Equation order:
    row r bit 0, row r bit 1 for every row, then the same for every column.
    A has shape (2*rows + 2*cols, len(variables)).
    """
    n_vars = len(variables)
    W = weight_grid(rows, cols)
    A = np.zeros((2 * rows + 2 * cols, n_vars), dtype=np.uint8)
    b = np.zeros((2 * rows + 2 * cols,), dtype=np.uint8)

    for i, (r, c) in enumerate(variables):
        for bit in range(2):
            coef = (int(W[r, c]) >> bit) & 1
            A[2 * r + bit, i] = coef
            A[2 * rows + 2 * c + bit, i] = coef

    for r in range(rows):
        for bit in range(2):
            b[2 * r + bit] = (int(row_residuals[r]) >> bit) & 1
    for c in range(cols):
        for bit in range(2):
            b[2 * rows + 2 * c + bit] = (int(col_residuals[c]) >> bit) & 1

    return A, b
