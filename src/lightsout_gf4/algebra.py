from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np


def _parity(bits: np.ndarray) -> int:
    return int(bits.sum() % 2)


def gf2_rref_augmented(
    A: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, list[int]]:
    """Return RREF of augmented matrix [A|b] over GF(2) and list of pivot columns.

    Row i of the result holds the pivot recorded at pivcols[i].
    """
    A = (A % 2).astype(np.uint8)
    b = (b % 2).astype(np.uint8).reshape(-1, 1)
    m, n = A.shape
    M = np.concatenate([A, b], axis=1)

    row = 0
    pivcols: list[int] = []
    for col in range(n):
        if row == m:
            break
        pivot = None
        for r in range(row, m):
            if M[r, col]:
                pivot = r
                break
        if pivot is None:
            continue
        if pivot != row:
            M[[row, pivot]] = M[[pivot, row]]
        # clear this column above and below the pivot
        for r in range(m):
            if r != row and M[r, col]:
                M[r, :] ^= M[row, :]
        pivcols.append(col)
        row += 1
    return M, pivcols


def _inconsistent(R_A: np.ndarray, R_b: np.ndarray) -> bool:
    # 0...0 | 1 rows
    return bool(np.any(~R_A.any(axis=1) & (R_b == 1)))


def _back_substitute(
    R_A: np.ndarray, R_b: np.ndarray, pivcols: list[int], x: np.ndarray
) -> np.ndarray:
    """Assign pivot variables from last pivot to first; other entries of x stay."""
    for ri in range(len(pivcols) - 1, -1, -1):
        pc = pivcols[ri]
        row = R_A[ri].copy()
        row[pc] = 0
        x[pc] = R_b[ri] ^ _parity(row & x)
    return x


def gf2_solve(A: np.ndarray, b: np.ndarray) -> Tuple[Optional[np.ndarray], bool]:
    """Solve A x = b over GF(2) with every free variable set to 0.

    Returns:
        x: solution (length n, uint8) or None if inconsistent
        solvable: bool
    """
    n = A.shape[1]
    R, pivcols = gf2_rref_augmented(A, b)
    R_A = R[:, :n]
    R_b = R[:, n]

    if _inconsistent(R_A, R_b):
        return None, False

    x = _back_substitute(R_A, R_b, pivcols, np.zeros((n,), dtype=np.uint8))
    return x, True


def gf2_solve_with_nullspace(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], List[np.ndarray], bool]:
    """Solve A x = b over GF(2), and return a nullspace basis of A.

    Returns:
        x0: one particular solution (free vars = 0) or None if inconsistent
        basis: list of nullspace basis vectors v (length n, uint8) with A v = 0
        solvable: bool
    """
    n = A.shape[1]
    R, pivcols = gf2_rref_augmented(A, b)
    R_A = R[:, :n]
    R_b = R[:, n]

    if _inconsistent(R_A, R_b):
        return None, [], False

    x0 = _back_substitute(R_A, R_b, pivcols, np.zeros((n,), dtype=np.uint8))

    # For each free column f: x_f=1, other frees 0, homogeneous rhs
    pivset = set(pivcols)
    zero_rhs = np.zeros_like(R_b)
    basis: list[np.ndarray] = []
    for f in range(n):
        if f in pivset:
            continue
        v = np.zeros((n,), dtype=np.uint8)
        v[f] = 1
        basis.append(_back_substitute(R_A, zero_rhs, pivcols, v))

    return x0, basis, True
