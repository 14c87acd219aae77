"""
Tests for the GF(2) Gaussian-elimination solver.
"""
import numpy as np
import pytest

from lightsout_gf4.algebra import (
    gf2_rref_augmented,
    gf2_solve,
    gf2_solve_with_nullspace,
)


def test_solve_identity_matrix():
    A = np.eye(3, dtype=np.uint8)
    b = np.array([1, 0, 1])
    x, ok = gf2_solve(A, b)
    assert ok
    assert x.tolist() == [1, 0, 1]


def test_solve_simple_system():
    A = np.array([[1, 1], [0, 1]])
    b = np.array([1, 1])
    x, ok = gf2_solve(A, b)
    assert ok
    assert x.tolist() == [0, 1]  # x + y = 1, y = 1 => x = 0


def test_inconsistent_system():
    A = np.array([[1, 1, 0], [0, 1, 1], [1, 0, 1]])
    b = np.array([1, 0, 0])  # rows sum to 0 but rhs sums to 1
    x, ok = gf2_solve(A, b)
    assert not ok
    assert x is None


def test_zero_row_with_rhs_one_is_inconsistent():
    A = np.zeros((2, 3), dtype=np.uint8)
    b = np.array([0, 1])
    assert gf2_solve(A, b) == (None, False)


def test_free_variables_default_to_zero():
    """x0 + x2 = 1 leaves x1 and x2 free; both stay 0."""
    A = np.array([[1, 0, 1]])
    b = np.array([1])
    x, ok = gf2_solve(A, b)
    assert ok
    assert x.tolist() == [1, 0, 0]


def test_all_zero_columns_are_free():
    A = np.zeros((4, 5), dtype=np.uint8)
    b = np.zeros(4, dtype=np.uint8)
    x, ok = gf2_solve(A, b)
    assert ok
    assert x.tolist() == [0] * 5


def test_rref_records_pivots_in_order():
    A = np.array([[0, 1, 1], [0, 1, 0], [0, 0, 1]])
    b = np.array([0, 1, 1])
    R, pivcols = gf2_rref_augmented(A, b)
    assert pivcols == [1, 2]
    # pivot columns cleared everywhere except their own row
    assert R[:, 1].tolist() == [1, 0, 0]
    assert R[:, 2].tolist() == [0, 1, 0]


@pytest.mark.parametrize("m,n", [(8, 8), (20, 12), (12, 20), (100, 90)])
def test_random_consistent_systems(m, n):
    rng = np.random.default_rng(m * 1000 + n)
    A = (rng.random((m, n)) < 0.3).astype(np.uint8)
    x_true = rng.integers(0, 2, n).astype(np.uint8)
    b = (A.astype(int) @ x_true) % 2
    x, ok = gf2_solve(A, b)
    assert ok
    assert np.array_equal((A.astype(int) @ x) % 2, b)


def test_nullspace_basis_spans_solutions():
    rng = np.random.default_rng(3)
    A = (rng.random((10, 16)) < 0.4).astype(np.uint8)
    b = (A.astype(int) @ rng.integers(0, 2, 16)) % 2
    x0, basis, ok = gf2_solve_with_nullspace(A, b)
    assert ok
    assert np.array_equal((A.astype(int) @ x0) % 2, b)
    _, pivcols = gf2_rref_augmented(A, b)
    assert len(basis) == 16 - len(pivcols)
    for v in basis:
        assert v.any()
        assert not ((A.astype(int) @ v) % 2).any()


def test_nullspace_particular_matches_solve():
    A = np.array([[1, 1, 0, 1], [0, 1, 1, 0]])
    b = np.array([1, 1])
    x, _ = gf2_solve(A, b)
    x0, basis, ok = gf2_solve_with_nullspace(A, b)
    assert ok
    assert np.array_equal(x, x0)
    assert len(basis) == 2


def test_nullspace_inconsistent():
    A = np.array([[1, 0], [1, 0]])
    b = np.array([0, 1])
    assert gf2_solve_with_nullspace(A, b) == (None, [], False)
