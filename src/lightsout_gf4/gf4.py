from __future__ import annotations

from enum import IntEnum

import numpy as np


class GF4(IntEnum):
    """Elements of GF(4) = GF(2)[x]/(x^2+x+1), encoded as 2-bit integers.

    OMEGA is the class of x, so OMEGA**3 == ONE and OMEGA2 == OMEGA + ONE.
    """

    ZERO = 0
    ONE = 1
    OMEGA = 2
    OMEGA2 = 3


MUL_TABLE = np.array(
    [
        [0, 0, 0, 0],
        [0, 1, 2, 3],
        [0, 2, 3, 1],
        [0, 3, 1, 2],
    ],
    dtype=np.uint8,
)

_POWERS = (GF4.ONE, GF4.OMEGA, GF4.OMEGA2)
_SYMBOLS = {GF4.ZERO: "0", GF4.ONE: "1", GF4.OMEGA: "ω", GF4.OMEGA2: "ω²"}


def gf4_add(a: int, b: int) -> GF4:
    return GF4(int(a) ^ int(b))


def gf4_mul(a: int, b: int) -> GF4:
    return GF4(int(MUL_TABLE[int(a), int(b)]))


def gf4_pow(n: int) -> GF4:
    """Return omega**n. Python's modulo keeps the exponent in {0, 1, 2}."""
    return _POWERS[n % 3]


def gf4_inv(a: int) -> GF4:
    if int(a) == 0:
        raise ZeroDivisionError("GF(4): zero has no inverse")
    (b,) = np.flatnonzero(MUL_TABLE[int(a)] == 1)
    return GF4(int(b))


def gf4_symbol(a: int) -> str:
    return _SYMBOLS[GF4(int(a))]
