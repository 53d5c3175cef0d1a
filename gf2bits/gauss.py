"""Gaussian elimination solver for linear systems over GF(2).

Matrices are sequences of rows, each row a sequence of bits. Vectors are
sequences of bits. Solutions are returned as lists of bools.
"""

from __future__ import annotations

import random as _random
from collections.abc import Sequence

__all__ = ["BitGauss"]

# Indexable solutions are capped at the largest power of two in a 64-bit word.
_MAX_SOLUTION_POWER = 63

_rng = _random.Random()


def _pack(bits: Sequence[bool]) -> int:
    """Pack a bit sequence into an int with element ``k`` at bit ``k``."""
    value = 0
    for k, bit in enumerate(bits):
        if bit:
            value |= 1 << k
    return value


class BitGauss:
    """Solver for ``A.x = b`` where ``A`` is a square bit matrix.

    On construction the augmented matrix ``A|b`` is brought to reduced row
    echelon form. The rank, the free variables and the consistency of the
    system follow from that form.
    """

    __slots__ = ("_n", "_rows", "_b_ref", "_rank", "_free", "_solution_count")

    def __init__(self, a: Sequence[Sequence[bool]], b: Sequence[bool]) -> None:
        n = len(a)
        for r, row in enumerate(a):
            if len(row) != n:
                raise ValueError(
                    f"the matrix must be square: it has {n} rows but row {r} has {len(row)} columns"
                )
        if len(b) != n:
            raise ValueError(
                f"the matrix has {n} rows but the vector has {len(b)} elements"
            )

        b_bit = 1 << n
        rows = [_pack(row) | (b_bit if b[i] else 0) for i, row in enumerate(a)]

        pivots: list[int] = []
        r = 0
        for j in range(n + 1):
            if r == n:
                break
            bit_j = 1 << j
            p = next((p for p in range(r, n) if rows[p] & bit_j), None)
            if p is None:
                continue
            rows[p], rows[r] = rows[r], rows[p]
            for i in range(n):
                if i != r and rows[i] & bit_j:
                    rows[i] ^= rows[r]
            pivots.append(j)
            r += 1

        pivot_set = {j for j in pivots if j < n}
        rank = len(pivot_set)
        free = [j for j in range(n) if j not in pivot_set]
        consistent = not any(rows[i] & b_bit for i in range(rank, n))

        self._n = n
        self._rows = [row & (b_bit - 1) for row in rows]
        self._b_ref = [bool(row & b_bit) for row in rows]
        self._rank = rank
        self._free = free
        self._solution_count = (
            1 << min(len(free), _MAX_SOLUTION_POWER) if consistent else 0
        )

    def __repr__(self) -> str:
        return (
            f"BitGauss(size={self._n}, rank={self._rank}, "
            f"free={len(self._free)}, consistent={self.is_consistent()})"
        )

    def rank(self) -> int:
        """Rank of the matrix ``A``."""
        return self._rank

    def free_count(self) -> int:
        """Number of free variables in the system."""
        return len(self._free)

    def is_underdetermined(self) -> bool:
        """True if the system has free variables."""
        return bool(self._free)

    def is_consistent(self) -> bool:
        """True if the system has at least one solution."""
        return self._solution_count > 0

    def solution_count(self) -> int:
        """Number of indexable solutions: 0, or ``2**f`` capped at ``2**63``."""
        return self._solution_count

    def x(self) -> list[bool] | None:
        """A solution with random values for any free variables; None if inconsistent."""
        if not self.is_consistent():
            return None
        result = [bool(_rng.getrandbits(1)) for _ in range(self._n)]
        self._back_substitute_into(result)
        return result

    def xi(self, i: int) -> list[bool] | None:
        """The solution with index ``i``; None if inconsistent or ``i`` is out of bounds.

        The free variables take the bits of ``i``, lowest bit first.
        """
        if not self.is_consistent():
            return None
        if i < 0 or i > self._solution_count:
            return None
        result = [False] * self._n
        for f in self._free:
            result[f] = bool(i & 1)
            i >>= 1
        self._back_substitute_into(result)
        return result

    def _back_substitute_into(self, x: list[bool]) -> None:
        for i in reversed(range(self._rank)):
            row = self._rows[i]
            j = (row & -row).bit_length() - 1
            value = self._b_ref[i]
            for k in range(j + 1, self._n):
                if (row >> k) & 1 and x[k]:
                    value = not value
            x[j] = value