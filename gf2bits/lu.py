"""LU decomposition of square matrices over GF(2).

Matrices are sequences of rows, each row a sequence of bits. Vectors are
sequences of bits. Results are returned as lists of bools, or lists of
such lists for matrices.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence

__all__ = ["BitLU"]

Matrix = list[list[bool]]


def _pack(bits: Sequence[bool]) -> int:
    """Pack a bit sequence into an int with element ``k`` at bit ``k``."""
    value = 0
    for k, bit in enumerate(bits):
        if bit:
            value |= 1 << k
    return value


def _unpack(value: int, n: int) -> list[bool]:
    return [bool((value >> k) & 1) for k in range(n)]


class BitLU:
    """The decomposition ``P.A = L.U`` of a square bit matrix ``A``.

    ``L`` is unit lower triangular, ``U`` is upper triangular and ``P`` is a
    permutation held as LAPACK-style row swap instructions. The decomposition
    exists even for singular matrices; the solvers then return None.
    """

    __slots__ = ("_n", "_lu", "_swaps", "_rank")

    def __init__(self, a: Sequence[Sequence[bool]]) -> None:
        n = len(a)
        for r, row in enumerate(a):
            if len(row) != n:
                raise ValueError(
                    f"bit matrix must be square: it has {n} rows but row {r} has {len(row)} columns"
                )
        lu = [_pack(row) for row in a]
        swaps = list(range(n))
        rank = n

        for j in range(n):
            bit_j = 1 << j
            pivot = next((p for p in range(j, n) if lu[p] & bit_j), None)
            if pivot is None:
                rank -= 1
                continue
            if pivot != j:
                lu[pivot], lu[j] = lu[j], lu[pivot]
                swaps[j] = pivot
            # Eliminate below the pivot, leaving column j as the multipliers of L.
            above = lu[j] & ~((bit_j << 1) - 1)
            for i in range(j + 1, n):
                if lu[i] & bit_j:
                    lu[i] ^= above

        self._n = n
        self._lu = lu
        self._swaps = swaps
        self._rank = rank

    def __repr__(self) -> str:
        return f"BitLU(size={self._n}, rank={self._rank})"

    def rank(self) -> int:
        """Rank of the matrix."""
        return self._rank

    def is_singular(self) -> bool:
        """True if the matrix is rank deficient."""
        return self._rank < self._n

    def determinant(self) -> bool:
        """The determinant as a bool: True for 1, False for 0."""
        return not self.is_singular()

    def lower(self) -> Matrix:
        """A copy of the unit lower triangular factor ``L``."""
        return [
            _unpack((row & ((1 << i) - 1)) | (1 << i), self._n)
            for i, row in enumerate(self._lu)
        ]

    def upper(self) -> Matrix:
        """A copy of the upper triangular factor ``U``."""
        return [_unpack(row & ~((1 << i) - 1), self._n) for i, row in enumerate(self._lu)]

    def permutation_matrix(self) -> Matrix:
        """A copy of the permutation matrix ``P``."""
        p = [[i == k for k in range(self._n)] for i in range(self._n)]
        self.permute_matrix(p)
        return p

    def swaps(self) -> list[int]:
        """The row swap instructions: row ``i`` is swapped with row ``swaps[i]``, in order."""
        return list(self._swaps)

    def permutation_vector(self) -> list[int]:
        """Row indices ordered by their swap instruction."""
        return sorted(range(self._n), key=lambda i: self._swaps[i])

    def permute_matrix(self, b: MutableSequence) -> None:
        """Apply the row swaps to the rows of ``b`` in place."""
        if len(b) != self._n:
            raise ValueError(
                f"bit matrix has {len(b)} rows but there are {self._n} row swap instructions"
            )
        for i, s in enumerate(self._swaps):
            b[i], b[s] = b[s], b[i]

    def permute_vector(self, b: MutableSequence) -> None:
        """Apply the row swaps to the elements of ``b`` in place."""
        if len(b) != self._n:
            raise ValueError(
                f"bit vector has {len(b)} elements but there are {self._n} row swap instructions"
            )
        for i, s in enumerate(self._swaps):
            b[i], b[s] = b[s], b[i]

    def _substitute_rows(self, rows: list[int]) -> list[int]:
        """Forward then backward substitution applied to a list of row values."""
        n = self._n
        for i in range(n):
            multipliers = self._lu[i] & ((1 << i) - 1)
            for j in range(i):
                if (multipliers >> j) & 1:
                    rows[i] ^= rows[j]
        for i in reversed(range(n)):
            coeffs = self._lu[i] >> (i + 1)
            for j in range(i + 1, n):
                if (coeffs >> (j - i - 1)) & 1:
                    rows[i] ^= rows[j]
        return rows

    def solve(self, b: Sequence[bool]) -> list[bool] | None:
        """Solve ``A.x = b``; None if ``A`` is singular."""
        if len(b) != self._n:
            raise ValueError(
                f"bit vector has {len(b)} elements but the matrix has {self._n} rows"
            )
        if self.is_singular():
            return None
        x = [int(bool(bit)) for bit in b]
        self.permute_vector(x)
        return [bool(v) for v in self._substitute_rows(x)]

    def solve_matrix(self, b: Sequence[Sequence[bool]]) -> Matrix | None:
        """Solve ``A.X = B`` column by column; None if ``A`` is singular."""
        if len(b) != self._n:
            raise ValueError(
                f"right-hand side has {len(b)} rows but the matrix has {self._n} rows"
            )
        cols = len(b[0]) if b else 0
        for r, row in enumerate(b):
            if len(row) != cols:
                raise ValueError(f"row {r} has {len(row)} columns, expected {cols}")
        if self.is_singular():
            return None
        x = [_pack(row) for row in b]
        self.permute_matrix(x)
        return [_unpack(v, cols) for v in self._substitute_rows(x)]

    def inverse(self) -> Matrix | None:
        """The inverse of ``A``; None if ``A`` is singular."""
        if self.is_singular():
            return None
        identity = [[i == k for k in range(self._n)] for i in range(self._n)]
        return self.solve_matrix(identity)