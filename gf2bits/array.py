"""A fixed-length vector over GF(2) packed into unsigned words."""

from __future__ import annotations

import random as _random
import time
from collections.abc import Callable, Iterator

from gf2bits.iterators import bits

__all__ = ["BitArray"]

_WORD_SIZES = (8, 16, 32, 64, 128)
_DEFAULT_WORD_BITS = 64
_shared_rng = _random.Random()


def _check_word_bits(word_bits: int) -> int:
    if word_bits not in _WORD_SIZES:
        raise ValueError(f"word_bits must be one of {_WORD_SIZES}, not {word_bits}")
    return word_bits


def _rng_for_seed(seed: int) -> _random.Random:
    """A private generator; a seed of 0 means seed from the current time."""
    if seed == 0:
        return _random.Random(time.time_ns())
    return _random.Random(seed)


class BitArray:
    """A vector of ``n`` bits whose length is fixed at construction.

    Bits are stored in words of ``word_bits`` bits, bit ``i`` living in bit
    ``i % word_bits`` of word ``i // word_bits``. Unused high bits of the last
    word are always zero.
    """

    __slots__ = ("_n", "_word_bits", "_store")

    def __init__(self, n: int, word_bits: int = _DEFAULT_WORD_BITS) -> None:
        if n < 0:
            raise ValueError(f"length must be non-negative, not {n}")
        self._n = n
        self._word_bits = _check_word_bits(word_bits)
        self._store = [0] * (-(-n // word_bits))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @property
    def _word_max(self) -> int:
        return (1 << self._word_bits) - 1

    def _clean(self) -> BitArray:
        shift = self._n % self._word_bits
        if shift and self._store:
            self._store[-1] &= (1 << shift) - 1
        return self

    def _fill_words(self, word: int) -> BitArray:
        word &= self._word_max
        self._store = [word] * len(self._store)
        return self._clean()

    def _fill_random(self, rng: _random.Random) -> BitArray:
        self._store = [rng.getrandbits(self._word_bits) for _ in self._store]
        return self._clean()

    def _fill_random_biased(self, p: float, rng: _random.Random) -> BitArray:
        if p <= 0.0:
            return self._fill_words(0)
        if p >= 1.0:
            return self._fill_words(self._word_max)
        if p == 0.5:
            return self._fill_random(rng)
        for i in range(self._n):
            self[i] = rng.random() < p
        return self

    def _index(self, i: int) -> int:
        if not isinstance(i, int):
            raise TypeError(f"bit indices must be integers, not {type(i).__name__}")
        j = i + self._n if i < 0 else i
        if not 0 <= j < self._n:
            raise IndexError(f"index {i} out of range for a bit array of length {self._n}")
        return j

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_word(cls, n: int, word: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """Bits copied repeatedly from ``word``; the last copy is truncated."""
        return cls(n, word_bits)._fill_words(word)

    @classmethod
    def zeros(cls, n: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """All bits zero."""
        return cls(n, word_bits)

    @classmethod
    def ones(cls, n: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """All bits one."""
        result = cls(n, word_bits)
        return result._fill_words(result._word_max)

    @classmethod
    def constant(cls, n: int, val: bool, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """All bits equal to ``val``."""
        return cls.ones(n, word_bits) if val else cls.zeros(n, word_bits)

    @classmethod
    def unit(cls, n: int, i: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """Only bit ``i`` set."""
        if not 0 <= i < n:
            raise IndexError(f"index {i} must be less than the length of the bit array {n}")
        result = cls(n, word_bits)
        result[i] = True
        return result

    @classmethod
    def alternating(cls, n: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """Bits alternating 1, 0, 1, 0, ... starting with 1."""
        pattern = int("01" * (word_bits // 2), 2)
        return cls(n, word_bits)._fill_words(pattern)

    @classmethod
    def from_fn(
        cls, n: int, f: Callable[[int], bool], word_bits: int = _DEFAULT_WORD_BITS
    ) -> BitArray:
        """Bit ``i`` set to ``f(i)``."""
        result = cls(n, word_bits)
        for i in range(n):
            result[i] = f(i)
        return result

    @classmethod
    def random(cls, n: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """Each bit set with probability one half."""
        return cls(n, word_bits)._fill_random(_shared_rng)

    @classmethod
    def random_seeded(cls, n: int, seed: int, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """Like ``random`` but reproducible; a seed of 0 seeds from the clock."""
        return cls(n, word_bits)._fill_random(_rng_for_seed(seed))

    @classmethod
    def random_biased(cls, n: int, p: float, word_bits: int = _DEFAULT_WORD_BITS) -> BitArray:
        """Each bit set with probability ``p``, clamped to [0, 1]."""
        return cls(n, word_bits)._fill_random_biased(p, _shared_rng)

    @classmethod
    def random_biased_seeded(
        cls, n: int, p: float, seed: int, word_bits: int = _DEFAULT_WORD_BITS
    ) -> BitArray:
        """Like ``random_biased`` but reproducible; a seed of 0 seeds from the clock."""
        return cls(n, word_bits)._fill_random_biased(p, _rng_for_seed(seed))

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._n

    def __getitem__(self, i: int) -> bool:
        j = self._index(i)
        return bool((self._store[j // self._word_bits] >> (j % self._word_bits)) & 1)

    def __setitem__(self, i: int, value: bool) -> None:
        j = self._index(i)
        w, b = divmod(j, self._word_bits)
        if value:
            self._store[w] |= 1 << b
        else:
            self._store[w] &= ~(1 << b)

    def __iter__(self) -> Iterator[bool]:
        return bits(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return (
            self._n == other._n
            and self._word_bits == other._word_bits
            and self._store == other._store
        )

    def __hash__(self) -> int:
        return hash((self._n, self._word_bits, tuple(self._store)))

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self)

    def __repr__(self) -> str:
        return f"BitArray({str(self)!r}, word_bits={self._word_bits})"

    # ------------------------------------------------------------------
    # Word access
    # ------------------------------------------------------------------

    @property
    def word_bits(self) -> int:
        """Number of bits in each storage word."""
        return self._word_bits

    def words(self) -> int:
        """Least number of words needed to hold the bits."""
        return len(self._store)

    def word(self, i: int) -> int:
        """The storage word at index ``i``."""
        if not 0 <= i < len(self._store):
            raise IndexError(f"word index {i} should be less than {len(self._store)}")
        return self._store[i]

    def set_word(self, i: int, word: int) -> None:
        """Set storage word ``i``; bits past the end of the array are ignored."""
        if not 0 <= i < len(self._store):
            raise IndexError(f"word index {i} should be less than {len(self._store)}")
        word &= self._word_max
        if i < len(self._store) - 1:
            self._store[i] = word
        else:
            used = (self._n - 1) % self._word_bits + 1
            mask = (1 << used) - 1
            self._store[i] = (self._store[i] & ~mask) | (word & mask)

    def count_ones(self) -> int:
        """Number of set bits."""
        return sum(w.bit_count() for w in self._store)