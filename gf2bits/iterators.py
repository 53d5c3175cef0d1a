"""Iteration helpers over any bit store.

A bit store is any object with ``len()`` and integer indexing that yields
truthy or falsy values for each bit, for example a list of bools.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = ["bits", "reversed_bits", "set_bits", "unset_bits", "words"]


def bits(store: Sequence[bool]) -> Iterator[bool]:
    """Yield every bit of ``store`` as a bool, from first to last."""
    for i in range(len(store)):
        yield bool(store[i])


def reversed_bits(store: Sequence[bool]) -> Iterator[bool]:
    """Yield every bit of ``store`` as a bool, from last to first."""
    for i in reversed(range(len(store))):
        yield bool(store[i])


def set_bits(store: Sequence[bool]) -> Iterator[int]:
    """Yield the indices of the set bits of ``store`` in increasing order."""
    return (i for i, bit in enumerate(bits(store)) if bit)


def unset_bits(store: Sequence[bool]) -> Iterator[int]:
    """Yield the indices of the unset bits of ``store`` in increasing order."""
    return (i for i, bit in enumerate(bits(store)) if not bit)


def words(store: Sequence[bool], word_bits: int) -> Iterator[int]:
    """Yield the bits of ``store`` packed into unsigned words of ``word_bits`` bits.

    Bit ``i`` of the store lands in bit ``i % word_bits`` of word ``i // word_bits``.
    Unused high bits of the final word are zero.
    """
    if word_bits <= 0:
        raise ValueError(f"word_bits must be positive, not {word_bits}")
    word = 0
    for i, bit in enumerate(bits(store)):
        offset = i % word_bits
        if bit:
            word |= 1 << offset
        if offset == word_bits - 1:
            yield word
            word = 0
    if len(store) % word_bits:
        yield word