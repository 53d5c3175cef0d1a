"""Simple bit-by-bit reference implementations of bit-vector operations.

Bit vectors are sequences of bools; polynomials are sequences of bool
coefficients where index ``i`` holds the coefficient of ``x**i``.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice

__all__ = [
    "first_set",
    "last_set",
    "next_set",
    "previous_set",
    "first_unset",
    "last_unset",
    "next_unset",
    "previous_unset",
    "to_binary_string",
    "to_hex_string",
    "shift_right",
    "shift_left",
    "convolution",
    "reduce_x_to_power_n",
]


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, not {value}")


def _search_forward(bv: Sequence[bool], start: int, want: bool) -> int | None:
    return next(
        (i for i, bit in enumerate(islice(bv, start, None), start) if bool(bit) == want),
        None,
    )


def _search_backward(bv: Sequence[bool], stop: int, want: bool) -> int | None:
    return next((i for i in reversed(range(stop)) if bool(bv[i]) == want), None)


def first_set(bv: Sequence[bool]) -> int | None:
    """Index of the first set bit, or None."""
    return _search_forward(bv, 0, True)


def last_set(bv: Sequence[bool]) -> int | None:
    """Index of the last set bit, or None."""
    return _search_backward(bv, len(bv), True)


def next_set(bv: Sequence[bool], index: int) -> int | None:
    """Index of the first set bit after ``index``, or None."""
    _check_non_negative("index", index)
    return _search_forward(bv, index + 1, True)


def previous_set(bv: Sequence[bool], index: int) -> int | None:
    """Index of the last set bit before ``index``, or None."""
    _check_non_negative("index", index)
    if not len(bv):
        return None
    return _search_backward(bv, index, True)


def first_unset(bv: Sequence[bool]) -> int | None:
    """Index of the first unset bit, or None."""
    return _search_forward(bv, 0, False)


def last_unset(bv: Sequence[bool]) -> int | None:
    """Index of the last unset bit, or None."""
    return _search_backward(bv, len(bv), False)


def next_unset(bv: Sequence[bool], index: int) -> int | None:
    """Index of the first unset bit after ``index``, or None."""
    _check_non_negative("index", index)
    return _search_forward(bv, index + 1, False)


def previous_unset(bv: Sequence[bool], index: int) -> int | None:
    """Index of the last unset bit before ``index``, or None."""
    _check_non_negative("index", index)
    if not len(bv):
        return None
    return _search_backward(bv, index, False)


def to_binary_string(bv: Sequence[bool]) -> str:
    """String of '0' and '1' characters, first bit first."""
    return "".join("1" if bit else "0" for bit in bv)


def _pack_msb_first(chunk: Sequence[bool]) -> int:
    value = 0
    for bit in chunk:
        value = (value << 1) | int(bool(bit))
    return value


def to_hex_string(bv: Sequence[bool]) -> str:
    """Hex encoding, four bits per digit with the first bit most significant.

    When the length is not a multiple of four the trailing ``k`` bits form one
    final digit in base ``2**k``, marked by a ``.2``, ``.4`` or ``.8`` suffix.
    """
    bits = [bool(b) for b in bv]
    n = len(bits)
    full = n - n % 4
    digits = [f"{_pack_msb_first(bits[i:i + 4]):X}" for i in range(0, full, 4)]
    k = n % 4
    if k:
        digits.append(f"{_pack_msb_first(bits[full:]):X}.{1 << k}")
    return "".join(digits)


def shift_right(bv: Sequence[bool], shift: int) -> list[bool]:
    """Move every bit ``shift`` places towards higher indices, filling with zeros."""
    _check_non_negative("shift", shift)
    bits = [bool(b) for b in bv]
    n = len(bits)
    if shift >= n:
        return [False] * n
    return [False] * shift + bits[: n - shift]


def shift_left(bv: Sequence[bool], shift: int) -> list[bool]:
    """Move every bit ``shift`` places towards lower indices, filling with zeros."""
    _check_non_negative("shift", shift)
    bits = [bool(b) for b in bv]
    n = len(bits)
    if shift >= n:
        return [False] * n
    return bits[shift:] + [False] * shift


def convolution(lhs: Sequence[bool], rhs: Sequence[bool]) -> list[bool]:
    """GF(2) convolution of two bit vectors; empty if either input is empty."""
    if not len(lhs) or not len(rhs):
        return []
    result = [False] * (len(lhs) + len(rhs) - 1)
    rhs_set = [j for j, bit in enumerate(rhs) if bit]
    for i, bit in enumerate(lhs):
        if bit:
            for j in rhs_set:
                result[i + j] = not result[i + j]
    return result


def _trimmed(coeffs: Sequence[bool]) -> list[bool]:
    result = [bool(c) for c in coeffs]
    while result and not result[-1]:
        result.pop()
    return result


def reduce_x_to_power_n(poly: Sequence[bool], n: int) -> list[bool]:
    """Coefficients of ``x**n mod poly(x)`` with no trailing zeros.

    The zero polynomial is the empty list. Reducing modulo the zero or the
    constant polynomial gives zero.
    """
    _check_non_negative("n", n)
    coeffs = _trimmed(poly)
    if len(coeffs) <= 1:
        return []
    if n == 0:
        return [True]

    d = len(coeffs) - 1
    if d == 1:
        # poly = x + c, so x**n = c**n = c modulo poly.
        return [True] if coeffs[0] else []

    p = coeffs[:d]
    if n < d:
        return [False] * n + [True]
    if n == d:
        return _trimmed(p)

    r = list(p)
    for _ in range(d, n):
        carry = r[-1]
        r = [False] + r[:-1]
        if carry:
            r = [a != b for a, b in zip(r, p)]
    return _trimmed(r)