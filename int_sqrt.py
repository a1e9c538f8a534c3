"""Floor square root of fixed-width integers."""

from __future__ import annotations

from int_width import DEFAULT_BITS, int_width


def integer_square_root(n: int, *, bits: int = DEFAULT_BITS) -> int:
    """Return ``floor(sqrt(n))`` using the digit-by-digit binary method.

    The input is consumed two bits (one base-4 digit) at a time, starting at
    the largest power of four representable in the signed width.  The loop
    always runs ``bits // 2`` times.
    """
    width = int_width(bits)
    n = width.check(n, "n")
    if n < 0:
        raise ValueError("Square root of a negative number is not supported")

    rem = n
    res = 0
    mask = 1 << (width.bits - 2)
    for _ in range(width.bits // 2):
        if rem >= res + mask:
            rem -= res + mask
            res = (res >> 1) + mask
        else:
            res >>= 1
        mask >>= 2
    return res
