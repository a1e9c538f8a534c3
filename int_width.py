"""Fixed-width signed integers.

Every operation in this toolkit works on signed integers of one width, 32 or
64 bits.  Values are plain Python ``int`` objects checked against the range
of the matching numpy dtype, so a single implementation serves both widths.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

DEFAULT_BITS = 64

_DTYPES = {
    32: (np.int32, np.uint32),
    64: (np.int64, np.uint64),
}
SUPPORTED_WIDTHS = tuple(sorted(_DTYPES))


class IntWidth:
    """Range and dtype information for one integer width."""

    __slots__ = ("bits", "dtype", "udtype", "min", "max")

    def __init__(self, bits: int):
        if bits not in _DTYPES:
            raise ValueError(f"Unsupported integer width {bits}, expected one of {SUPPORTED_WIDTHS}")
        self.bits = bits
        self.dtype, self.udtype = _DTYPES[bits]
        info = np.iinfo(self.dtype)
        self.min = int(info.min)
        self.max = int(info.max)

    def check(self, value, name: str = "value") -> int:
        """Return ``value`` as an ``int``, raising ``OverflowError`` if it does not fit."""
        v = int(value)
        if v < self.min or v > self.max:
            raise OverflowError(f"{name}={v} does not fit in int{self.bits}")
        return v

    def sign_bit(self, value: int) -> int:
        """Top bit of ``value`` reinterpreted as an unsigned integer of this width."""
        raw = self.dtype(value).view(self.udtype)
        return int(raw >> self.udtype(self.bits - 1))

    def __repr__(self):
        return f"IntWidth({self.bits})"


@lru_cache(maxsize=None)
def _int_width(bits: int) -> IntWidth:
    return IntWidth(bits)


def int_width(bits: int = DEFAULT_BITS) -> IntWidth:
    """Shared :class:`IntWidth` for ``bits``, one instance per width."""
    return _int_width(int(bits))


def trunc_div(a: int, b: int) -> int:
    """Quotient of ``a / b`` rounded toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q
