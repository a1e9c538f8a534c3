"""Modular arithmetic over fixed-width signed integers.

All functions accept a keyword ``bits`` selecting the integer width (32 or
64).  Operands outside that width raise ``OverflowError``; a non-positive
modulus raises ``ValueError``.  Results that may not exist (an inverse, a
congruence solution, a power with a degenerate modulus) come back as
``None``.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from int_width import DEFAULT_BITS, int_width, trunc_div


# ─────────────────────────────────────────────────────────────────────────────
# Modulus normalization
# ─────────────────────────────────────────────────────────────────────────────

def modulo(a: int, m: int, *, bits: int = DEFAULT_BITS) -> int:
    """Return ``a mod m`` in ``[0, m)`` following the mathematical convention."""
    width = int_width(bits)
    a = width.check(a, "a")
    m = width.check(m, "m")
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    # truncating remainder, sign follows the dividend
    r = int(np.fmod(width.dtype(a), width.dtype(m)))
    return r + width.sign_bit(r) * m


def mul_mod(a: int, b: int, m: int, *, bits: int = DEFAULT_BITS) -> int:
    """Return ``a * b mod m`` without overflowing the integer width.

    The factors are checked against the width, then multiplied and reduced
    as Python ints, whose arbitrary precision holds the full 2W-bit product.
    """
    width = int_width(bits)
    a = width.check(a, "a")
    b = width.check(b, "b")
    m = width.check(m, "m")
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    return (a * b) % m


# ─────────────────────────────────────────────────────────────────────────────
# Extended Euclidean algorithm
# ─────────────────────────────────────────────────────────────────────────────

class BezoutResult(NamedTuple):
    """Coefficients ``s``, ``t`` and divisor ``g`` with ``a*s + b*t == g``."""

    s: int
    t: int
    g: int


def extended_gcd(a: int, b: int, *, bits: int = DEFAULT_BITS) -> BezoutResult:
    """Iterative extended Euclid.

    The sign of ``g`` is whatever the recurrence produces; it is not
    normalized afterwards.
    """
    width = int_width(bits)
    prev_r, r = width.check(a, "a"), width.check(b, "b")
    prev_s, s = 1, 0
    prev_t, t = 0, 1
    while r != 0:
        q = trunc_div(prev_r, r)
        prev_r, r = r, prev_r - q * r
        prev_s, s = s, prev_s - q * s
        prev_t, t = t, prev_t - q * t
    return BezoutResult(
        width.check(prev_s, "s"),
        width.check(prev_t, "t"),
        width.check(prev_r, "gcd"),
    )


# ─────────────────────────────────────────────────────────────────────────────
# Inverses and linear congruences
# ─────────────────────────────────────────────────────────────────────────────

def inv_modulo(x: int, m: int, *, bits: int = DEFAULT_BITS) -> int | None:
    """Return ``v`` in ``[0, m)`` with ``x * v = 1 (mod m)``, or ``None``."""
    x = modulo(x, m, bits=bits)
    s, _, g = extended_gcd(x, m, bits=bits)
    if g != 1:
        return None
    return modulo(s, m, bits=bits)


def solve_linear_congruence(a: int, b: int, m: int, *, bits: int = DEFAULT_BITS) -> int | None:
    """Solve ``a * x = b (mod m)`` when ``a`` is invertible modulo ``m``.

    When ``gcd(a, m) > 1`` there is either no solution or several of them;
    neither case is handled and ``None`` is returned.
    """
    a_inv = inv_modulo(a, m, bits=bits)
    if a_inv is None:
        return None
    return mul_mod(b, a_inv, m, bits=bits)


# ─────────────────────────────────────────────────────────────────────────────
# Exponentiation
# ─────────────────────────────────────────────────────────────────────────────

def power_mod(b: int, e: int, m: int, *, bits: int = DEFAULT_BITS) -> int | None:
    """Return ``b**e mod m`` by ``e`` successive multiplications.

    This is O(e) on purpose.  For ``m <= 1`` the result is undefined and
    ``None`` is returned.
    """
    width = int_width(bits)
    b = width.check(b, "b")
    m = width.check(m, "m")
    e = int(e)
    if e < 0:
        raise ValueError(f"Exponent must be non-negative, got {e}")
    if m <= 1:
        return None
    c = 1
    for _ in range(e):
        c = mul_mod(b, c, m, bits=bits)
    return c
