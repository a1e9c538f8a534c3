"""Deterministic primality testing.

Small numbers are looked up in the prime table.  Larger ones are trial
divided by the table entries up to ``isqrt(n)``; if the table runs out
before that, the search continues with a 2/4 wheel that skips multiples of
2 and 3.  Cost is roughly O(sqrt(n) / ln(n)) divisions, which is fine for
moderate magnitudes and nothing more.
"""

from __future__ import annotations

import logging
from itertools import cycle
from typing import Generator

import numpy as np
from tqdm import tqdm

from int_sqrt import integer_square_root
from int_width import DEFAULT_BITS, int_width
from modular import modulo
from prime_table import PrimeTable, default_table

log = logging.getLogger(__name__)


def wheel_candidates(after: int) -> Generator[int, None, None]:
    """Yield numbers greater than ``after`` that are coprime to 6, ascending."""
    cand = after + 1
    while cand % 6 not in (1, 5):
        cand += 1
    steps = cycle((4, 2) if cand % 6 == 1 else (2, 4))
    while True:
        yield cand
        cand += next(steps)


def is_prime(n: int, *, bits: int = DEFAULT_BITS, table: PrimeTable | None = None) -> bool:
    """Return ``True`` if ``n`` is prime.  Numbers below 2 are not prime."""
    n = int_width(bits).check(n, "n")
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if modulo(n, 2, bits=bits) == 0 or modulo(n, 3, bits=bits) == 0:
        return False

    if table is None:
        table = default_table()
    if n <= table.max:
        return n in table

    ceiling = integer_square_root(n, bits=bits)
    # 2 and 3 were already ruled out
    divisors = table.divisors_upto(ceiling, start=2)
    if divisors.size and np.any(np.int64(n) % divisors == 0):
        return False
    if table.max >= ceiling:
        return True

    log.debug("Table exhausted below isqrt(%d)=%d, continuing on the wheel", n, ceiling)
    for d in wheel_candidates(table.max):
        if d > ceiling:
            break
        if n % d == 0:
            return False
    return True


def primes_in_range(lo: int, hi: int, *, bits: int = DEFAULT_BITS,
                    table: PrimeTable | None = None, progress: bool = False) -> list[int]:
    """Primes ``p`` with ``lo <= p < hi``, optionally with a progress bar."""
    numbers = tqdm(range(lo, hi), desc="Scanning", unit="n", disable=not progress)
    return [n for n in numbers if is_prime(n, bits=bits, table=table)]
