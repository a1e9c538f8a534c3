"""Precomputed table of small primes.

The table holds the first ``TABLE_SIZE`` primes (2 .. 104729) as a read-only
``np.int64`` array.  It is produced offline with sympy and either rebuilt on
first use or loaded from an ``.npy`` resource written by ``PrimeTable.save``.
"""

from __future__ import annotations

import logging
from functools import lru_cache

import numpy as np
from sympy import prime, primepi, primerange

log = logging.getLogger(__name__)

TABLE_SIZE = 10_000


class PrimeTable:
    """Ascending, gap-free sequence of primes starting at 2."""

    __slots__ = ("primes",)

    def __init__(self, primes):
        arr = np.array(primes, dtype=np.int64)
        if arr.ndim != 1 or arr.size == 0:
            raise ValueError("Prime table must be a non-empty 1-D sequence")
        if arr[0] != 2:
            raise ValueError(f"Prime table must start at 2, got {int(arr[0])}")
        if arr.size > 1 and not np.all(np.diff(arr) > 0):
            raise ValueError("Prime table must be strictly increasing")
        top = int(arr[-1])
        if int(primepi(top)) != arr.size or not np.array_equal(arr, list(primerange(2, top + 1))):
            raise ValueError(f"Prime table is not the complete list of primes up to {top}")
        arr.flags.writeable = False
        self.primes = arr

    # ─────────────────────────────────────────────────────────────────────────
    # Construction and persistence
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def generate(cls, count: int = TABLE_SIZE) -> "PrimeTable":
        """Build the table of the first ``count`` primes."""
        if count < 1:
            raise ValueError(f"Prime table needs at least one entry, got {count}")
        bound = int(prime(count))
        log.debug("Generating prime table of %d entries up to %d", count, bound)
        return cls(list(primerange(2, bound + 1)))

    @classmethod
    def load(cls, path) -> "PrimeTable":
        """Load a table written by :meth:`save`."""
        table = cls(np.load(path, allow_pickle=False))
        log.debug("Loaded prime table of %d entries from %s", len(table), path)
        return table

    def save(self, path) -> None:
        np.save(path, self.primes, allow_pickle=False)
        log.debug("Saved prime table of %d entries to %s", len(self), path)

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def max(self) -> int:
        return int(self.primes[-1])

    def __len__(self):
        return int(self.primes.size)

    def __getitem__(self, idx):
        """Single entries come back as ``int``, slices as read-only array views."""
        if isinstance(idx, slice):
            return self.primes[idx]
        return int(self.primes[idx])

    def __iter__(self):
        return (int(p) for p in self.primes)

    def __contains__(self, n) -> bool:
        n = int(n)
        if n < 2 or n > self.max:
            return False
        idx = int(np.searchsorted(self.primes, n))
        return int(self.primes[idx]) == n

    def divisors_upto(self, ceiling: int, start: int = 0) -> np.ndarray:
        """Read-only view of the entries from index ``start`` that are ``<= ceiling``."""
        stop = int(np.searchsorted(self.primes, ceiling, side="right"))
        return self.primes[start:stop]

    def __repr__(self):
        return f"PrimeTable({len(self)} primes, max={self.max})"


@lru_cache(maxsize=None)
def default_table() -> PrimeTable:
    """Process-wide table of the first ``TABLE_SIZE`` primes."""
    return PrimeTable.generate(TABLE_SIZE)
