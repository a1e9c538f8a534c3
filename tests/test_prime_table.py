"""Tests for the small-prime table."""

import numpy as np
import pytest
from sympy import isprime

from prime_table import TABLE_SIZE, PrimeTable, default_table


def test_default_table_shape():
    table = default_table()
    assert len(table) == TABLE_SIZE
    assert table[0] == 2
    assert table[1] == 3
    assert table.max == 104729
    assert table[-1] == 104729


def test_default_table_is_shared():
    assert default_table() is default_table()


def test_default_table_read_only():
    table = default_table()
    with pytest.raises(ValueError):
        table.primes[0] = 4


def test_default_table_invariants():
    primes = default_table().primes
    assert np.all(np.diff(primes) > 0)
    for p in default_table()[:50].tolist() + default_table()[-50:].tolist():
        assert isprime(p)


def test_contains():
    table = default_table()
    assert 2 in table
    assert 104729 in table
    assert 104723 in table
    assert 104724 not in table
    assert 1 not in table
    assert 0 not in table
    assert 104743 not in table  # prime, but past the end


def test_iteration_and_slices():
    table = PrimeTable.generate(5)
    assert list(table) == [2, 3, 5, 7, 11]
    assert table[1:3].tolist() == [3, 5]
    assert isinstance(table[2], int)
    assert all(isinstance(p, int) for p in table)


def test_slices_are_read_only_views():
    table = PrimeTable.generate(10)
    for view in (table[2:5], table.divisors_upto(13, start=2)):
        assert isinstance(view, np.ndarray)
        assert not view.flags.writeable
        assert np.shares_memory(view, table.primes)


def test_divisors_upto():
    table = PrimeTable.generate(10)
    assert table.divisors_upto(11).tolist() == [2, 3, 5, 7, 11]
    assert table.divisors_upto(12, start=2).tolist() == [5, 7, 11]
    assert table.divisors_upto(1).tolist() == []


def test_generate_rejects_empty():
    with pytest.raises(ValueError):
        PrimeTable.generate(0)


@pytest.mark.parametrize("primes", [[], [3, 5, 7], [2, 5, 3], [2, 3, 3]])
def test_constructor_validation(primes):
    with pytest.raises(ValueError):
        PrimeTable(primes)


def test_constructor_rejects_gaps():
    with pytest.raises(ValueError, match="not the complete list of primes up to 11"):
        PrimeTable([2, 3, 7, 11])


def test_constructor_rejects_composites():
    with pytest.raises(ValueError, match="not the complete list"):
        PrimeTable([2, 3, 25, 29])
    with pytest.raises(ValueError):
        PrimeTable([2, 3, 5, 7, 9])


def test_constructor_accepts_complete_prefix():
    assert list(PrimeTable([2, 3, 5, 7, 11, 13])) == [2, 3, 5, 7, 11, 13]
    assert len(PrimeTable(np.array([2]))) == 1


def test_save_and_load(tmp_path):
    path = tmp_path / "primes.npy"
    PrimeTable.generate(100).save(path)
    table = PrimeTable.load(path)
    assert len(table) == 100
    assert table.max == 541
    assert not table.primes.flags.writeable


def test_load_rejects_gaps(tmp_path):
    path = tmp_path / "broken.npy"
    np.save(path, np.array([2, 3, 5, 11, 13], dtype=np.int64))
    with pytest.raises(ValueError, match="not the complete list"):
        PrimeTable.load(path)


def test_load_rejects_composites(tmp_path):
    path = tmp_path / "composite.npy"
    np.save(path, np.array([2, 3, 5, 7, 9], dtype=np.int64))
    with pytest.raises(ValueError):
        PrimeTable.load(path)
