"""Tests for fixed-width integer helpers."""

import numpy as np
import pytest

from int_width import SUPPORTED_WIDTHS, int_width, trunc_div


def test_ranges():
    w32, w64 = int_width(32), int_width(64)
    assert (w32.min, w32.max) == (-2**31, 2**31 - 1)
    assert (w64.min, w64.max) == (-2**63, 2**63 - 1)
    assert w64.dtype is np.int64
    assert w32.udtype is np.uint32


def test_cached_per_width():
    assert int_width(64) is int_width(64)
    assert int_width() is int_width(64)
    assert int_width(bits=64) is int_width(np.int64(64))
    assert int_width(32) is not int_width(64)


def test_unsupported_width():
    assert SUPPORTED_WIDTHS == (32, 64)
    with pytest.raises(ValueError):
        int_width(16)


def test_check():
    w = int_width(32)
    assert w.check(np.int32(-7)) == -7
    assert isinstance(w.check(np.int64(5)), int)
    with pytest.raises(OverflowError, match="x=2147483648"):
        w.check(2**31, "x")
    with pytest.raises(OverflowError):
        w.check(-2**31 - 1)


@pytest.mark.parametrize("bits", [32, 64])
def test_sign_bit(bits):
    w = int_width(bits)
    assert w.sign_bit(0) == 0
    assert w.sign_bit(5) == 0
    assert w.sign_bit(w.max) == 0
    assert w.sign_bit(-1) == 1
    assert w.sign_bit(w.min) == 1


def test_trunc_div():
    assert trunc_div(7, 2) == 3
    assert trunc_div(-7, 2) == -3
    assert trunc_div(7, -2) == -3
    assert trunc_div(-7, -2) == 3
    assert trunc_div(0, 5) == 0
