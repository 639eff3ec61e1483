import functools
import math
import numpy as np
import pytest

from prioheap.errors import IncomparableError
from prioheap.ordering import (
    Ordering,
    by_key,
    compare,
    natural_order,
    reverse_order,
    then_comparing,
)


def test_compare_basic():
    assert compare(1, 2) == Ordering.LESS
    assert compare(2, 1) == Ordering.GREATER
    assert compare(2, 2) == Ordering.EQUAL
    assert compare("a", "b") == Ordering.LESS
    assert natural_order((1, 2), (1, 3)) == Ordering.LESS


def test_ordering_reverse():
    assert Ordering.LESS.reverse() == Ordering.GREATER
    assert Ordering.GREATER.reverse() == Ordering.LESS
    assert Ordering.EQUAL.reverse() == Ordering.EQUAL


def test_compare_int64_extremes():
    info = np.iinfo(np.int64)
    lo = np.int64(info.min)
    hi = np.int64(info.max)

    # The "difference of two values" idiom wraps around at the extremes and
    # reports the wrong sign.
    with np.errstate(over="ignore"):
        naive = np.array([hi], dtype=np.int64) - np.array([lo], dtype=np.int64)
    assert naive[0] < 0

    assert compare(hi, lo) == Ordering.GREATER
    assert compare(lo, hi) == Ordering.LESS
    assert compare(lo, lo) == Ordering.EQUAL
    assert compare(hi, np.int64(-1)) == Ordering.GREATER
    assert compare(lo, np.int64(1)) == Ordering.LESS
    assert reverse_order()(hi, lo) == Ordering.LESS


def test_compare_int32_extremes():
    info = np.iinfo(np.int32)
    values = [
        np.int32(info.max),
        np.int32(0),
        np.int32(info.min),
        np.int32(-1),
        np.int32(info.max - 1),
    ]
    for a in values:
        for b in values:
            expected = Ordering.LESS if int(a) < int(b) else Ordering.GREATER
            if int(a) == int(b):
                expected = Ordering.EQUAL
            assert compare(a, b) == expected


def test_compare_nan_is_rejected():
    with pytest.raises(IncomparableError):
        compare(math.nan, 1.0)
    with pytest.raises(IncomparableError):
        compare(math.nan, math.nan)


def test_reverse_order():
    cmp = reverse_order(natural_order)
    assert cmp(1, 2) == Ordering.GREATER
    assert cmp(2, 1) == Ordering.LESS
    assert cmp(3, 3) == Ordering.EQUAL


def test_by_key():
    cmp = by_key(len)
    assert cmp("aa", "b") == Ordering.GREATER
    assert cmp("a", "b") == Ordering.EQUAL

    desc = by_key(len, reverse_order())
    assert desc("aa", "b") == Ordering.LESS


def test_then_comparing():
    # Highest frequency first, then smallest value first.
    cmp = then_comparing(
        by_key(lambda pair: pair[1], reverse_order()),
        by_key(lambda pair: pair[0]),
    )
    pairs = [(1, 3), (2, 5), (3, 1), (0, 5)]
    assert cmp((2, 5), (1, 3)) == Ordering.LESS
    assert cmp((0, 5), (2, 5)) == Ordering.LESS
    assert cmp((0, 5), (0, 5)) == Ordering.EQUAL

    assert sorted(pairs, key=functools.cmp_to_key(cmp)) == [
        (0, 5),
        (2, 5),
        (1, 3),
        (3, 1),
    ]


def test_then_comparing_normalizes_int_verdicts():
    cmp = then_comparing(lambda a, b: 0, lambda a, b: -7)
    assert cmp(1, 2) is Ordering.LESS


def test_then_comparing_needs_comparators():
    with pytest.raises(ValueError):
        then_comparing()
