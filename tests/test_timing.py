from __future__ import annotations

import pytest

from lookupbench.timing import (
    format_duration,
    linear_lookups,
    strmap_lookups,
    time_lookups,
)


def test_zero_iterations_is_near_zero():
    calls = []

    def predicate(a, b):
        calls.append(1)
        return True

    elapsed = time_lookups(0, predicate, ["1"], ["1"])
    assert isinstance(elapsed, int)
    assert 0 <= elapsed < 50_000_000
    assert calls == []


def test_calls_predicate_n_times_with_arguments():
    seen = []
    a, b = ["1000"], ["1000", "1001"]

    def predicate(x, y):
        seen.append((x, y))
        return False

    time_lookups(7, predicate, a, b)
    assert len(seen) == 7
    assert all(x is a and y is b for x, y in seen)


def test_concrete_harnesses_return_non_negative():
    a = [str(i) for i in range(1000, 1010)]
    b = [str(i) for i in range(1000, 1020)]
    assert linear_lookups(100, a, b) >= 0
    assert strmap_lookups(100, a, b) >= 0


def test_more_iterations_take_longer():
    a = [str(i) for i in range(1000, 1050)]
    b = [str(i) for i in range(1000, 1100)]
    small = min(linear_lookups(10, a, b) for _ in range(3))
    large = linear_lookups(5_000, a, b)
    assert large > small


@pytest.mark.parametrize(
    "ns,expected",
    [
        (0, "0s"),
        (1, "1ns"),
        (850, "850ns"),
        (1_000, "1µs"),
        (12_500, "12.5µs"),
        (999_999, "999.999µs"),
        (1_234_567, "1.234567ms"),
        (40_000_000, "40ms"),
        (2_500_000_000, "2.5s"),
        (60_000_000_000, "1m0s"),
        (62_500_000_000, "1m2.5s"),
        (3_600_000_000_000, "1h0m0s"),
        (-1_500, "-1.5µs"),
    ],
)
def test_format_duration(ns: int, expected: str):
    assert format_duration(ns) == expected
