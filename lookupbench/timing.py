"""Timing harness for the membership predicates.

Each measurement calls a predicate ``iterations`` times in a tight loop and
returns the total elapsed wall-clock time in nanoseconds. There is no warm-up
and no repetition: one sample per (predicate, iterations, pair).
"""

from __future__ import annotations

import time
from typing import Callable

from lookupbench.membership import strings_in_strings, strings_in_strings_using_set

Predicate = Callable[[list[str], list[str]], bool]

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000
_NS_PER_MIN = 60 * _NS_PER_S


def time_lookups(
    iterations: int,
    predicate: Predicate,
    strings1: list[str],
    strings2: list[str],
) -> int:
    """Run ``predicate(strings1, strings2)`` repeatedly and time the loop.

    Args:
        iterations: Number of calls; zero (or negative) times an empty loop.
        predicate: Subset check to measure. Its result is discarded.
        strings1: Candidate subset.
        strings2: Collection searched.

    Returns:
        Elapsed nanoseconds from just before the first call to just after
        the last one.
    """
    start = time.perf_counter_ns()
    for _ in range(iterations):
        predicate(strings1, strings2)
    return time.perf_counter_ns() - start


def linear_lookups(iterations: int, strings1: list[str], strings2: list[str]) -> int:
    return time_lookups(iterations, strings_in_strings, strings1, strings2)


def strmap_lookups(iterations: int, strings1: list[str], strings2: list[str]) -> int:
    return time_lookups(iterations, strings_in_strings_using_set, strings1, strings2)


def _fixed(value: int, digits: int) -> str:
    """Render ``value / 10**digits`` without trailing fractional zeros."""
    whole, frac = divmod(value, 10**digits)
    frac_str = str(frac).rjust(digits, "0").rstrip("0")
    return f"{whole}.{frac_str}" if frac_str else str(whole)


def format_duration(ns: int) -> str:
    """Format nanoseconds as a short magnitude-suffixed string.

    Examples: ``0s``, ``850ns``, ``12.5µs``, ``1.234567ms``, ``2.5s``,
    ``1m2.5s``, ``1h0m0s``.
    """
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)
    if u < _NS_PER_US:
        return f"{sign}{u}ns"
    if u < _NS_PER_MS:
        return f"{sign}{_fixed(u, 3)}µs"
    if u < _NS_PER_S:
        return f"{sign}{_fixed(u, 6)}ms"
    minutes, rest = divmod(u, _NS_PER_MIN)
    text = f"{_fixed(rest, 9)}s"
    if minutes:
        hours, minutes = divmod(minutes, 60)
        text = f"{minutes}m" + text
        if hours:
            text = f"{hours}h" + text
    return sign + text
