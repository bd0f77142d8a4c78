"""Tests for the linear-scan and set-backed subset checks.

Both implementations must agree on every input; Hypothesis explores random
string lists, the remaining tests pin concrete cases and boundaries.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lookupbench.generator import make_short_strings
from lookupbench.membership import (
    string_in_strings,
    string_in_strings_using_set,
    strings_in_strings,
    strings_in_strings_using_set,
)

SUBSET_CHECKS = [strings_in_strings, strings_in_strings_using_set]
ELEMENT_CHECKS = [string_in_strings, string_in_strings_using_set]

short_text = st.text(alphabet="0123456789ab", max_size=4)
string_lists = st.lists(short_text, max_size=20)


@given(string_lists, string_lists)
def test_subset_checks_agree(a: list[str], b: list[str]):
    expected = all(s in b for s in a)
    assert strings_in_strings(a, b) is expected
    assert strings_in_strings_using_set(a, b) is expected


@given(short_text, string_lists)
def test_element_checks_agree(s: str, strings: list[str]):
    assert string_in_strings(s, strings) == string_in_strings_using_set(s, strings)


@given(string_lists, string_lists)
def test_inputs_not_mutated_and_idempotent(a: list[str], b: list[str]):
    a_copy, b_copy = list(a), list(b)
    for check in SUBSET_CHECKS:
        first = check(a, b)
        assert check(a, b) == first
    assert a == a_copy
    assert b == b_copy


@pytest.mark.parametrize("check", SUBSET_CHECKS)
def test_empty_subset_is_contained(check):
    assert check([], []) is True
    assert check([], ["1000"]) is True


@pytest.mark.parametrize("check", SUBSET_CHECKS)
def test_nonempty_not_in_empty(check):
    assert check(["1000"], []) is False


@pytest.mark.parametrize("check", ELEMENT_CHECKS)
def test_element_in_empty(check):
    assert check("1000", []) is False


@pytest.mark.parametrize("check", SUBSET_CHECKS)
def test_generated_b_not_subset_of_c(check):
    b = make_short_strings(10, 2)
    c = make_short_strings(10, 3)
    # "1005" is odd but a multiple of three
    assert "1005" in b and "1005" not in c
    assert check(b, c) is False


@pytest.mark.parametrize("check", SUBSET_CHECKS)
def test_multiples_of_six_skip_is_superset_of_even_skip(check):
    # Every odd number is kept when skipping multiples of 6.
    b = make_short_strings(40, 2)
    f = make_short_strings(40, 6)
    assert check(b, f) is True
    assert check(f, b) is False


@pytest.mark.parametrize("check", SUBSET_CHECKS)
def test_duplicates_in_subset(check):
    assert check(["1", "1", "2"], ["2", "1"]) is True
