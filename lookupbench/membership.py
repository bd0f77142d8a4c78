"""Two equivalent subset checks over lists of strings.

Linear scan
    ``string_in_strings`` / ``strings_in_strings`` walk the searched list for
    every probe. No memory is allocated, time is O(|A| * |B|).

Set-backed
    ``string_in_strings_using_set`` / ``strings_in_strings_using_set`` first
    build a ``set`` from the searched list and probe it. Time is
    O(|A| + |B|) but every call pays for a fresh set.

Both variants never mutate their arguments and always agree on the result.
"""


def string_in_strings(s: str, strings: list[str]) -> bool:
    """Return True iff ``s`` equals an element of ``strings`` (linear search)."""
    for s2 in strings:
        if s == s2:
            return True
    return False


def strings_in_strings(strings1: list[str], strings2: list[str]) -> bool:
    """Return True iff every string of ``strings1`` occurs in ``strings2``.

    Uses ``string_in_strings`` for each element and stops at the first miss.
    """
    for s in strings1:
        if not string_in_strings(s, strings2):
            return False
    return True


def string_in_strings_using_set(s: str, strings: list[str]) -> bool:
    """Return True iff ``s`` is in ``strings``, via a set built on each call."""
    lookup = set(strings)
    return s in lookup


def strings_in_strings_using_set(strings1: list[str], strings2: list[str]) -> bool:
    """Return True iff every string of ``strings1`` occurs in ``strings2``.

    Builds one set from ``strings2`` per call, then probes it for each element
    of ``strings1`` and stops at the first miss.
    """
    lookup = set(strings2)
    for s in strings1:
        if s not in lookup:
            return False
    return True
