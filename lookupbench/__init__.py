"""Micro-benchmark of linear-scan vs set-backed subset checks on string lists.

Exports the generator and both membership predicates.
"""

from lookupbench.generator import make_short_strings  # noqa: F401
from lookupbench.membership import (  # noqa: F401
    string_in_strings,
    string_in_strings_using_set,
    strings_in_strings,
    strings_in_strings_using_set,
)

__all__ = [
    "make_short_strings",
    "string_in_strings",
    "string_in_strings_using_set",
    "strings_in_strings",
    "strings_in_strings_using_set",
]
