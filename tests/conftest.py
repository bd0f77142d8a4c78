"""Shared fixtures and a per-module result summary.

Also ensures the project root is on sys.path so 'import lookupbench' works
without installing the package.
"""

from __future__ import annotations

import sys
from collections import Counter, defaultdict
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))


@pytest.fixture
def small_collections() -> dict[str, list[str]]:
    """Collections B..F for length 10, as the driver builds them."""
    from lookupbench.generator import make_collections
    from lookupbench.models import DEFAULT_COLLECTIONS

    return make_collections(10, DEFAULT_COLLECTIONS.items())


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:
    """Print passed/failed counts per test module."""
    per_module: dict[str, Counter] = defaultdict(Counter)
    for outcome in ("passed", "failed", "error", "skipped"):
        for rep in terminalreporter.stats.get(outcome, []):
            module = Path(rep.nodeid.split("::")[0]).name
            per_module[module][outcome] += 1
    if not per_module:
        return

    terminalreporter.section("lookupbench modules", sep="=")
    width = max(len(name) for name in per_module)
    for name in sorted(per_module):
        counts = per_module[name]
        line = f"{name.ljust(width)}  ok={counts['passed']}"
        for outcome in ("failed", "error", "skipped"):
            if counts[outcome]:
                line += f" {outcome}={counts[outcome]}"
        terminalreporter.write_line(line)
