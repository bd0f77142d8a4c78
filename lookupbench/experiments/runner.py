from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Sequence

from lookupbench.generator import make_collections
from lookupbench.models import BenchmarkPlan, CollectionPair, TimingResult
from lookupbench.timing import format_duration, linear_lookups, strmap_lookups

logger = logging.getLogger("lookupbench.runner")

HEADER = "Timing tests on arrays and maps."
DIVIDER = "-----"


def format_result_line(result: TimingResult) -> str:
    """Render one report line, tab separated."""
    return (
        f"iterations: {result.iterations}\t"
        f"test: {result.label}\t"
        f"linear: {format_duration(result.linear_ns)}\t"
        f"strmap: {format_duration(result.strmap_ns)}\t"
        f"linear < strmap: {str(result.linear_faster).lower()}"
    )


class BenchmarkRunner:
    def __init__(self, base_results_dir: str | None = None):
        """Runner prints the report; it writes files only with a results dir.

        Each batch gets its own UTC timestamp directory, older ones are kept.
        """
        self.timestamp_dir: Path | None = None
        if base_results_dir:
            base_dir = Path(base_results_dir)
            base_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            self.timestamp_dir = base_dir / stamp
            self.timestamp_dir.mkdir(parents=True, exist_ok=True)

    def run(self, plan: BenchmarkPlan) -> List[TimingResult]:
        logger.info(
            "Benchmark: %d lengths, iterations=%s, pairs=%s (%d cells)",
            len(plan.lengths),
            ",".join(str(n) for n in plan.iteration_counts),
            " ".join(p.label for p in plan.pairs),
            plan.cells(),
        )
        print(HEADER)
        results: List[TimingResult] = []
        for length in plan.lengths:
            print(f"Examine string slices of length {length}.")
            block = self.run_length(plan, length)
            results.extend(block)
            if self.timestamp_dir is not None:
                self._persist_block(length, block)
            print(DIVIDER)
        return results

    def run_length(self, plan: BenchmarkPlan, length: int) -> List[TimingResult]:
        collections = make_collections(length, plan.collections)
        logger.debug(
            "Length %d collection sizes: %s",
            length,
            {name: len(strings) for name, strings in collections.items()},
        )
        block: List[TimingResult] = []
        for iterations in plan.iteration_counts:
            for pair in plan.pairs:
                result = self._run_single(length, iterations, pair, collections)
                print(format_result_line(result))
                block.append(result)
        return block

    def _run_single(
        self,
        length: int,
        iterations: int,
        pair: CollectionPair,
        collections: dict[str, Sequence[str]],
    ) -> TimingResult:
        strings1 = collections[pair.first]
        strings2 = collections[pair.second]
        return TimingResult(
            length=length,
            iterations=iterations,
            label=pair.label,
            linear_ns=linear_lookups(iterations, strings1, strings2),
            strmap_ns=strmap_lookups(iterations, strings1, strings2),
        )

    def _persist_block(self, length: int, block: List[TimingResult]) -> None:
        path = self.timestamp_dir / f"length={length}.json"
        with open(path, "w", encoding="utf-8") as f:
            json.dump([r.to_dict() for r in block], f, indent=2)
        logger.debug("Saved %s", path)
