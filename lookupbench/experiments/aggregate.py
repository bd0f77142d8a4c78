from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from lookupbench.models import TimingResult

logger = logging.getLogger("lookupbench.aggregate")

SUMMARY_COLUMNS = [
    "length",
    "iterations",
    "label",
    "linear_ns",
    "strmap_ns",
    "linear_faster",
]


def load_results_dir(timestamp_dir: Path) -> List[Dict[str, Any]]:
    """Load all per-length JSON files of one benchmark batch.

    Unreadable files are logged and skipped.
    """
    rows: List[Dict[str, Any]] = []
    for file in sorted(Path(timestamp_dir).glob("length=*.json")):
        try:
            with open(file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load %s: %s", file, e)
            continue
        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            logger.warning("Skipping %s: expected a list of result objects", file)
            continue
        rows.extend(data)
    rows.sort(key=lambda r: (r.get("length", 0), r.get("iterations", 0)))
    return rows


def write_summary_csv(timestamp_dir: Path) -> Path:
    out_path = Path(timestamp_dir) / "summary.csv"
    rows = load_results_dir(timestamp_dir)
    if not rows:
        logger.warning("No result files found to summarize in %s", timestamp_dir)
        return out_path
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=SUMMARY_COLUMNS, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    logger.info("Summary written: %s (%d rows)", out_path, len(rows))
    return out_path


def find_crossovers(
    results: Iterable[TimingResult],
) -> Dict[Tuple[int, str], Optional[int]]:
    """Largest collection length at which linear scanning still won.

    Returns:
        Mapping ``(iterations, label) -> length`` where ``length`` is None
        when the set-backed check was faster at every measured length.
    """
    crossovers: Dict[Tuple[int, str], Optional[int]] = {}
    for r in results:
        key = (r.iterations, r.label)
        best = crossovers.setdefault(key, None)
        if r.linear_faster and (best is None or r.length > best):
            crossovers[key] = r.length
    return crossovers


def write_crossover_csv(
    timestamp_dir: Path,
    crossovers: Dict[Tuple[int, str], Optional[int]],
) -> Path:
    out_path = Path(timestamp_dir) / "crossover.csv"
    with open(out_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["iterations", "label", "max_linear_faster_length"])
        for (iterations, label), length in sorted(crossovers.items()):
            writer.writerow([iterations, label, "" if length is None else length])
    return out_path


def log_crossovers(crossovers: Dict[Tuple[int, str], Optional[int]]) -> None:
    for (iterations, label), length in sorted(crossovers.items()):
        logger.info(
            "Crossover iterations=%d test=%s: linear faster up to length %s",
            iterations,
            label,
            "n/a" if length is None else length,
        )
