import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Sequence

import matplotlib

matplotlib.use("Agg")  # Must be set before importing pyplot
import matplotlib.pyplot as plt  # noqa: E402

from lookupbench.models import TimingResult  # noqa: E402

logger = logging.getLogger("lookupbench.visualization")


def _ensure_dir(path: str):
    if path:
        os.makedirs(path, exist_ok=True)


def save_timing_comparison_plot(
    results: Sequence[TimingResult],
    filepath: str,
    iterations: int,
) -> bool:
    """Plot linear vs set-backed elapsed time against collection length.

    Only results with the given iteration count are drawn; each collection
    pair gets one solid (linear) and one dashed (set) line in the same color.

    Returns:
        False when there was nothing to draw and no file was written.
    """
    series: Dict[str, List[TimingResult]] = defaultdict(list)
    for r in results:
        if r.iterations == iterations:
            series[r.label].append(r)
    if not series:
        return False

    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    cmap = plt.get_cmap("tab10")
    for idx, (label, rows) in enumerate(sorted(series.items())):
        rows = sorted(rows, key=lambda r: r.length)
        lengths = [r.length for r in rows]
        color = cmap(idx % 10)
        ax.plot(
            lengths,
            [r.linear_ns / 1e6 for r in rows],
            label=f"{label} linear",
            color=color,
            linewidth=2,
            marker="o",
            markersize=4,
            markerfacecolor="white",
        )
        ax.plot(
            lengths,
            [r.strmap_ns / 1e6 for r in rows],
            label=f"{label} set",
            color=color,
            linewidth=1.5,
            linestyle="--",
        )
    ax.set_xlabel("Collection length", fontsize=12)
    ax.set_ylabel("Elapsed [ms]", fontsize=12)
    ax.set_title(
        f"Linear scan vs set lookup ({iterations} iterations)",
        fontsize=14,
        fontweight="bold",
    )
    ax.grid(True, alpha=0.25, linestyle="--", linewidth=0.7)
    ax.legend(
        loc="center left",
        bbox_to_anchor=(1.02, 0.5),
        frameon=False,
        fontsize=9,
        borderaxespad=0.0,
    )
    _ensure_dir(os.path.dirname(filepath))
    fig.savefig(filepath, dpi=180)
    plt.close(fig)
    return True


def build_timing_plots(results: Sequence[TimingResult], out_dir: str | Path) -> List[Path]:
    """Save one comparison plot per iteration count into ``out_dir``."""
    outputs: List[Path] = []
    for iterations in sorted({r.iterations for r in results}):
        out_path = Path(next_unique_path(Path(out_dir) / f"timing_iter={iterations}.png"))
        if save_timing_comparison_plot(results, str(out_path), iterations):
            outputs.append(out_path)
    logger.info("Generated %d timing plots in %s", len(outputs), out_dir)
    return outputs


def next_unique_path(path: str | Path) -> str:
    """If the file exists, append _1, _2 ... until a free name is found."""
    p = Path(path)
    if not p.exists():
        return str(p)
    stem = p.stem
    suffix = p.suffix
    parent = p.parent
    counter = 1
    while True:
        candidate = parent / f"{stem}_{counter}{suffix}"
        if not candidate.exists():
            return str(candidate)
        counter += 1
