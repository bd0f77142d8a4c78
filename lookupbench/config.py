"""YAML configuration for the benchmark driver.

Every key is optional. Without a config file the driver runs the default
grid from ``lookupbench.models`` and writes nothing but the stdout report.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import yaml

from lookupbench.models import (
    DEFAULT_COLLECTIONS,
    DEFAULT_EXPONENTS,
    DEFAULT_LENGTHS,
    DEFAULT_PAIRS,
    BenchmarkPlan,
    CollectionPair,
)

@dataclass(frozen=True)
class OutputOptions:
    """Optional artefacts written next to the stdout report."""

    enabled: bool = False
    results_dir: str = "results/benchmarks"
    plots: bool = True


def load_config(config_file: str | None = None) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_file: Path to the YAML file. When omitted nothing is read.

    Returns:
        Parsed mapping, ``{}`` when no file was given.

    Raises:
        FileNotFoundError: If an explicit ``config_file`` does not exist.
        ValueError: If the document is not a mapping.
    """
    if config_file is None:
        return {}
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Config root must be a mapping: {config_file}")
    return config


def _section(config: dict, name: str) -> dict:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a mapping")
    return section


def _int_list(section: dict, key: str, default, minimum: int) -> tuple[int, ...]:
    values = section.get(key, default)
    if not values:
        raise ValueError(f"benchmark.{key} must be a non-empty list")
    try:
        ints = tuple(int(v) for v in values)
    except (TypeError, ValueError) as e:
        raise ValueError(f"benchmark.{key} must contain integers: {values!r}") from e
    bad = [v for v in ints if v < minimum]
    if bad:
        raise ValueError(f"benchmark.{key} values must be >= {minimum}: {bad}")
    return ints


def plan_from_config(config: dict) -> BenchmarkPlan:
    """Build the benchmark grid from the ``benchmark`` section.

    Raises:
        ValueError: On empty lists, out-of-range numbers or pairs naming
            undeclared collections.
    """
    section = _section(config, "benchmark")
    lengths = _int_list(section, "lengths", DEFAULT_LENGTHS, 0)
    exponents = _int_list(section, "exponents", DEFAULT_EXPONENTS, 0)

    raw_collections = section.get("collections", DEFAULT_COLLECTIONS)
    if not isinstance(raw_collections, dict) or not raw_collections:
        raise ValueError("benchmark.collections must be a non-empty mapping name -> modulus")
    collections: list[tuple[str, int]] = []
    for name, skip in raw_collections.items():
        try:
            skip_int = int(skip)
        except (TypeError, ValueError) as e:
            raise ValueError(f"benchmark.collections.{name} must be an integer") from e
        if skip_int < 1:
            raise ValueError(f"benchmark.collections.{name} must be >= 1, got {skip_int}")
        collections.append((str(name), skip_int))

    raw_pairs = section.get("pairs", DEFAULT_PAIRS)
    if not raw_pairs:
        raise ValueError("benchmark.pairs must be a non-empty list")
    names = {name for name, _ in collections}
    pairs = []
    for label in raw_pairs:
        pair = CollectionPair.parse(label)
        missing = [n for n in (pair.first, pair.second) if n not in names]
        if missing:
            raise ValueError(f"benchmark.pairs entry {label!r} names unknown collections {missing}")
        pairs.append(pair)

    return BenchmarkPlan(
        lengths=lengths,
        exponents=exponents,
        collections=tuple(collections),
        pairs=tuple(pairs),
    )


def output_from_config(config: dict) -> OutputOptions:
    section = _section(config, "output")
    return OutputOptions(
        enabled=bool(section.get("enabled", False)),
        results_dir=str(section.get("results_dir", OutputOptions.results_dir)),
        plots=bool(section.get("plots", True)),
    )
