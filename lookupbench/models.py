"""Core data structures for the lookup benchmark.

This module defines:
    CollectionPair -- two named string collections compared as (A, B).
    BenchmarkPlan  -- immutable grid of lengths, iteration exponents and pairs.
    TimingResult   -- elapsed times of both strategies for one grid cell.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

# Default grid. The moduli and pairs are arbitrary tuning constants kept as-is
# so that runs stay comparable with earlier measurements.
DEFAULT_LENGTHS = tuple(range(10, 101, 10))
DEFAULT_EXPONENTS = (3, 4, 5, 6)
DEFAULT_COLLECTIONS = {"B": 2, "C": 3, "D": 4, "E": 5, "F": 6}
DEFAULT_PAIRS = ("B,C", "B,D", "B,E", "B,F", "C,D", "C,E", "C,F")


@dataclass(frozen=True)
class CollectionPair:
    """Names of the two collections used as ``(A, B)`` in a subset check.

    Attributes:
        first: Name of collection A (the candidate subset).
        second: Name of collection B (the collection searched).
    """

    first: str
    second: str

    @property
    def label(self) -> str:
        return f"{self.first},{self.second}"

    @classmethod
    def parse(cls, label: str) -> "CollectionPair":
        """Parse a ``"X,Y"`` label.

        Raises:
            ValueError: If the label does not name exactly two collections.
        """
        parts = [p.strip() for p in str(label).split(",")]
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid collection pair label: {label!r}")
        return cls(parts[0], parts[1])


@dataclass(frozen=True)
class BenchmarkPlan:
    """Full grid enumerated by the driver.

    Attributes:
        lengths: Candidate counts passed to the generator, one block each.
        exponents: Iteration counts are ``10 ** exponent``.
        collections: Collection name -> skip modulus.
        pairs: Ordered pairs timed for every (length, iteration count).
    """

    lengths: tuple[int, ...] = DEFAULT_LENGTHS
    exponents: tuple[int, ...] = DEFAULT_EXPONENTS
    collections: tuple[tuple[str, int], ...] = tuple(DEFAULT_COLLECTIONS.items())
    pairs: tuple[CollectionPair, ...] = tuple(CollectionPair.parse(p) for p in DEFAULT_PAIRS)

    @property
    def iteration_counts(self) -> list[int]:
        return [10**e for e in self.exponents]

    def cells(self) -> int:
        """Number of timed (length, iterations, pair) combinations."""
        return len(self.lengths) * len(self.exponents) * len(self.pairs)


@dataclass(frozen=True)
class TimingResult:
    """Elapsed wall-clock time of both strategies for one grid cell.

    Times are integer nanoseconds for the whole loop of ``iterations`` calls.
    """

    length: int
    iterations: int
    label: str
    linear_ns: int
    strmap_ns: int

    @property
    def linear_faster(self) -> bool:
        return self.linear_ns < self.strmap_ns

    def to_dict(self):
        d = asdict(self)
        d["linear_faster"] = self.linear_faster
        return d
