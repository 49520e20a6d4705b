"""Per-match-count winner tallies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class Tally:
    """Winner counts for every match level in ``[min_matches, number_of_picks]``."""

    min_matches: int
    number_of_picks: int
    counts: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not (0 < self.min_matches <= self.number_of_picks):
            raise ValueError("min_matches must be between 1 and number_of_picks.")
        outside = [level for level in self.counts if not self.min_matches <= level <= self.number_of_picks]
        if outside:
            raise ValueError(f"Match levels outside {self.min_matches}~{self.number_of_picks}: {outside}")

        filled = {level: int(self.counts.get(level, 0)) for level in self.levels()}
        object.__setattr__(self, "counts", MappingProxyType(filled))

    @classmethod
    def from_partials(
        cls,
        partials: list[Mapping[int, int]],
        *,
        min_matches: int,
        number_of_picks: int,
    ) -> Tally:
        """Sum worker-local counts per match level."""
        totals: dict[int, int] = {}
        for partial in partials:
            for level, count in partial.items():
                totals[level] = totals.get(level, 0) + count
        return cls(min_matches=min_matches, number_of_picks=number_of_picks, counts=totals)

    def merge(self, other: Tally) -> Tally:
        """Return the per-level sum of two tallies over the same levels."""
        if (self.min_matches, self.number_of_picks) != (other.min_matches, other.number_of_picks):
            raise ValueError("Cannot merge tallies with different match levels.")
        return Tally.from_partials(
            [self.counts, other.counts],
            min_matches=self.min_matches,
            number_of_picks=self.number_of_picks,
        )

    def levels(self) -> list[int]:
        """Match levels from best to worst."""
        return list(range(self.number_of_picks, self.min_matches - 1, -1))

    def winners(self, matches: int) -> int:
        return self.counts.get(matches, 0)

    @property
    def total_winners(self) -> int:
        return sum(self.counts.values())
