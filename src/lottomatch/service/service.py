"""Match service holding an ingested pool for repeated winning entries."""

from __future__ import annotations

import time
from collections.abc import Sequence
from pathlib import Path

from lottomatch.config import MatchConfig
from lottomatch.data import PickFileLoader
from lottomatch.engine.matcher import ParallelMatcher, generate_match_report


class MatchService:
    """Adapter that loads player picks once and reports winners per entry."""

    def __init__(self, config: MatchConfig | None = None, picks_path: str | Path | None = None) -> None:
        self.config = config or MatchConfig()
        self.matcher = ParallelMatcher.from_config(self.config)
        self.picks_path = Path(picks_path if picks_path is not None else self.config.picks_path)
        if not self.picks_path.exists():
            raise FileNotFoundError(f"Player picks file not found: {self.picks_path}")

        self.ingestion = PickFileLoader(self.matcher.codec).load_file(self.picks_path)

    def match(self, entry: str | Sequence[int]) -> dict[str, object]:
        """Match a winning entry and return the report in API response shape."""
        started = time.perf_counter()
        tally = self.matcher.match_entry(entry, self.ingestion.pool)
        elapsed_ms = (time.perf_counter() - started) * 1000
        report = generate_match_report(tally, elapsed_ms=elapsed_ms, pool_size=self.ingestion.accepted)
        return report.json_report

    def pool_status(self) -> dict[str, object]:
        """Describe the loaded pool and the active game settings."""
        return {
            "picks_path": str(self.picks_path),
            "accepted": self.ingestion.accepted,
            "rejected": len(self.ingestion.rejected),
            "representation": self.config.representation,
            "number_of_picks": self.config.number_of_picks,
            "min_matches": self.config.min_matches,
            "min_pick": self.config.min_pick,
            "max_pick": self.config.max_pick,
            "workers": self.matcher.parallelism,
        }
