"""Winner report generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pandas as pd

from .tally import Tally

MATCHES_HEADER = "Numbers matching"
WINNERS_HEADER = "Winners"


@dataclass(frozen=True)
class MatchReport:
    """Combined JSON and plain-text winner report."""

    json_report: dict[str, Any]
    text_report: str


def generate_match_report(
    tally: Tally,
    *,
    elapsed_ms: float | None = None,
    pool_size: int | None = None,
) -> MatchReport:
    """Generate report payloads for API and terminal consumption."""
    winners = [{"matches": level, "winners": tally.winners(level)} for level in tally.levels()]
    report_json: dict[str, Any] = {
        "meta": {
            "number_of_picks": tally.number_of_picks,
            "min_matches": tally.min_matches,
            "total_winners": tally.total_winners,
            "pool_size": pool_size,
            "elapsed_ms": None if elapsed_ms is None else round(elapsed_ms, 3),
        },
        "winners": winners,
    }
    return MatchReport(json_report=report_json, text_report=_to_text(winners))


def tally_to_frame(tally: Tally) -> pd.DataFrame:
    """Return the tally as a ``matches``/``winners`` frame, best level first."""
    return pd.DataFrame(
        {
            "matches": tally.levels(),
            "winners": [tally.winners(level) for level in tally.levels()],
        }
    )


def _to_text(winners: list[dict[str, int]]) -> str:
    lines = [f"{MATCHES_HEADER:<16}\t{WINNERS_HEADER}"]
    lines.extend(f"{row['matches']:<16d}\t{row['winners']}" for row in winners)
    return "\n".join(lines)
