"""Parallel matching, tallies and winner reports."""

from .parallel import ParallelMatcher, TargetParseError, available_cpus, partition
from .report import MatchReport, generate_match_report, tally_to_frame
from .tally import Tally

__all__ = [
    "MatchReport",
    "ParallelMatcher",
    "Tally",
    "TargetParseError",
    "available_cpus",
    "generate_match_report",
    "partition",
    "tally_to_frame",
]
