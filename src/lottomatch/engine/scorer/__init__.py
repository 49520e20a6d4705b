"""Match scoring primitives."""

from .bitset import bitset_match_count, bitset_match_counts
from .merge import merge_match_count, merge_match_counts

__all__ = [
    "bitset_match_count",
    "bitset_match_counts",
    "merge_match_count",
    "merge_match_counts",
]
