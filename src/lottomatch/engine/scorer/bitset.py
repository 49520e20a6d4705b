"""Popcount scoring for two-word bitset selections."""

from __future__ import annotations

import numpy as np


def bitset_match_count(a: tuple[int, int], b: tuple[int, int]) -> int:
    """Return the number of shared numbers between two bitset selections."""
    return (a[0] & b[0]).bit_count() + (a[1] & b[1]).bit_count()


def bitset_match_counts(target: tuple[int, int], block: np.ndarray) -> np.ndarray:
    """Score every row of an ``(N, 2)`` uint64 block against ``target``."""
    if block.size == 0:
        return np.zeros(0, dtype=np.int64)

    mask = np.array(target, dtype=np.uint64)
    shared = np.bitwise_count(np.bitwise_and(block, mask))
    return shared.sum(axis=1, dtype=np.int64)
