"""Two-pointer merge scoring for sorted selections."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def merge_match_count(a: Sequence[int], b: Sequence[int]) -> int:
    """Count shared numbers of two ascending sequences in one linear pass.

    Both inputs must be strictly ascending; a value repeated on either side
    is counted once per pairing.
    """
    i = j = matches = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            i += 1
        elif a[i] > b[j]:
            j += 1
        else:
            matches += 1
            i += 1
            j += 1
    return matches


def merge_match_counts(target: Sequence[int], block: Sequence[Sequence[int]]) -> np.ndarray:
    """Score each selection of ``block`` against ``target``."""
    return np.fromiter(
        (merge_match_count(target, selection) for selection in block),
        dtype=np.int64,
        count=len(block),
    )
