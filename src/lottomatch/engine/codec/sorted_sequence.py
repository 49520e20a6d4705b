"""Sorted-tuple codec with no range capacity limit."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from lottomatch.engine.scorer import merge_match_count, merge_match_counts

from .base import SelectionCodec

SortedSelection = tuple[int, ...]


class SortedCodec(SelectionCodec[SortedSelection]):
    """Encode a selection as a strictly ascending tuple."""

    name = "sorted"

    def _encode(self, numbers: Sequence[int]) -> SortedSelection:
        return tuple(sorted(int(number) for number in numbers))

    def decode(self, selection: SortedSelection) -> tuple[int, ...]:
        return tuple(selection)

    def build_pool(self, selections: Sequence[SortedSelection]) -> tuple[SortedSelection, ...]:
        return tuple(selections)

    def score(self, a: SortedSelection, b: SortedSelection) -> int:
        return merge_match_count(a, b)

    def score_chunk(self, target: SortedSelection, chunk: Sequence[SortedSelection]) -> np.ndarray:
        return merge_match_counts(target, chunk)
