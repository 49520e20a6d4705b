"""Two-word bitset codec for ranges of up to 128 numbers."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from lottomatch.config.schema import BITSET_CAPACITY
from lottomatch.engine.scorer import bitset_match_count, bitset_match_counts

from .base import SelectionCodec

WORD_BITS = 64

BitsetSelection = tuple[int, int]


class BitsetCodec(SelectionCodec[BitsetSelection]):
    """Encode a selection as ``(low, high)`` 64-bit words.

    Number ``n`` occupies slot ``n - min_pick``; slots 0-63 live in the low
    word and slots 64-127 in the high word.
    """

    name = "bitset"

    def __init__(self, number_of_picks: int, min_pick: int, max_pick: int) -> None:
        super().__init__(number_of_picks, min_pick, max_pick)
        if max_pick - min_pick + 1 > BITSET_CAPACITY:
            raise ValueError(f"bitset codec supports at most {BITSET_CAPACITY} numbers.")

    def _encode(self, numbers: Sequence[int]) -> BitsetSelection:
        low = high = 0
        for number in numbers:
            slot = int(number) - self.min_pick
            if slot < WORD_BITS:
                low |= 1 << slot
            else:
                high |= 1 << (slot - WORD_BITS)
        return (low, high)

    def decode(self, selection: BitsetSelection) -> tuple[int, ...]:
        numbers: list[int] = []
        for word_index, word in enumerate(selection):
            offset = self.min_pick + word_index * WORD_BITS
            while word:
                lowest = word & -word
                numbers.append(offset + lowest.bit_length() - 1)
                word ^= lowest
        return tuple(numbers)

    def build_pool(self, selections: Sequence[BitsetSelection]) -> np.ndarray:
        pool = np.array(selections, dtype=np.uint64).reshape(-1, 2)
        pool.flags.writeable = False
        return pool

    def score(self, a: BitsetSelection, b: BitsetSelection) -> int:
        return bitset_match_count(a, b)

    def score_chunk(self, target: BitsetSelection, chunk: np.ndarray) -> np.ndarray:
        return bitset_match_counts(target, chunk)
