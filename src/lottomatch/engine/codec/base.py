"""Base codec and validation errors for lottery selections."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

import numpy as np

from lottomatch.config.schema import MatchConfig

SelectionT = TypeVar("SelectionT")

# ASCII digits only; int() alone also takes underscores and non-ASCII digits.
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+", re.ASCII)


class SelectionError(ValueError):
    """Raised when an entry is not a valid selection."""


class WrongFieldCountError(SelectionError):
    """Raised when an entry does not hold exactly ``number_of_picks`` numbers."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} numbers got {actual}")
        self.expected = expected
        self.actual = actual


class NotANumberError(SelectionError):
    """Raised when a token cannot be parsed as an integer."""

    def __init__(self, token: str) -> None:
        super().__init__(f"error converting {token!r} to integer")
        self.token = token


class OutOfRangeError(SelectionError):
    """Raised when a number lies outside ``[min_pick, max_pick]``."""

    def __init__(self, number: int, min_pick: int, max_pick: int) -> None:
        super().__init__(f"number {number} out of lottery range {min_pick}~{max_pick}")
        self.number = number
        self.min_pick = min_pick
        self.max_pick = max_pick


class DuplicateNumberError(SelectionError):
    """Raised when a number appears more than once in one entry."""

    def __init__(self, number: int) -> None:
        super().__init__(f"number {number} picked more than once")
        self.number = number


class SelectionCodec(ABC, Generic[SelectionT]):
    """Validate raw picks and convert them to a comparable representation."""

    name: str

    def __init__(self, number_of_picks: int, min_pick: int, max_pick: int) -> None:
        if number_of_picks <= 0:
            raise ValueError("number_of_picks must be > 0.")
        if max_pick < min_pick:
            raise ValueError("max_pick must be >= min_pick.")
        if number_of_picks > max_pick - min_pick + 1:
            raise ValueError("number_of_picks cannot exceed the size of the number range.")
        self.number_of_picks = number_of_picks
        self.min_pick = min_pick
        self.max_pick = max_pick

    @classmethod
    def from_config(cls, config: MatchConfig) -> SelectionCodec[SelectionT]:
        return cls(
            number_of_picks=config.number_of_picks,
            min_pick=config.min_pick,
            max_pick=config.max_pick,
        )

    def parse(self, entry: str) -> SelectionT:
        """Parse a whitespace separated entry into a selection."""
        tokens = entry.split()
        if len(tokens) != self.number_of_picks:
            raise WrongFieldCountError(self.number_of_picks, len(tokens))

        numbers: list[int] = []
        for token in tokens:
            if not INTEGER_TOKEN.fullmatch(token):
                raise NotANumberError(token)
            numbers.append(int(token))
        return self.encode(numbers)

    def encode(self, numbers: Sequence[int]) -> SelectionT:
        """Validate numbers and encode them."""
        if len(numbers) != self.number_of_picks:
            raise WrongFieldCountError(self.number_of_picks, len(numbers))

        for number in numbers:
            if number < self.min_pick or number > self.max_pick:
                raise OutOfRangeError(number, self.min_pick, self.max_pick)

        seen: set[int] = set()
        for number in numbers:
            if number in seen:
                raise DuplicateNumberError(number)
            seen.add(number)
        return self._encode(numbers)

    @abstractmethod
    def _encode(self, numbers: Sequence[int]) -> SelectionT:
        """Encode numbers already known to be valid and distinct."""

    @abstractmethod
    def decode(self, selection: SelectionT) -> tuple[int, ...]:
        """Return the ascending numbers held by a selection."""

    @abstractmethod
    def build_pool(self, selections: Sequence[SelectionT]) -> Any:
        """Pack selections into a read-only, sliceable pool."""

    @abstractmethod
    def score(self, a: SelectionT, b: SelectionT) -> int:
        """Return how many numbers two selections share."""

    @abstractmethod
    def score_chunk(self, target: SelectionT, chunk: Any) -> np.ndarray:
        """Return the match count of every pool entry in ``chunk``."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(number_of_picks={self.number_of_picks}, "
            f"min_pick={self.min_pick}, max_pick={self.max_pick})"
        )
