"""Pydantic schema for match engine configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

BITSET_CAPACITY = 128

Representation = Literal["bitset", "sorted"]
ExecutorKind = Literal["thread", "process"]


class MatchConfig(BaseModel):
    """Validated, immutable lottery configuration with defaults."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    number_of_picks: int = Field(default=5, gt=0)
    min_matches: int = Field(default=2, gt=0)
    min_pick: int = Field(default=1, ge=0)
    max_pick: int = Field(default=90, ge=0)

    picks_path: str = "10m-v2.txt"
    workers: int | None = Field(default=None, ge=1)
    representation: Representation = "bitset"
    executor: ExecutorKind = "thread"

    @model_validator(mode="after")
    def _check_ranges(self) -> MatchConfig:
        if self.max_pick < self.min_pick:
            raise ValueError("max_pick must be >= min_pick.")
        if self.min_matches > self.number_of_picks:
            raise ValueError("min_matches must be <= number_of_picks.")
        if self.number_of_picks > self.span:
            raise ValueError(
                f"number_of_picks={self.number_of_picks} exceeds the {self.span} numbers "
                f"available in {self.min_pick}~{self.max_pick}."
            )
        if self.representation == "bitset" and self.span > BITSET_CAPACITY:
            raise ValueError(
                f"bitset representation supports at most {BITSET_CAPACITY} numbers, "
                f"got {self.span}. Use representation='sorted' for wider ranges."
            )
        return self

    @property
    def span(self) -> int:
        """Count of distinct valid numbers."""
        return self.max_pick - self.min_pick + 1
