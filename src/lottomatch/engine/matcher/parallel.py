"""Chunked parallel matching of one target against a pool of selections."""

from __future__ import annotations

import math
import os
import time
from collections.abc import Sequence
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import numpy as np
from loguru import logger

from lottomatch.config.schema import ExecutorKind, MatchConfig
from lottomatch.engine.codec import SelectionCodec, SelectionError, make_codec

from .tally import Tally

EXECUTORS: dict[str, type[Executor]] = {
    "thread": ThreadPoolExecutor,
    "process": ProcessPoolExecutor,
}


class TargetParseError(ValueError):
    """Raised when the winning entry is not a valid selection."""


@dataclass(frozen=True)
class _ChunkTask:
    codec: SelectionCodec
    target: Any
    chunk: Any
    min_matches: int


def available_cpus() -> int:
    """Return the number of CPUs this process may run on."""
    if hasattr(os, "sched_getaffinity"):
        return max(1, len(os.sched_getaffinity(0)))
    return max(1, os.cpu_count() or 1)


def partition(length: int, workers: int) -> list[tuple[int, int]]:
    """Split ``range(length)`` into at most ``workers`` contiguous non-empty spans."""
    if workers <= 0:
        raise ValueError("workers must be > 0.")
    if length <= 0:
        return []

    chunk_size = math.ceil(length / workers)
    return [(start, min(start + chunk_size, length)) for start in range(0, length, chunk_size)]


def _score_chunk(task: _ChunkTask) -> dict[int, int]:
    scores = task.codec.score_chunk(task.target, task.chunk)
    counts = np.bincount(scores, minlength=task.codec.number_of_picks + 1)
    return {
        level: int(counts[level])
        for level in range(task.min_matches, len(counts))
        if counts[level]
    }


class ParallelMatcher:
    """Score a target against every pool entry and tally winners per match level."""

    def __init__(
        self,
        codec: SelectionCodec,
        *,
        min_matches: int,
        workers: int | None = None,
        executor: ExecutorKind = "thread",
    ) -> None:
        if not (0 < min_matches <= codec.number_of_picks):
            raise ValueError("min_matches must be between 1 and number_of_picks.")
        if workers is not None and workers <= 0:
            raise ValueError("workers must be > 0.")
        if executor not in EXECUTORS:
            raise ValueError(f"executor must be one of {sorted(EXECUTORS)}.")

        self.codec = codec
        self.min_matches = min_matches
        self.workers = workers
        self.executor = executor

    @classmethod
    def from_config(cls, config: MatchConfig) -> ParallelMatcher:
        return cls(
            make_codec(config),
            min_matches=config.min_matches,
            workers=config.workers,
            executor=config.executor,
        )

    @property
    def parallelism(self) -> int:
        return self.workers if self.workers is not None else available_cpus()

    def parse_target(self, entry: str | Sequence[int]) -> Any:
        """Encode the winning entry, wrapping codec failures in ``TargetParseError``."""
        try:
            if isinstance(entry, str):
                return self.codec.parse(entry)
            return self.codec.encode(entry)
        except SelectionError as exc:
            raise TargetParseError(f"Invalid lottery pick entry: {exc}") from exc

    def match_entry(self, entry: str | Sequence[int], pool: Any) -> Tally:
        """Parse the winning entry and match it against ``pool``."""
        return self.match(self.parse_target(entry), pool)

    def match(self, target: Any, pool: Any) -> Tally:
        """Return winner counts of ``pool`` against an encoded ``target``."""
        started = time.perf_counter()
        spans = partition(len(pool), self.parallelism)
        tasks = [
            _ChunkTask(
                codec=self.codec,
                target=target,
                chunk=pool[start:end],
                min_matches=self.min_matches,
            )
            for start, end in spans
        ]

        if len(tasks) <= 1:
            partials = [_score_chunk(task) for task in tasks]
        else:
            with EXECUTORS[self.executor](max_workers=len(tasks)) as executor:
                partials = list(executor.map(_score_chunk, tasks))

        tally = Tally.from_partials(
            partials,
            min_matches=self.min_matches,
            number_of_picks=self.codec.number_of_picks,
        )
        logger.debug(
            "Matched {} picks in {} chunk(s) on {} executor in {:.1f}ms",
            len(pool),
            len(tasks),
            self.executor,
            (time.perf_counter() - started) * 1000,
        )
        return tally
