#!/usr/bin/env python3
"""Write a synthetic player picks file of uniformly random valid entries."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
import sys

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lottomatch.config import MatchConfig


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random player picks for benchmarking.")
    parser.add_argument("--output", default="10m-v2.txt", help="Destination picks file.")
    parser.add_argument("--count", type=int, default=10_000_000, help="Number of entries to write.")
    parser.add_argument("--number-of-picks", type=int, default=5)
    parser.add_argument("--min-pick", type=int, default=1)
    parser.add_argument("--max-pick", type=int, default=90)
    parser.add_argument("--chunk-size", type=int, default=200_000, help="Rows generated per batch.")
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args()


def generate_chunk(
    rng: np.random.Generator,
    *,
    rows: int,
    number_of_picks: int,
    min_pick: int,
    max_pick: int,
) -> np.ndarray:
    """Return ``rows`` sorted selections of distinct numbers."""
    span = max_pick - min_pick + 1
    scores = rng.random((rows, span))
    picked = np.argpartition(scores, -number_of_picks, axis=1)[:, -number_of_picks:]
    picked.sort(axis=1)
    return picked + min_pick


def main() -> int:
    args = parse_args()
    if args.count <= 0:
        raise SystemExit("--count must be > 0.")
    if args.chunk_size <= 0:
        raise SystemExit("--chunk-size must be > 0.")
    config = MatchConfig(
        number_of_picks=args.number_of_picks,
        min_matches=1,
        min_pick=args.min_pick,
        max_pick=args.max_pick,
        representation="sorted",
    )

    rng = np.random.default_rng(args.seed)
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as file:
        for chunk_idx in range(math.ceil(args.count / args.chunk_size)):
            rows = min(args.chunk_size, args.count - chunk_idx * args.chunk_size)
            chunk = generate_chunk(
                rng,
                rows=rows,
                number_of_picks=config.number_of_picks,
                min_pick=config.min_pick,
                max_pick=config.max_pick,
            )
            file.writelines(" ".join(map(str, row)) + "\n" for row in chunk.tolist())

    print(f"picks path     : {output_path}")
    print(f"entries        : {args.count}")
    print(f"numbers/entry  : {config.number_of_picks}")
    print(f"range          : {config.min_pick}~{config.max_pick}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
