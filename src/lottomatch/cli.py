"""Interactive command line: load player picks once, then match winning entries."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Iterable, Sequence
from typing import TextIO

from dotenv import find_dotenv, load_dotenv
from loguru import logger
from pydantic import ValidationError

from lottomatch.config import ConfigLoadError, MatchConfig, load_config, load_env_config
from lottomatch.data import IngestionError, IngestionResult, PickFileLoader
from lottomatch.engine.matcher import ParallelMatcher, TargetParseError, generate_match_report

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count lottery winners per match level.")
    parser.add_argument("--config", default=None, help="YAML/JSON config file. Defaults to environment settings.")
    parser.add_argument("--env-file", default=None, help="Dotenv file to load before reading the environment.")
    parser.add_argument("--picks", default=None, help="Player picks file, one entry per line.")
    parser.add_argument("--workers", type=int, default=None, help="Parallel workers per match run.")
    parser.add_argument("--representation", choices=["bitset", "sorted"], default=None)
    parser.add_argument("--executor", choices=["thread", "process"], default=None)
    parser.add_argument("--log-level", default="INFO", help="Console log level.")
    parser.add_argument("--log-file", default=None, help="Optional rotating log file.")
    return parser.parse_args(argv)


def configure_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Send logs to stderr so stdout carries only match reports."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
        )


def resolve_config(args: argparse.Namespace) -> MatchConfig:
    """Load base config from file or environment, then apply CLI overrides."""
    config = load_config(args.config) if args.config else load_env_config()
    overrides = {
        key: value
        for key, value in {
            "picks_path": args.picks,
            "workers": args.workers,
            "representation": args.representation,
            "executor": args.executor,
        }.items()
        if value is not None
    }
    if not overrides:
        return config
    return MatchConfig.model_validate({**config.model_dump(), **overrides})


def run_prompt_loop(
    matcher: ParallelMatcher,
    ingestion: IngestionResult,
    entries: Iterable[str],
    out: TextIO | None = None,
) -> int:
    """Match every entry read from ``entries`` and print its report."""
    stream = out or sys.stdout
    print("\nEnter lottery picks", file=stream)

    for entry in entries:
        try:
            target = matcher.parse_target(entry)
        except TargetParseError as exc:
            print(exc, file=stream)
            print(f"Enter {matcher.codec.number_of_picks} lottery picks", file=stream)
            continue

        started = time.perf_counter()
        tally = matcher.match(target, ingestion.pool)
        elapsed_ms = (time.perf_counter() - started) * 1000
        report = generate_match_report(tally, elapsed_ms=elapsed_ms, pool_size=ingestion.accepted)

        print(f"\nMatching lottery picks took {round(elapsed_ms)}ms", file=stream)
        print(f"\n{report.text_report}", file=stream)
        print("\nEnter lottery picks", file=stream)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    env_path = args.env_file or find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)
    configure_logging(args.log_level, args.log_file)

    print("Lottery pick matcher. Press CTRL+C to exit")
    try:
        config = resolve_config(args)
    except (ConfigLoadError, FileNotFoundError, ValidationError) as exc:
        print(f"Error loading configuration: {exc}", file=sys.stderr)
        return 2

    matcher = ParallelMatcher.from_config(config)
    try:
        ingestion = PickFileLoader(matcher.codec).load_file(config.picks_path)
    except IngestionError as exc:
        print(f"Error processing player picks: {exc}", file=sys.stderr)
        return 1

    print(f"Loaded {ingestion.accepted} player picks ({len(ingestion.rejected)} ignored)")
    try:
        return run_prompt_loop(matcher, ingestion, sys.stdin)
    except KeyboardInterrupt:
        return 0
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading lottery picks: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
