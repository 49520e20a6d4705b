"""Line-oriented loader for player pick files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from lottomatch.engine.codec import SelectionCodec, SelectionError


class IngestionError(RuntimeError):
    """Raised when the pick source cannot be read."""


@dataclass(frozen=True)
class RejectedEntry:
    """One skipped input line."""

    line_number: int
    entry: str
    error: SelectionError

    @property
    def reason(self) -> str:
        return str(self.error)


@dataclass(frozen=True)
class IngestionResult:
    """Encoded pool plus the lines that were skipped."""

    pool: Any
    accepted: int
    rejected: tuple[RejectedEntry, ...]


class PickFileLoader:
    """Parse player picks, one selection per line, into a codec pool."""

    def __init__(self, codec: SelectionCodec, encoding: str = "utf-8") -> None:
        self.codec = codec
        self.encoding = encoding

    def load_file(self, path: str | Path) -> IngestionResult:
        """Read and encode every line of a pick file."""
        picks_path = Path(path)
        try:
            with picks_path.open("r", encoding=self.encoding) as file:
                result = self.load_lines(file)
        except (OSError, UnicodeDecodeError) as exc:
            raise IngestionError(f"Cannot read player picks from {picks_path}: {exc}") from exc

        logger.info(
            "Loaded {} player picks from {} ({} ignored)",
            result.accepted,
            picks_path,
            len(result.rejected),
        )
        return result

    def load_lines(self, lines: Iterable[str]) -> IngestionResult:
        """Encode lines in order, skipping the ones that fail validation."""
        selections = []
        rejected: list[RejectedEntry] = []

        for line_number, line in enumerate(lines, start=1):
            entry = line.rstrip("\r\n")
            try:
                selections.append(self.codec.parse(entry))
            except SelectionError as exc:
                logger.warning("Player {} ignored: {}", line_number, exc)
                rejected.append(RejectedEntry(line_number=line_number, entry=entry, error=exc))

        return IngestionResult(
            pool=self.codec.build_pool(selections),
            accepted=len(selections),
            rejected=tuple(rejected),
        )
