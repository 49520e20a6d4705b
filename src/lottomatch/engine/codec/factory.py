"""Codec selection from configuration."""

from __future__ import annotations

from lottomatch.config.schema import MatchConfig

from .base import SelectionCodec
from .bitset import BitsetCodec
from .sorted_sequence import SortedCodec

CODECS: dict[str, type[SelectionCodec]] = {
    BitsetCodec.name: BitsetCodec,
    SortedCodec.name: SortedCodec,
}


def make_codec(config: MatchConfig) -> SelectionCodec:
    """Return the codec named by ``config.representation``."""
    try:
        codec_cls = CODECS[config.representation]
    except KeyError as exc:
        raise ValueError(f"Unknown representation '{config.representation}'.") from exc
    return codec_cls.from_config(config)
