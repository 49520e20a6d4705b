"""Selection codecs."""

from .base import (
    DuplicateNumberError,
    NotANumberError,
    OutOfRangeError,
    SelectionCodec,
    SelectionError,
    WrongFieldCountError,
)
from .bitset import BitsetCodec
from .factory import make_codec
from .sorted_sequence import SortedCodec

__all__ = [
    "BitsetCodec",
    "DuplicateNumberError",
    "NotANumberError",
    "OutOfRangeError",
    "SelectionCodec",
    "SelectionError",
    "SortedCodec",
    "WrongFieldCountError",
    "make_codec",
]
