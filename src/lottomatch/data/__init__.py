"""Player pick ingestion."""

from .loader import IngestionError, IngestionResult, PickFileLoader, RejectedEntry

__all__ = [
    "IngestionError",
    "IngestionResult",
    "PickFileLoader",
    "RejectedEntry",
]
