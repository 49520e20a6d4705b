"""Match service and HTTP API."""

from .service import MatchService

__all__ = ["MatchService"]
