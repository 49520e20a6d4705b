"""FastAPI app for matching winning entries against the loaded pool."""

from __future__ import annotations

import os
from functools import lru_cache

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from lottomatch import __version__
from lottomatch.config import load_env_config
from lottomatch.data import IngestionError
from lottomatch.engine.matcher import TargetParseError

from .service import MatchService


class MatchRequest(BaseModel):
    """Request payload for the match endpoint."""

    numbers: list[int] = Field(min_length=1)


class WinnerLevel(BaseModel):
    """Winner count for one match level."""

    matches: int = Field(ge=0)
    winners: int = Field(ge=0)


class MatchMeta(BaseModel):
    """Metadata for match response."""

    number_of_picks: int
    min_matches: int
    total_winners: int = Field(ge=0)
    pool_size: int | None = None
    elapsed_ms: float | None = None


class MatchResponse(BaseModel):
    """Response payload for the match endpoint."""

    meta: MatchMeta
    winners: list[WinnerLevel]


app = FastAPI(title="lottomatch", version=__version__)


def get_cors_origins() -> list[str]:
    """Resolve allowed CORS origins from env."""

    raw = os.getenv("CORS_ALLOW_ORIGINS", "*").strip()
    if raw == "*":
        return ["*"]
    return [item.strip() for item in raw.split(",") if item.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_service() -> MatchService:
    """Return singleton match service built from environment settings."""

    return MatchService(config=load_env_config())


@app.post("/api/match", response_model=MatchResponse)
def match(payload: MatchRequest) -> MatchResponse:
    """Count winners per match level for a winning entry."""

    try:
        result = get_service().match(payload.numbers)
    except TargetParseError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (FileNotFoundError, IngestionError) as exc:
        raise HTTPException(status_code=500, detail=f"Player picks unavailable: {exc}") from exc
    return MatchResponse.model_validate(result)


@app.get("/api/pool-status")
def pool_status() -> dict[str, object]:
    """Inspect the loaded pick pool."""

    try:
        status = get_service().pool_status()
    except (FileNotFoundError, IngestionError) as exc:
        raise HTTPException(status_code=500, detail=f"Player picks unavailable: {exc}") from exc
    return {"pool": status}
