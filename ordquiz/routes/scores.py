"""Score and leaderboard endpoints."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session as DbSession

from ordquiz.config import LEADERBOARD_SIZE
from ordquiz.database import get_db
from ordquiz.dependencies import get_optional_identity
from ordquiz.errors import PersistenceError, UpstreamUnavailable
from ordquiz.models import (
    GameMode,
    Identity,
    LeaderboardResponse,
    ScoreSubmitRequest,
    ScoreSubmitResponse,
)
from ordquiz.services.score_service import get_leaderboard, submit_score

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/scores", tags=["scores"])


@router.post("", response_model=ScoreSubmitResponse)
def post_score(
    payload: ScoreSubmitRequest,
    db: Annotated[DbSession, Depends(get_db)],
    identity: Annotated[Identity | None, Depends(get_optional_identity)],
) -> object:
    """Record the result of a play-through."""
    try:
        submit_score(db, payload, identity)
    except PersistenceError as exc:
        log.error(f"Score submission error: {exc}")
        return JSONResponse(status_code=500, content={"error": "Failed to save score"})
    return {"success": True}


@router.get("", response_model=LeaderboardResponse)
def get_scores(
    db: Annotated[DbSession, Depends(get_db)],
    mode: GameMode = Query(GameMode.MARATON),
) -> object:
    """Top scores for one mode."""
    try:
        records = get_leaderboard(db, mode, LEADERBOARD_SIZE)
    except UpstreamUnavailable as exc:
        log.error(f"Leaderboard error: {exc}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch leaderboard"})
    return {"leaderboard": [record.to_dict() for record in records]}
