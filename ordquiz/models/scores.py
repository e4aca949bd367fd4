"""Score-related Pydantic models."""
from pydantic import BaseModel, Field, model_validator

from ordquiz.models.quiz import GameMode


class ScoreSubmitRequest(BaseModel):
    """Body of a score submission."""

    score: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    time: float = 0
    percentage: float | None = None  # client hint, recomputed server-side
    guestName: str | None = Field(None, max_length=100)
    mode: GameMode = GameMode.MARATON

    @model_validator(mode="after")
    def check_score_within_total(self) -> "ScoreSubmitRequest":
        if self.score > self.total:
            raise ValueError("score cannot exceed total")
        return self


class ScoreSubmitResponse(BaseModel):
    """Acknowledgement of a stored score."""

    success: bool = True


class ScoreEntry(BaseModel):
    """One leaderboard row."""

    id: int
    userId: str
    userName: str
    userImage: str | None = None
    score: int
    total: int
    percentage: float
    time: float
    mode: GameMode
    createdAt: str | None = None


class LeaderboardResponse(BaseModel):
    """Ranked scores for one mode."""

    leaderboard: list[ScoreEntry]
