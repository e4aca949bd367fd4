"""Pydantic models and domain types."""
from ordquiz.models.auth import Identity
from ordquiz.models.questions import (
    GenerationFailedResponse,
    ModeOut,
    QuestionOut,
    QuestionsResponse,
)
from ordquiz.models.quiz import GameMode, MODE_LIMITS, MODE_TITLES, QuizItem
from ordquiz.models.scores import (
    LeaderboardResponse,
    ScoreEntry,
    ScoreSubmitRequest,
    ScoreSubmitResponse,
)

__all__ = [
    "GameMode",
    "GenerationFailedResponse",
    "Identity",
    "LeaderboardResponse",
    "MODE_LIMITS",
    "MODE_TITLES",
    "ModeOut",
    "QuestionOut",
    "QuestionsResponse",
    "QuizItem",
    "ScoreEntry",
    "ScoreSubmitRequest",
    "ScoreSubmitResponse",
]
