"""Database models."""
from ordquiz.models.db.score import ANONYMOUS_NAME, GUEST_USER_ID, ScoreRecord

__all__ = [
    "ANONYMOUS_NAME",
    "GUEST_USER_ID",
    "ScoreRecord",
]
