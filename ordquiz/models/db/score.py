"""
Score record database model for the leaderboard.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import sqlalchemy as sa
from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ordquiz.database import Base

GUEST_USER_ID = "guest"
ANONYMOUS_NAME = "Anonym"


class ScoreRecord(Base):
    """
    One finished or abandoned play-through.
    Rows are written once and never updated.
    """

    __tablename__ = "scores"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    # Who played
    user_id: Mapped[str] = mapped_column(
        String(255), default=GUEST_USER_ID, nullable=False, index=True
    )
    user_name: Mapped[str] = mapped_column(
        String(100), default=ANONYMOUS_NAME, nullable=False
    )
    user_image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    # Result
    score: Mapped[int] = mapped_column(default=0, nullable=False)
    total: Mapped[int] = mapped_column(default=0, nullable=False)
    percentage: Mapped[float] = mapped_column(sa.Float, default=0.0, nullable=False)
    time: Mapped[float] = mapped_column(sa.Float, default=0.0, nullable=False)
    mode: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_scores_mode_percentage", "mode", "percentage"),
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the leaderboard response."""
        return {
            "id": self.id,
            "userId": self.user_id,
            "userName": self.user_name,
            "userImage": self.user_image,
            "score": self.score,
            "total": self.total,
            "percentage": self.percentage,
            "time": self.time,
            "mode": self.mode,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return (
            f"<ScoreRecord(id={self.id}, user_name='{self.user_name}', "
            f"mode='{self.mode}', score={self.score}/{self.total})>"
        )
