"""Service layer for scores and the leaderboard."""
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session as DbSession

from ordquiz.errors import PersistenceError, UpstreamUnavailable
from ordquiz.models.auth import Identity
from ordquiz.models.db.score import ANONYMOUS_NAME, GUEST_USER_ID, ScoreRecord
from ordquiz.models.quiz import GameMode
from ordquiz.models.scores import ScoreSubmitRequest
from ordquiz.utils import percentage_of

log = logging.getLogger(__name__)


def resolve_player(
    identity: Identity | None, guest_name: str | None
) -> tuple[str, str, str | None]:
    """
    Work out who a score belongs to.

    Signed-in profile first, then the guest display name, then "Anonym".

    Returns:
        Tuple of (user_id, user_name, user_image)
    """
    guest = guest_name.strip() if isinstance(guest_name, str) else ""
    if identity is not None:
        name = identity.display_name or guest or ANONYMOUS_NAME
        return identity.user_id, name, identity.image
    return GUEST_USER_ID, guest or ANONYMOUS_NAME, None


def submit_score(
    db: DbSession,
    payload: ScoreSubmitRequest,
    identity: Identity | None = None,
) -> ScoreRecord:
    """
    Store one finished play-through.

    The percentage is always derived from score and total; the value the
    client sent is only logged when it disagrees.
    """
    percentage = percentage_of(payload.score, payload.total)
    if payload.percentage is not None and abs(payload.percentage - percentage) > 0.01:
        log.warning(
            f"Ignoring client percentage {payload.percentage:.2f}, "
            f"stored {percentage:.2f} for {payload.score}/{payload.total}"
        )

    user_id, user_name, user_image = resolve_player(identity, payload.guestName)
    record = ScoreRecord(
        user_id=user_id,
        user_name=user_name,
        user_image=user_image,
        score=payload.score,
        total=payload.total,
        percentage=percentage,
        time=payload.time or 0,
        mode=payload.mode.value,
    )

    try:
        db.add(record)
        db.commit()
        db.refresh(record)
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceError(f"Failed to save score: {exc}") from exc

    log.info(f"Saved score {record.score}/{record.total} for {user_name} ({record.mode})")
    return record


def get_leaderboard(
    db: DbSession,
    mode: GameMode,
    top_n: int = 20,
) -> list[ScoreRecord]:
    """
    Get the best scores for a mode.

    Filters by mode before limiting. Ties on percentage go to the longer
    run, then to the earlier submission.
    """
    query = (
        select(ScoreRecord)
        .where(ScoreRecord.mode == mode.value)
        .order_by(
            ScoreRecord.percentage.desc(),
            ScoreRecord.total.desc(),
            ScoreRecord.created_at.asc(),
            ScoreRecord.id.asc(),
        )
        .limit(top_n)
    )
    try:
        return list(db.execute(query).scalars().all())
    except SQLAlchemyError as exc:
        raise UpstreamUnavailable(f"Failed to fetch leaderboard: {exc}") from exc
