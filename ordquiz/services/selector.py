"""Question selection for a play-through."""
import logging
import random
from typing import Iterable

from ordquiz.models.quiz import QuizItem

log = logging.getLogger(__name__)


def valid_items(pool: Iterable[QuizItem]) -> list[QuizItem]:
    """Drop items that break the quiz item invariants, keeping order."""
    kept = []
    dropped = 0
    for item in pool:
        if item.is_valid():
            kept.append(item)
        else:
            dropped += 1
    if dropped:
        log.debug("Dropped %d invalid questions", dropped)
    return kept


def select_questions(
    pool: Iterable[QuizItem],
    limit: int | None,
    rng: random.Random | None = None,
) -> list[QuizItem]:
    """
    Pick a random subset of valid questions.

    Args:
        pool: Candidate items, possibly containing malformed entries
        limit: Maximum number of items, None for no limit
        rng: Random source (module-level generator when omitted)

    Returns:
        A uniformly shuffled list of at most ``limit`` valid items.
    """
    selected = valid_items(pool)
    # Fisher-Yates, every permutation equally likely
    (rng or random).shuffle(selected)
    if limit is not None:
        selected = selected[: max(limit, 0)]
    return selected
