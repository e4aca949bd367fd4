"""Numeric helpers for limits and scores."""
import math

UNBOUNDED_TOKEN = "all"


def parse_limit(raw: object, default: int) -> int | None:
    """Parse a size limit from a query value.

    Returns None for the unbounded token and ``default`` for anything
    missing, non-numeric or below 1.
    """
    if raw is None:
        return default
    text = str(raw).strip().lower()
    if text == UNBOUNDED_TOKEN:
        return None
    try:
        value = int(text)
    except ValueError:
        return default
    if value < 1:
        return default
    return value


def percentage_of(score: int, total: int) -> float:
    """Calculate percentage of correct answers."""
    if total <= 0:
        return 0.0
    return (score / total) * 100


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))
