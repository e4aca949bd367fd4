"""
Quiz session state machine.

One play-through, driven by discrete actions from a renderer (terminal,
browser bridge, tests). The renderer reads the public attributes and calls
start / select_option / advance / finish_early; it never mutates state.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from ordquiz.errors import (
    GenerationParseError,
    InvalidTransition,
    PersistenceError,
    UpstreamUnavailable,
)
from ordquiz.models.quiz import GameMode, QuizItem
from ordquiz.utils import percentage_of, round_half_up

log = logging.getLogger(__name__)

NOTICE_NO_QUESTIONS = "Kunde inte hämta frågor. Försök igen!"
NOTICE_CONNECTION = "Ett fel uppstod. Kontrollera din anslutning."
NOTICE_GENERATION = "Kunde inte generera AI-frågor. Försök igen!"
NOTICE_NOT_SAVED = "Resultatet kunde inte sparas."


class SessionStatus(str, enum.Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    IN_PROGRESS = "in_progress"
    REVEALED = "revealed"
    FINISHED = "finished"


class QuestionSource(Protocol):
    def fetch_questions(self, mode: GameMode) -> Sequence[QuizItem]: ...


class ScoreSink(Protocol):
    def submit_score(self, payload: dict[str, Any]) -> None: ...


@dataclass(frozen=True)
class SessionResult:
    """Outcome shown on the results view and sent to the leaderboard."""

    score: int
    total: int
    mode: GameMode

    @property
    def percentage(self) -> float:
        return percentage_of(self.score, self.total)

    def to_payload(self, guest_name: str | None = None) -> dict[str, Any]:
        return {
            "score": self.score,
            "total": self.total,
            "percentage": self.percentage,
            "time": 0,
            "guestName": guest_name,
            "mode": self.mode.value,
        }


class QuizSession:
    """Finite-state controller for one play-through."""

    def __init__(
        self,
        source: QuestionSource,
        sink: ScoreSink | None = None,
        guest_name: str | None = None,
    ):
        self.source = source
        self.sink = sink
        self.guest_name = guest_name
        self.status = SessionStatus.NOT_STARTED
        self.mode: GameMode | None = None
        self.notice: str | None = None
        self._reset()

    def _reset(self) -> None:
        self.items: list[QuizItem] = []
        self.current_index = 0
        self.score = 0
        self.selected_option: str | None = None
        self.revealed = False
        self.result: SessionResult | None = None
        self.submitted = False

    # ---- read-only views ----
    @property
    def current_item(self) -> QuizItem | None:
        if self.status not in (SessionStatus.IN_PROGRESS, SessionStatus.REVEALED):
            return None
        return self.items[self.current_index]

    @property
    def is_last(self) -> bool:
        return self.current_index >= len(self.items) - 1

    @property
    def revealed_count(self) -> int:
        """Items the player has seen an outcome for."""
        return self.current_index + (1 if self.revealed else 0)

    @property
    def precision(self) -> int:
        """Live share of correct answers in whole percent."""
        seen = self.revealed_count
        if seen == 0:
            return 0
        return round_half_up(100 * self.score / seen)

    @property
    def progress(self) -> float | None:
        """Fraction of the set reached, None for unbounded runs."""
        if self.mode is GameMode.MARATON or not self.items:
            return None
        return (self.current_index + 1) / len(self.items)

    # ---- actions ----
    def start(self, mode: GameMode) -> bool:
        """
        Load a question set and begin at the first item.

        Returns False (with ``notice`` set) when nothing could be loaded.
        """
        if self.status in (
            SessionStatus.LOADING,
            SessionStatus.IN_PROGRESS,
            SessionStatus.REVEALED,
        ):
            raise InvalidTransition(f"Cannot start while {self.status.value}")

        self._reset()
        self.mode = mode
        self.notice = None
        self.status = SessionStatus.LOADING

        try:
            items = list(self.source.fetch_questions(mode))
        except GenerationParseError as exc:
            log.warning("Question generation failed: %s", exc)
            return self._abort_start(NOTICE_GENERATION)
        except UpstreamUnavailable as exc:
            log.warning("Question fetch failed: %s", exc)
            return self._abort_start(NOTICE_CONNECTION)

        if not items:
            return self._abort_start(NOTICE_NO_QUESTIONS)

        self.items = items
        self.status = SessionStatus.IN_PROGRESS
        log.info("Started %s with %d questions", mode.value, len(items))
        return True

    def _abort_start(self, notice: str) -> bool:
        self._reset()
        self.notice = notice
        self.status = SessionStatus.NOT_STARTED
        return False

    def select_option(self, key: str) -> bool:
        """
        Answer the current item.

        Returns whether the answer was correct. A repeated call after the
        outcome is shown changes nothing.
        """
        if self.status is SessionStatus.REVEALED:
            return self.selected_option == self.items[self.current_index].answer
        if self.status is not SessionStatus.IN_PROGRESS:
            raise InvalidTransition(f"Cannot answer while {self.status.value}")

        item = self.items[self.current_index]
        if key not in item.options:
            raise ValueError(f"Unknown option {key!r} for {item.word}")

        self.selected_option = key
        self.revealed = True
        self.status = SessionStatus.REVEALED
        correct = item.is_correct(key)
        if correct:
            self.score += 1
        return correct

    def advance(self) -> None:
        """Move to the next item, or finish after the last one."""
        if self.status is not SessionStatus.REVEALED:
            raise InvalidTransition(f"Cannot advance while {self.status.value}")

        if self.is_last:
            self._finish(self.current_index + 1)
            return

        self.current_index += 1
        self.selected_option = None
        self.revealed = False
        self.status = SessionStatus.IN_PROGRESS

    def finish_early(self) -> SessionResult:
        """Quit; an unanswered current item is left out of the result."""
        if self.status not in (SessionStatus.IN_PROGRESS, SessionStatus.REVEALED):
            raise InvalidTransition(f"Cannot finish while {self.status.value}")
        self._finish(self.revealed_count)
        return self.result

    def _finish(self, total: int) -> None:
        self.status = SessionStatus.FINISHED
        self.result = SessionResult(score=self.score, total=total, mode=self.mode)
        log.info("Finished %s: %d/%d", self.mode.value, self.score, total)
        self._submit()

    def _submit(self) -> None:
        if self.sink is None or self.result is None:
            return
        if self.result.total == 0:
            # Nothing answered, nothing to rank
            return
        try:
            self.sink.submit_score(self.result.to_payload(self.guest_name))
        except (PersistenceError, UpstreamUnavailable) as exc:
            log.warning("Score was not saved: %s", exc)
            self.notice = NOTICE_NOT_SAVED
            return
        self.submitted = True
