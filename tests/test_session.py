import pytest

from ordquiz.client.session import (
    NOTICE_CONNECTION,
    NOTICE_GENERATION,
    NOTICE_NO_QUESTIONS,
    NOTICE_NOT_SAVED,
    QuizSession,
    SessionStatus,
)
from ordquiz.errors import (
    GenerationParseError,
    InvalidTransition,
    PersistenceError,
    UpstreamUnavailable,
)
from ordquiz.models.quiz import GameMode

from conftest import make_item


class FakeSource:
    def __init__(self, items=None, error: Exception | None = None):
        self.items = items or []
        self.error = error
        self.modes = []

    def fetch_questions(self, mode):
        self.modes.append(mode)
        if self.error is not None:
            raise self.error
        return list(self.items)


class FakeSink:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.payloads = []

    def submit_score(self, payload):
        if self.error is not None:
            raise self.error
        self.payloads.append(payload)


def _items(count: int):
    return [make_item(f"ord{i}", answer="A") for i in range(count)]


def test_start_enters_first_item() -> None:
    session = QuizSession(FakeSource(_items(3)))
    assert session.start(GameMode.SNABB)
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.current_index == 0
    assert session.score == 0
    assert session.current_item.word == "ord0"
    assert session.progress == pytest.approx(1 / 3)


def test_answer_is_idempotent() -> None:
    session = QuizSession(FakeSource(_items(2)))
    session.start(GameMode.SNABB)

    assert session.select_option("A") is True
    assert session.status is SessionStatus.REVEALED
    assert session.select_option("B") is True
    assert session.selected_option == "A"
    assert session.score == 1


def test_wrong_answer_keeps_score() -> None:
    session = QuizSession(FakeSource(_items(2)))
    session.start(GameMode.SNABB)
    assert session.select_option("C") is False
    assert session.score == 0
    assert session.precision == 0


def test_unknown_option_is_rejected() -> None:
    session = QuizSession(FakeSource(_items(1)))
    session.start(GameMode.SNABB)
    with pytest.raises(ValueError):
        session.select_option("Q")
    assert session.status is SessionStatus.IN_PROGRESS


def test_precision_rounds_half_up() -> None:
    session = QuizSession(FakeSource(_items(8)))
    session.start(GameMode.STORA)
    # 1 of 8 correct is 12.5%
    session.select_option("A")
    for _ in range(7):
        session.advance()
        session.select_option("B")
    assert session.revealed_count == 8
    assert session.precision == 13


def test_full_run_submits_result() -> None:
    sink = FakeSink()
    session = QuizSession(FakeSource(_items(2)), sink, guest_name="Kalle")
    session.start(GameMode.SNABB)
    session.select_option("A")
    session.advance()
    session.select_option("D")
    session.advance()

    assert session.status is SessionStatus.FINISHED
    assert session.result.score == 1
    assert session.result.total == 2
    assert session.submitted
    payload = sink.payloads[0]
    assert payload["score"] == 1
    assert payload["total"] == 2
    assert payload["percentage"] == 50.0
    assert payload["guestName"] == "Kalle"
    assert payload["mode"] == "snabb"


def test_maraton_quit_before_answering_current_item() -> None:
    sink = FakeSink()
    session = QuizSession(FakeSource(_items(100)), sink)
    session.start(GameMode.MARATON)
    assert session.progress is None

    session.select_option("A")
    session.advance()
    session.select_option("B")
    session.advance()
    result = session.finish_early()

    assert session.status is SessionStatus.FINISHED
    assert (result.score, result.total) == (1, 2)
    assert sink.payloads[0]["score"] == 1
    assert sink.payloads[0]["total"] == 2
    assert sink.payloads[0]["mode"] == "maraton"


def test_quit_after_reveal_counts_current_item() -> None:
    session = QuizSession(FakeSource(_items(5)), FakeSink())
    session.start(GameMode.MARATON)
    session.select_option("A")
    result = session.finish_early()
    assert (result.score, result.total) == (1, 1)


def test_quit_without_answers_is_not_submitted() -> None:
    sink = FakeSink()
    session = QuizSession(FakeSource(_items(5)), sink)
    session.start(GameMode.MARATON)
    result = session.finish_early()
    assert result.total == 0
    assert result.percentage == 0.0
    assert sink.payloads == []
    assert not session.submitted


def test_score_never_exceeds_answered() -> None:
    session = QuizSession(FakeSource(_items(6)))
    session.start(GameMode.SNABB)
    while True:
        session.select_option("A")
        session.select_option("A")
        assert session.score <= session.revealed_count
        if session.is_last:
            break
        session.advance()
    session.advance()
    assert session.result.score == session.result.total == 6


def test_empty_question_set_returns_to_start() -> None:
    session = QuizSession(FakeSource([]))
    assert not session.start(GameMode.SNABB)
    assert session.status is SessionStatus.NOT_STARTED
    assert session.notice == NOTICE_NO_QUESTIONS


@pytest.mark.parametrize(
    "error,notice",
    [
        (GenerationParseError("bad reply"), NOTICE_GENERATION),
        (UpstreamUnavailable("offline"), NOTICE_CONNECTION),
    ],
)
def test_fetch_failures_set_notice(error: Exception, notice: str) -> None:
    session = QuizSession(FakeSource(error=error))
    assert not session.start(GameMode.AI)
    assert session.status is SessionStatus.NOT_STARTED
    assert session.notice == notice
    assert session.items == []


def test_persistence_failure_keeps_result() -> None:
    session = QuizSession(FakeSource(_items(1)), FakeSink(PersistenceError("db down")))
    session.start(GameMode.SNABB)
    session.select_option("A")
    session.advance()
    assert session.status is SessionStatus.FINISHED
    assert session.result.score == 1
    assert not session.submitted
    assert session.notice == NOTICE_NOT_SAVED


def test_invalid_transitions() -> None:
    session = QuizSession(FakeSource(_items(2)))
    with pytest.raises(InvalidTransition):
        session.select_option("A")
    with pytest.raises(InvalidTransition):
        session.advance()
    with pytest.raises(InvalidTransition):
        session.finish_early()

    session.start(GameMode.SNABB)
    with pytest.raises(InvalidTransition):
        session.advance()
    with pytest.raises(InvalidTransition):
        session.start(GameMode.SNABB)


def test_restart_after_finish() -> None:
    source = FakeSource(_items(1))
    session = QuizSession(source)
    session.start(GameMode.SNABB)
    session.select_option("A")
    session.advance()
    assert session.status is SessionStatus.FINISHED

    assert session.start(GameMode.STORA)
    assert session.score == 0
    assert session.result is None
    assert source.modes == [GameMode.SNABB, GameMode.STORA]
