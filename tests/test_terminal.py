from ordquiz.client.terminal import TerminalQuiz
from ordquiz.errors import UpstreamUnavailable
from ordquiz.models.quiz import GameMode

from conftest import make_item


class FakeClient:
    def __init__(self, items=None, leaderboard=None, leaderboard_error=None):
        self.items = items or []
        self.leaderboard = leaderboard or []
        self.leaderboard_error = leaderboard_error
        self.submitted = []
        self.leaderboard_modes = []

    def fetch_questions(self, mode):
        return list(self.items)

    def submit_score(self, payload):
        self.submitted.append(payload)

    def fetch_leaderboard(self, mode):
        self.leaderboard_modes.append(mode)
        if self.leaderboard_error is not None:
            raise self.leaderboard_error
        return self.leaderboard


def _terminal(client, answers, guest_name=None):
    inputs = iter(answers)
    lines = []
    quiz = TerminalQuiz(client, guest_name, input_fn=lambda prompt: next(inputs), output_fn=lines.append)
    return quiz, lines


def test_play_full_set() -> None:
    client = FakeClient([make_item("idog", answer="A"), make_item("lakonisk", answer="B")])
    quiz, lines = _terminal(client, ["a", "", "c", ""], guest_name="Kalle")

    quiz.play(GameMode.SNABB)

    assert "Rätt!" in lines
    assert "Fel. Rätt svar: B. y" in lines
    assert "  50%" in lines
    assert "  1 rätt av 2 ord (snabb)" in lines
    assert "Ditt resultat har sparats under namnet: Kalle" in lines
    assert client.submitted[0]["total"] == 2


def test_play_ignores_unknown_keys_and_quits() -> None:
    client = FakeClient([make_item(f"ord{i}") for i in range(5)])
    quiz, lines = _terminal(client, ["x", "A", "", "q"])

    quiz.play(GameMode.MARATON)

    assert "  1 rätt av 1 ord (maraton)" in lines
    assert client.submitted[0]["score"] == 1


def test_play_without_questions_shows_notice() -> None:
    quiz, lines = _terminal(FakeClient([]), [])
    quiz.play(GameMode.STORA)
    assert lines[-1] == "Kunde inte hämta frågor. Försök igen!"


def test_run_asks_name_then_plays_menu_choice() -> None:
    client = FakeClient([make_item("idog")])
    quiz, lines = _terminal(client, ["Greta", "3", "A", "", "q"])
    quiz.run()
    assert "  1 rätt av 1 ord (snabb)" in lines
    assert client.submitted[0]["guestName"] == "Greta"


def test_run_blank_name_plays_as_anonymous() -> None:
    client = FakeClient([make_item("idog")])
    quiz, lines = _terminal(client, ["", "5", "", "q"])
    quiz.run()
    assert quiz.session.guest_name is None
    assert "Här var det tomt än så länge..." in lines
    assert client.leaderboard_modes == [GameMode.MARATON]


def test_run_leaderboard_for_chosen_mode() -> None:
    client = FakeClient()
    quiz, lines = _terminal(client, ["Kalle", "5", "3", "5", "stora", "5", "x", "4", "q"])
    quiz.run()
    assert client.leaderboard_modes == [GameMode.SNABB, GameMode.STORA, GameMode.AI]
    assert "Topplista (snabb)" in lines


def test_leaderboard_rendering() -> None:
    client = FakeClient(leaderboard=[{"userName": "Astrid", "total": 40, "percentage": 97.5}])
    quiz, lines = _terminal(client, [])
    quiz.show_leaderboard(GameMode.STORA)
    assert "  1. Astrid  40 ord  98%" in lines


def test_leaderboard_empty_and_error() -> None:
    quiz, lines = _terminal(FakeClient(), [])
    quiz.show_leaderboard(GameMode.SNABB)
    assert lines[-1] == "Här var det tomt än så länge..."

    quiz, lines = _terminal(FakeClient(leaderboard_error=UpstreamUnavailable("down")), [])
    quiz.show_leaderboard(GameMode.SNABB)
    assert lines[-1] == "Kunde inte hämta topplistan. Försök igen!"
