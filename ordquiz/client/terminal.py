"""Terminal front end for the quiz session."""
from __future__ import annotations

import logging
from typing import Callable

from ordquiz.client.api_client import QuizApiClient
from ordquiz.client.session import QuizSession, SessionStatus
from ordquiz.errors import UpstreamUnavailable
from ordquiz.models.quiz import GameMode, MODE_TITLES
from ordquiz.utils import round_half_up

log = logging.getLogger(__name__)

MENU_MODES = [GameMode.MARATON, GameMode.STORA, GameMode.SNABB, GameMode.AI]
QUIT_KEYS = {"q", "avsluta"}


class TerminalQuiz:
    """Reads keys, dispatches session actions and prints the state."""

    def __init__(
        self,
        client: QuizApiClient,
        guest_name: str | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.client = client
        self.input = input_fn
        self.output = output_fn
        self.session = QuizSession(client, client, guest_name=guest_name)

    def run(self) -> None:
        if self.session.guest_name is None:
            name = self.input("Namn för topplistan (Enter = Anonym): ").strip()
            self.session.guest_name = name or None

        while True:
            choice = self._menu()
            if choice is None:
                return
            if choice == "leaderboard":
                self.show_leaderboard(self._leaderboard_mode())
                continue
            self.play(choice)

    def _menu(self) -> GameMode | str | None:
        self.output("")
        self.output("Högskoleprovet ORD")
        for index, mode in enumerate(MENU_MODES, start=1):
            self.output(f"  {index}. {MODE_TITLES[mode]}")
        self.output(f"  {len(MENU_MODES) + 1}. Topplista")
        self.output("  q. Avsluta")
        while True:
            raw = self.input("> ").strip().lower()
            if raw in QUIT_KEYS:
                return None
            if raw == str(len(MENU_MODES) + 1):
                return "leaderboard"
            if raw.isdigit() and 1 <= int(raw) <= len(MENU_MODES):
                return MENU_MODES[int(raw) - 1]

    def _leaderboard_mode(self) -> GameMode:
        """Ask which mode to rank; Enter keeps Maraton."""
        options = ", ".join(
            f"{index}. {MODE_TITLES[mode]}" for index, mode in enumerate(MENU_MODES, start=1)
        )
        while True:
            raw = self.input(f"Topplista för ({options}, Enter = Maraton): ").strip().lower()
            if not raw:
                return GameMode.MARATON
            if raw.isdigit() and 1 <= int(raw) <= len(MENU_MODES):
                return MENU_MODES[int(raw) - 1]
            for mode in MENU_MODES:
                if raw == mode.value:
                    return mode

    def play(self, mode: GameMode) -> None:
        session = self.session
        self.output("Laddar...")
        if not session.start(mode):
            self.output(session.notice or "")
            return

        while session.status in (SessionStatus.IN_PROGRESS, SessionStatus.REVEALED):
            self._render_item()
            if session.status is SessionStatus.IN_PROGRESS:
                raw = self.input("Svar (A-E, q = avsluta): ").strip()
                if raw.lower() in QUIT_KEYS:
                    session.finish_early()
                    break
                key = raw.upper()
                if key not in session.current_item.options:
                    continue
                session.select_option(key)
                self._render_outcome()
            else:
                raw = self.input("Enter = nästa ord, q = avsluta: ").strip()
                if raw.lower() in QUIT_KEYS:
                    session.finish_early()
                else:
                    session.advance()

        self._render_result()

    def _render_item(self) -> None:
        session = self.session
        item = session.current_item
        if session.status is SessionStatus.REVEALED:
            return
        self.output("")
        self.output(f"{item.year} {item.term.upper()}  |  {session.current_index + 1} ord körda ({session.mode.value})")
        self.output(f"  {item.word}")
        for key, text in item.options.items():
            self.output(f"    {key}. {text}")
        self.output(f"Precision: {session.precision}%")

    def _render_outcome(self) -> None:
        session = self.session
        item = session.current_item
        if session.selected_option == item.answer:
            self.output("Rätt!")
        else:
            self.output(f"Fel. Rätt svar: {item.answer}. {item.options[item.answer]}")
        self.output(f"Precision: {session.precision}%")

    def _render_result(self) -> None:
        result = self.session.result
        if result is None:
            return
        self.output("")
        self.output("Resultat")
        self.output(f"  {round_half_up(result.percentage)}%")
        self.output(f"  {result.score} rätt av {result.total} ord ({result.mode.value})")
        if self.session.notice:
            self.output(self.session.notice)
        elif self.session.submitted:
            name = self.session.guest_name or "Anonym"
            self.output(f"Ditt resultat har sparats under namnet: {name}")

    def show_leaderboard(self, mode: GameMode) -> None:
        try:
            entries = self.client.fetch_leaderboard(mode)
        except UpstreamUnavailable as exc:
            log.warning("Leaderboard unavailable: %s", exc)
            self.output("Kunde inte hämta topplistan. Försök igen!")
            return

        self.output("")
        self.output(f"Topplista ({mode.value})")
        if not entries:
            self.output("Här var det tomt än så länge...")
            return
        for index, entry in enumerate(entries, start=1):
            percentage = round_half_up(float(entry.get("percentage") or 0))
            self.output(f"  {index}. {entry.get('userName')}  {entry.get('total')} ord  {percentage}%")
