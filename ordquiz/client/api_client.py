from __future__ import annotations

import logging
from typing import Any

import requests

from ordquiz.config import HTTP_TIMEOUT_SECONDS, QUIZ_API_URL
from ordquiz.errors import GenerationParseError, PersistenceError, UpstreamUnavailable
from ordquiz.models.quiz import GameMode, QuizItem

log = logging.getLogger(__name__)


class QuizApiClient:
    """
    HTTP client for the quiz service.

    Every call makes one attempt bounded by ``timeout``; transport and
    HTTP failures are raised as the quiz error types.
    """

    def __init__(
        self,
        base_url: str = QUIZ_API_URL,
        token: str | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            log.warning("%s %s failed: %s", method, url, exc)
            raise UpstreamUnavailable(f"{method} {path} failed: {exc}") from exc

    @staticmethod
    def _json(response: requests.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamUnavailable(f"Invalid JSON from {response.url}") from exc
        if not isinstance(data, dict):
            raise UpstreamUnavailable(f"Unexpected payload from {response.url}")
        return data

    @staticmethod
    def _items(data: dict[str, Any]) -> list[QuizItem]:
        questions = data.get("questions") or []
        return [QuizItem.from_dict(q) for q in questions if isinstance(q, dict)]

    def fetch_questions(self, mode: GameMode) -> list[QuizItem]:
        """Question set for a mode (generated for the AI mode)."""
        if mode.is_generated:
            return self.generate_questions(mode.question_limit or 10)

        limit = mode.question_limit
        params = {"limit": "all" if limit is None else limit}
        response = self._request("GET", "/api/questions", params=params)
        if response.status_code >= 400:
            raise UpstreamUnavailable(f"Question fetch failed ({response.status_code})")
        return self._items(self._json(response))

    def generate_questions(self, count: int) -> list[QuizItem]:
        response = self._request("GET", "/api/ai-questions", params={"count": count})
        if response.status_code == 500:
            data = self._json(response)
            raise GenerationParseError(
                data.get("error") or "Failed to generate AI questions",
                raw_text=str(data.get("details") or ""),
            )
        if response.status_code >= 400:
            raise UpstreamUnavailable(f"AI generation failed ({response.status_code})")
        return self._items(self._json(response))

    def submit_score(self, payload: dict[str, Any]) -> None:
        try:
            response = self._request("POST", "/api/scores", json=payload)
        except UpstreamUnavailable as exc:
            raise PersistenceError(str(exc)) from exc
        if response.status_code >= 400:
            raise PersistenceError(f"Score submission failed ({response.status_code})")

    def fetch_leaderboard(self, mode: GameMode) -> list[dict[str, Any]]:
        response = self._request("GET", "/api/scores", params={"mode": mode.value})
        if response.status_code >= 400:
            raise UpstreamUnavailable(f"Leaderboard fetch failed ({response.status_code})")
        leaderboard = self._json(response).get("leaderboard") or []
        return [entry for entry in leaderboard if isinstance(entry, dict)]
