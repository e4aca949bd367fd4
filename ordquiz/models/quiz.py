"""
Quiz items and play modes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from ordquiz.errors import DataQualityError

OPTION_KEYS = ("A", "B", "C", "D", "E")

# Placeholders the extraction model emits when it cannot read a field
SENTINEL_VALUES = frozenset({"n/a", "unknown"})


def _is_blank_or_sentinel(value: object) -> bool:
    if not isinstance(value, str):
        return True
    cleaned = value.strip()
    return not cleaned or cleaned.lower() in SENTINEL_VALUES


def _as_text(value: object) -> str:
    # Non-string values are treated as blank so validation drops them
    return value if isinstance(value, str) else ""


class GameMode(str, enum.Enum):
    """Play configuration; also the leaderboard partition."""

    STORA = "stora"
    SNABB = "snabb"
    MARATON = "maraton"
    AI = "ai"

    @property
    def question_limit(self) -> int | None:
        """Number of items requested for the mode, None when unbounded."""
        return MODE_LIMITS[self]

    @property
    def is_generated(self) -> bool:
        return self is GameMode.AI


MODE_LIMITS: dict[GameMode, int | None] = {
    GameMode.STORA: 40,
    GameMode.SNABB: 10,
    GameMode.MARATON: None,
    GameMode.AI: 10,
}

MODE_TITLES: dict[GameMode, str] = {
    GameMode.STORA: "Stora Provet",
    GameMode.SNABB: "Snabbträning",
    GameMode.MARATON: "Maraton",
    GameMode.AI: "AI-Läge",
}


@dataclass(frozen=True)
class QuizItem:
    """One vocabulary question: a word, labelled options and the correct label."""

    word: str
    options: Mapping[str, str]
    answer: str
    year: int | str | None = None
    term: str = ""
    source: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    def __hash__(self) -> int:
        return hash((self.word, tuple(sorted(self.options.items())), self.answer, self.source))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QuizItem:
        """Build an item from a raw bank entry without validating it."""
        raw_options = data.get("options")
        options: dict[str, str] = {}
        if isinstance(raw_options, Mapping):
            for key, value in raw_options.items():
                options[str(key)] = _as_text(value)

        known = {"word", "options", "answer", "year", "term", "source"}
        return cls(
            word=_as_text(data.get("word")),
            options=options,
            answer=_as_text(data.get("answer")),
            year=data.get("year"),
            term=str(data.get("term") or ""),
            source=str(data.get("source") or ""),
            extra={k: v for k, v in data.items() if k not in known},
        )

    def validate(self) -> None:
        """Raise DataQualityError naming the first broken invariant."""
        if _is_blank_or_sentinel(self.word):
            raise DataQualityError("word is missing")
        if not self.options:
            raise DataQualityError(f"{self.word}: options are missing")
        for key, value in self.options.items():
            if _is_blank_or_sentinel(value):
                raise DataQualityError(f"{self.word}: option {key} is missing")
        if _is_blank_or_sentinel(self.answer):
            raise DataQualityError(f"{self.word}: answer is missing")
        if self.answer not in self.options:
            raise DataQualityError(
                f"{self.word}: answer {self.answer} is not one of the options"
            )

    def is_valid(self) -> bool:
        try:
            self.validate()
        except DataQualityError:
            return False
        return True

    def is_correct(self, key: str) -> bool:
        return key == self.answer

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = dict(self.extra)
        payload.update(
            {
                "word": self.word,
                "options": dict(self.options),
                "answer": self.answer,
                "year": self.year,
                "term": self.term,
                "source": self.source,
            }
        )
        return payload
