"""
Question bank loaded from the ingestion output.

The bank is read once at startup and then only read. A missing or broken
file gives an empty bank so the service still starts and callers treat
"no questions" as a normal state.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from ordquiz.models.quiz import QuizItem
from ordquiz.utils import read_json_file

log = logging.getLogger(__name__)


class QuestionBank(Sequence[QuizItem]):
    """Immutable ordered collection of quiz items."""

    def __init__(self, items: Iterable[QuizItem] = (), path: Path | None = None):
        self._items: tuple[QuizItem, ...] = tuple(items)
        self.path = path

    @classmethod
    def load(cls, path: Path) -> QuestionBank:
        path = Path(path)
        if not path.exists():
            log.warning("Question bank not found: %s", path)
            return cls((), path)

        try:
            data = read_json_file(path, [])
        except (OSError, json.JSONDecodeError) as exc:
            log.error("Failed to read question bank %s: %s", path, exc)
            return cls((), path)

        if not isinstance(data, list):
            log.error("Question bank %s is not a JSON array", path)
            return cls((), path)

        items = []
        skipped = 0
        for entry in data:
            if not isinstance(entry, dict):
                skipped += 1
                continue
            items.append(QuizItem.from_dict(entry))

        if skipped:
            log.warning("Skipped %d non-object entries in %s", skipped, path)
        log.info("Loaded %d questions from %s", len(items), path)
        return cls(items, path)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[QuizItem]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"<QuestionBank(items={len(self._items)}, path='{self.path}')>"
