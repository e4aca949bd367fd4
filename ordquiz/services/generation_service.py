"""
Question generation through Google Gemini.

Provides:
- GeminiModel: thin wrapper around google-generativeai
- parse_question_reply(text) -> list[dict]
- generate_questions(count, model) -> list[QuizItem]
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, Protocol

import google.generativeai as genai
from google.api_core.exceptions import GoogleAPIError

from ordquiz.errors import GenerationParseError, UpstreamUnavailable
from ordquiz.models.quiz import QuizItem
from ordquiz.services.selector import valid_items

log = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Du är en expert på Högskoleprovet (HP) i Sverige. Din uppgift är att generera {count} helt nya ord-frågor i exakt samma stil och svårighetsgrad som ORD-delen på HP.

Regler:
1. Välj ovanliga men riktiga svenska ord (substantiv, verb, adjektiv, adverb).
2. Orden ska INTE vara vanliga vardagsord utan mer akademiska/litterära ord.
3. Varje fråga ska ha 5 alternativ (A-E).
4. Exakt ETT alternativ ska vara rätt (synonymen eller närmaste betydelsen).
5. De andra 4 alternativen ska vara trovärdiga distraktorer.
6. Svara ENDAST med giltig JSON utan markdown-formatering.

Returnera exakt detta format (en JSON-array):
[
  {{
    "word": "exemplum",
    "options": {{
      "A": "alternativ 1",
      "B": "alternativ 2",
      "C": "alternativ 3",
      "D": "alternativ 4",
      "E": "alternativ 5"
    }},
    "answer": "C",
    "year": "AI",
    "term": "genererad",
    "source": "gemini"
  }}
]

Generera {count} frågor nu:"""

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


class TextModel(Protocol):
    """Anything that turns a prompt into reply text."""

    model_name: str

    def generate(self, contents: Any) -> str: ...


class GeminiModel:
    """
    Gemini model wrapper.

    Errors from the API are raised as UpstreamUnavailable so callers can
    tell them apart from replies that cannot be parsed.
    """

    def __init__(self, api_key: str, model_name: str):
        self.api_key = api_key
        self.model_name = model_name
        if api_key:
            genai.configure(api_key=api_key)

    def generate(self, contents: Any) -> str:
        if not self.api_key:
            raise UpstreamUnavailable("GEMINI_API_KEY is not configured")
        try:
            model = genai.GenerativeModel(self.model_name)
            response = model.generate_content(contents)
        except GoogleAPIError as exc:
            raise UpstreamUnavailable(f"{self.model_name}: {exc}") from exc

        try:
            return response.text
        except ValueError as exc:
            # Blocked or empty candidates have no text part
            raise GenerationParseError(f"{self.model_name} returned no text: {exc}") from exc


def build_prompt(count: int) -> str:
    return PROMPT_TEMPLATE.format(count=count)


def parse_question_reply(text: str) -> list[dict[str, Any]]:
    """Extract the JSON array of question objects from a model reply."""
    if not isinstance(text, str) or not text.strip():
        raise GenerationParseError("Empty reply from model", raw_text=text or "")

    cleaned = _FENCE_RE.sub("", text).strip()
    match = _ARRAY_RE.search(cleaned)
    if not match:
        raise GenerationParseError("Could not parse AI response", raw_text=text)

    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise GenerationParseError(f"Invalid JSON in AI response: {exc}", raw_text=text) from exc

    if not isinstance(data, list):
        raise GenerationParseError("AI response is not a list", raw_text=text)
    return [entry for entry in data if isinstance(entry, dict)]


def items_from_reply(text: str, defaults: dict[str, Any] | None = None) -> list[QuizItem]:
    """Parse a reply and keep only items that satisfy the invariants."""
    entries = parse_question_reply(text)
    if defaults:
        entries = [{**defaults, **entry} for entry in entries]
    return valid_items(QuizItem.from_dict(entry) for entry in entries)


def generate_questions(count: int, model: TextModel) -> list[QuizItem]:
    """Ask the model for ``count`` new questions."""
    log.info("Generating %d questions with %s", count, model.model_name)
    text = model.generate(build_prompt(count))
    items = items_from_reply(text, defaults={"year": "AI", "term": "genererad", "source": "gemini"})
    if not items:
        raise GenerationParseError("AI response contained no usable questions", raw_text=text)
    log.info("Generated %d usable questions", len(items))
    return items[:count]


def probe_models(names: Iterable[str], api_key: str) -> str | None:
    """Return the first model name that answers a trivial prompt."""
    for name in names:
        model = GeminiModel(api_key, name)
        try:
            model.generate("test")
        except (UpstreamUnavailable, GenerationParseError) as exc:
            log.info("Model %s failed: %s", name, exc)
            continue
        log.info("Model %s works", name)
        return name
    return None
