from __future__ import annotations

import dataclasses
import logging
import time
from pathlib import Path
from typing import Callable

from ordquiz.errors import GenerationParseError, UpstreamUnavailable
from ordquiz.models.quiz import QuizItem
from ordquiz.services.generation_service import TextModel, items_from_reply
from ordquiz.utils import read_json_file, write_json_file

log = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"

EXTRACTION_PROMPT = """
Extract all "ORD" (Vocabulary) questions from this Högskoleprov PDF.
The ORD section usually has 10 questions where you have a word and 5 options (A-E).

For each question, also identify the correct answer based on your knowledge of Swedish and Högskoleprovet.

Return the result as a JSON array of objects:
{{
  "word": "string",
  "options": {{ "A": "...", "B": "...", "C": "...", "D": "...", "E": "..." }},
  "answer": "A" | "B" | "C" | "D" | "E",
  "questionNumber": number,
  "year": {year},
  "term": "{term}"
}}

Only return the JSON array, no other text.
IMPORTANT: If you cannot find valid word or options for a question, do not include it in the JSON array. Do not use placeholders like "N/A" or "Unknown".
"""


class OrdPdfExtractor:
    def __init__(
            self,
            file_path: Path,
            year: int | str,
            term: str,
            model: TextModel,
    ):
        self.file_path = Path(file_path)
        self.year = year
        self.term = term
        self.model = model
        self.logs: list[str] = []  # short progress lines for the CLI

    def _prompt(self) -> str:
        return EXTRACTION_PROMPT.format(year=self.year, term=self.term)

    def extract(self) -> list[QuizItem]:
        if not self.file_path.exists():
            raise FileNotFoundError(f"PDF not found: {self.file_path}")

        pdf_data = self.file_path.read_bytes()
        log.info("Sending %s (%d bytes) to %s", self.file_path.name, len(pdf_data), self.model.model_name)
        text = self.model.generate(
            [
                {"mime_type": PDF_MIME_TYPE, "data": pdf_data},
                self._prompt(),
            ]
        )

        items = items_from_reply(text, defaults={"year": self.year, "term": self.term})
        items = [dataclasses.replace(item, source=self.file_path.name) for item in items]
        self.logs.append(f"{self.file_path.name}: {len(items)} questions")
        return items


def load_manifest(manifest_path: Path) -> list[dict[str, object]]:
    data = read_json_file(Path(manifest_path), [])
    if not isinstance(data, list):
        raise ValueError(f"Manifest must be a JSON array: {manifest_path}")
    return [entry for entry in data if isinstance(entry, dict) and entry.get("file")]


def run_manifest(
        manifest_path: Path,
        pdf_dir: Path,
        output_path: Path,
        model: TextModel,
        delay_seconds: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
) -> list[QuizItem]:
    """
    Extract questions from every verbal PDF in the manifest.

    The output file is rewritten after each PDF so a crash keeps what was
    collected. Failures on one PDF are logged and the run continues.
    """
    verbal = [entry for entry in load_manifest(manifest_path) if entry.get("type") == "verbal"]
    log.info("Found %d verbal files to process", len(verbal))

    collected: list[QuizItem] = []
    for entry in verbal:
        filename = Path(str(entry["file"])).name
        file_path = Path(pdf_dir) / filename
        if not file_path.exists():
            log.warning("File %s not found, skipping", filename)
            continue

        log.info("Parsing %s (%s %s)", filename, entry.get("year"), entry.get("term"))
        extractor = OrdPdfExtractor(
            file_path,
            entry.get("year"),
            str(entry.get("term") or ""),
            model,
        )
        try:
            items = extractor.extract()
        except (GenerationParseError, UpstreamUnavailable, OSError) as exc:
            log.error("Error parsing %s: %s", filename, exc)
            continue

        collected.extend(items)
        log.info("Added %d questions", len(items))
        write_json_file(Path(output_path), [item.to_dict() for item in collected])

        # Stay under the model rate limit
        sleep(delay_seconds)

    log.info("Total questions collected: %d", len(collected))
    return collected
