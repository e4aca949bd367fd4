"""Question endpoints."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from ordquiz.config import AI_DEFAULT_COUNT, AI_MAX_COUNT, DEFAULT_QUESTION_LIMIT
from ordquiz.dependencies import get_question_bank, get_text_model
from ordquiz.errors import GenerationParseError, UpstreamUnavailable
from ordquiz.models import (
    GameMode,
    GenerationFailedResponse,
    ModeOut,
    MODE_TITLES,
    QuestionsResponse,
)
from ordquiz.services.generation_service import TextModel, generate_questions
from ordquiz.services.question_bank import QuestionBank
from ordquiz.services.selector import select_questions
from ordquiz.utils import parse_limit

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["questions"])


@router.get("/questions", response_model=QuestionsResponse)
def get_questions(
    bank: Annotated[QuestionBank, Depends(get_question_bank)],
    limit: str | None = Query(None),
) -> dict[str, object]:
    """Random question set from the bank.

    ``limit`` falls back to the default when missing or invalid; ``all``
    returns every valid question.
    """
    size = parse_limit(limit, DEFAULT_QUESTION_LIMIT)
    items = select_questions(bank, size)
    if not items:
        log.warning("No questions available (bank size %d)", len(bank))
    return {"questions": [item.to_dict() for item in items]}


@router.get(
    "/ai-questions",
    response_model=QuestionsResponse,
    responses={500: {"model": GenerationFailedResponse}, 502: {"model": GenerationFailedResponse}},
)
def get_ai_questions(
    model: Annotated[TextModel, Depends(get_text_model)],
    count: str | None = Query(None),
) -> object:
    """Freshly generated questions."""
    size = parse_limit(count, AI_DEFAULT_COUNT) or AI_DEFAULT_COUNT
    size = min(size, AI_MAX_COUNT)

    try:
        items = generate_questions(size, model)
    except GenerationParseError as exc:
        log.error(f"AI questions could not be parsed: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "questions": [],
                "error": "Failed to generate AI questions",
                "details": str(exc),
            },
        )
    except UpstreamUnavailable as exc:
        log.error(f"AI service unavailable: {exc}")
        return JSONResponse(
            status_code=502,
            content={
                "questions": [],
                "error": "AI service unavailable",
                "details": str(exc),
            },
        )

    return {"questions": [item.to_dict() for item in items]}


@router.get("/modes", response_model=list[ModeOut])
def list_modes() -> list[dict[str, object]]:
    """Available play modes."""
    return [
        {
            "id": mode.value,
            "title": MODE_TITLES[mode],
            "limit": mode.question_limit,
            "generated": mode.is_generated,
        }
        for mode in GameMode
    ]
