"""Question source dependencies for FastAPI."""
from fastapi import Request

from ordquiz.config import GEMINI_API_KEY, GEMINI_MODEL
from ordquiz.services.generation_service import GeminiModel, TextModel
from ordquiz.services.question_bank import QuestionBank


def get_question_bank(request: Request) -> QuestionBank:
    """Question bank loaded at startup."""
    bank = getattr(request.app.state, "question_bank", None)
    if bank is None:
        return QuestionBank()
    return bank


def get_text_model() -> TextModel:
    """Model used for AI questions."""
    return GeminiModel(GEMINI_API_KEY, GEMINI_MODEL)
