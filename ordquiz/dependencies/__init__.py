"""FastAPI dependencies."""
from ordquiz.dependencies.auth import get_optional_identity
from ordquiz.dependencies.questions import get_question_bank, get_text_model

__all__ = ["get_optional_identity", "get_question_bank", "get_text_model"]
